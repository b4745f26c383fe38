from pathlib import Path

from web3 import Web3

import raffle_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(raffle_deployment.__file__).parent
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"

#
# Networks
#

HARDHAT = "hardhat"
LOCALHOST = "localhost"
APE_LOCAL = "local"  # ape's simulated network
GOERLI = "goerli"

HARDHAT_CHAIN_ID = 31337
APE_LOCAL_CHAIN_ID = 1337
GOERLI_CHAIN_ID = 5

#
# Environment
#

PRIVATE_KEY_ENVVAR = "PRIVATE_KEY"
DEPLOYER_PASSPHRASE_ENVVAR = "DEPLOYER_PASSPHRASE"
GOERLI_RPC_URL_ENVVAR = "GOERLI_RPC_URL"
ETHERSCAN_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"

PLACEHOLDER_PRIVATE_KEY = "0xKey"  # only good for local networks
DEPLOYER_ALIAS = "raffle-deployer"

#
# Contracts
#

VRF_COORDINATOR_MOCK = "VRFCoordinatorV2Mock"
RAFFLE = "Raffle"

# VRFCoordinatorV2Mock constructor: flat fee per request and LINK per gas
BASE_FEE = Web3.to_wei("0.25", "ether")  # 0.25 LINK
GAS_PRICE_LINK = Web3.to_wei(1, "gwei")

VRF_SUB_FUND_AMOUNT = Web3.to_wei(2, "ether")  # 2 LINK

#
# Deployment step tags
#

ALL = "all"
MOCKS = "mocks"
RAFFLE_TAG = "raffle"
