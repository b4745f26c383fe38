"""
Network and tooling configuration for deployments.

Framework-side settings (compiler version, dependencies, node URIs) live in
``ape-config.yaml``; this module holds the settings the deployment steps read
at runtime. Secrets come from the environment, optionally via a ``.env`` file.
"""

import os
from typing import Dict, NamedTuple, Optional

from dotenv import load_dotenv

from raffle_deployment.constants import (
    APE_LOCAL,
    APE_LOCAL_CHAIN_ID,
    GOERLI,
    GOERLI_CHAIN_ID,
    GOERLI_RPC_URL_ENVVAR,
    HARDHAT,
    HARDHAT_CHAIN_ID,
    LOCALHOST,
    PLACEHOLDER_PRIVATE_KEY,
    PRIVATE_KEY_ENVVAR,
)
from raffle_deployment.exceptions import (
    ConfigurationError,
    MissingEnvironmentVariable,
    UnknownNetworkError,
)
from raffle_deployment.networks import ActiveNetwork, is_development_network

load_dotenv()

# role -> account index
NAMED_ACCOUNTS = {
    "deployer": 0,
    "player": 1,
}


class NetworkSettings(NamedTuple):
    name: str
    chain_id: int
    block_confirmations: int
    gas_limit: Optional[int] = None
    rpc_url_envvar: Optional[str] = None


NETWORK_SETTINGS: Dict[str, NetworkSettings] = {
    HARDHAT: NetworkSettings(name=HARDHAT, chain_id=HARDHAT_CHAIN_ID, block_confirmations=1),
    LOCALHOST: NetworkSettings(name=LOCALHOST, chain_id=HARDHAT_CHAIN_ID, block_confirmations=1),
    APE_LOCAL: NetworkSettings(name=APE_LOCAL, chain_id=APE_LOCAL_CHAIN_ID, block_confirmations=1),
    GOERLI: NetworkSettings(
        name=GOERLI,
        chain_id=GOERLI_CHAIN_ID,
        block_confirmations=6,
        gas_limit=6_000_000,
        rpc_url_envvar=GOERLI_RPC_URL_ENVVAR,
    ),
}


def get_network_settings(network_name: str) -> NetworkSettings:
    try:
        return NETWORK_SETTINGS[network_name]
    except KeyError:
        raise UnknownNetworkError(
            f"No network settings for '{network_name}'; "
            f"known networks are {', '.join(NETWORK_SETTINGS)}."
        )


def get_private_key(network_name: str) -> str:
    """
    Returns the private key used to sign transactions on the given network.
    Local networks fall back to a placeholder since they sign with test accounts.
    """
    private_key = os.environ.get(PRIVATE_KEY_ENVVAR)
    if private_key:
        return private_key
    if is_development_network(network_name):
        return PLACEHOLDER_PRIVATE_KEY
    raise MissingEnvironmentVariable(
        f"{PRIVATE_KEY_ENVVAR} is not set; it is required to deploy to '{network_name}'."
    )


def get_rpc_url(settings: NetworkSettings) -> Optional[str]:
    """Returns the RPC URL for a network, or None when the network needs none."""
    if settings.rpc_url_envvar is None:
        return None
    rpc_url = os.environ.get(settings.rpc_url_envvar)
    if not rpc_url:
        raise MissingEnvironmentVariable(
            f"{settings.rpc_url_envvar} is not set; it is required to connect to '{settings.name}'."
        )
    return rpc_url


def get_account_index(role: str) -> int:
    try:
        return NAMED_ACCOUNTS[role]
    except KeyError:
        raise ConfigurationError(
            f"Unknown named account '{role}'; expected one of {', '.join(NAMED_ACCOUNTS)}."
        )


def check_chain_id(settings: NetworkSettings, network: ActiveNetwork) -> None:
    """Rejects a public network whose provider reports a different chain than configured."""
    chain_mismatch = settings.chain_id != network.chain_id
    live_deployment = not is_development_network(network.name)
    if chain_mismatch and live_deployment:
        raise ConfigurationError(
            f"chain_id configured for '{network.name}' ({settings.chain_id}) does not match "
            f"chain_id of current network ({network.chain_id})."
        )


def check_network_configuration(network: ActiveNetwork) -> NetworkSettings:
    """Validates everything a deployment to the network needs before it starts."""
    print("Checking network configuration...")
    settings = get_network_settings(network.name)
    check_chain_id(settings, network)
    get_rpc_url(settings)
    get_private_key(network.name)
    return settings
