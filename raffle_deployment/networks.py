from types import MappingProxyType
from typing import Mapping, NamedTuple, Union

from ape import networks
from eth_typing import ChecksumAddress
from eth_utils import decode_hex, is_address, is_hexstr, to_checksum_address
from web3 import Web3

from raffle_deployment.constants import (
    APE_LOCAL,
    APE_LOCAL_CHAIN_ID,
    GOERLI,
    GOERLI_CHAIN_ID,
    HARDHAT,
    HARDHAT_CHAIN_ID,
    LOCALHOST,
)
from raffle_deployment.exceptions import ConfigurationError, UnknownChainError

ChainId = int

GAS_LANE_SIZE = 32

#
# Environment classifier
#

DEVELOPMENT_CHAINS = (HARDHAT, LOCALHOST, APE_LOCAL)


def is_development_network(name: str) -> bool:
    """Returns True if the network name belongs to a local/simulated chain."""
    return name in DEVELOPMENT_CHAINS


class ActiveNetwork(NamedTuple):
    name: str
    chain_id: ChainId


def get_active_network() -> ActiveNetwork:
    """Returns the name and chain id of the connected ape network."""
    provider = networks.provider
    return ActiveNetwork(name=provider.network.name, chain_id=provider.chain_id)


#
# Chain profiles
#


class LocalChainProfile(NamedTuple):
    """Raffle parameters for a simulated chain; the coordinator is a mock."""

    chain_id: ChainId
    name: str
    entrance_fee: int
    gas_lane: str
    callback_gas_limit: int
    interval: int


class PublicChainProfile(NamedTuple):
    """Raffle parameters for a public chain with a live VRF coordinator."""

    chain_id: ChainId
    name: str
    entrance_fee: int
    gas_lane: str
    callback_gas_limit: int
    interval: int
    vrf_coordinator: ChecksumAddress
    subscription_id: int


ChainProfile = Union[LocalChainProfile, PublicChainProfile]


def is_public_profile(profile: ChainProfile) -> bool:
    return isinstance(profile, PublicChainProfile)


def _validate_gas_lane(gas_lane: str) -> str:
    if not is_hexstr(gas_lane) or len(decode_hex(gas_lane)) != GAS_LANE_SIZE:
        raise ConfigurationError(f"Gas lane '{gas_lane}' is not a {GAS_LANE_SIZE}-byte hex value.")
    return gas_lane.lower()


def _validate_profile(profile: ChainProfile) -> ChainProfile:
    """Checks the opaque hex fields of a profile and normalizes them."""
    profile = profile._replace(gas_lane=_validate_gas_lane(profile.gas_lane))
    if is_public_profile(profile):
        if not is_address(profile.vrf_coordinator):
            raise ConfigurationError(
                f"VRF coordinator '{profile.vrf_coordinator}' for chain {profile.chain_id} "
                "is not a valid address."
            )
        profile = profile._replace(vrf_coordinator=to_checksum_address(profile.vrf_coordinator))
    return profile


def _build_network_config(*profiles: ChainProfile) -> Mapping[ChainId, ChainProfile]:
    config = dict()
    for profile in profiles:
        if profile.chain_id in config:
            raise ConfigurationError(f"Duplicate chain profile for chain id {profile.chain_id}.")
        config[profile.chain_id] = _validate_profile(profile)
    return MappingProxyType(config)


ENTRANCE_FEE = Web3.to_wei("0.01", "ether")
GAS_LANE = "0x114f3da0a805b6a67d6e9cd2ec746f7028f1b7376365af575cfea3550dd1aa04"  # 150 gwei
CALLBACK_GAS_LIMIT = 500_000
INTERVAL = 30  # seconds

NETWORK_CONFIG = _build_network_config(
    PublicChainProfile(
        chain_id=GOERLI_CHAIN_ID,
        name=GOERLI,
        entrance_fee=ENTRANCE_FEE,
        gas_lane=GAS_LANE,
        callback_gas_limit=CALLBACK_GAS_LIMIT,
        interval=INTERVAL,
        vrf_coordinator="0x2Ca8E0C643bDe4C2E08ab1fA0da3401AdAD7734D",
        subscription_id=0,
    ),
    LocalChainProfile(
        chain_id=HARDHAT_CHAIN_ID,
        name=HARDHAT,
        entrance_fee=ENTRANCE_FEE,
        gas_lane=GAS_LANE,
        callback_gas_limit=CALLBACK_GAS_LIMIT,
        interval=INTERVAL,
    ),
    LocalChainProfile(
        chain_id=APE_LOCAL_CHAIN_ID,
        name=APE_LOCAL,
        entrance_fee=ENTRANCE_FEE,
        gas_lane=GAS_LANE,
        callback_gas_limit=CALLBACK_GAS_LIMIT,
        interval=INTERVAL,
    ),
)


def lookup_profile(chain_id: ChainId) -> ChainProfile:
    """Returns the chain profile for a chain id."""
    try:
        return NETWORK_CONFIG[chain_id]
    except KeyError:
        supported = ", ".join(str(c) for c in sorted(NETWORK_CONFIG))
        raise UnknownChainError(
            f"No chain profile for chain id {chain_id}; supported chain ids are {supported}."
        )
