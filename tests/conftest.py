from unittest.mock import Mock

import pytest

from raffle_deployment.constants import (
    DEPLOYER_PASSPHRASE_ENVVAR,
    ETHERSCAN_API_KEY_ENVVAR,
    GOERLI_RPC_URL_ENVVAR,
    PRIVATE_KEY_ENVVAR,
)
from raffle_deployment.deployer import ContractDeployer

DEPLOYER_ADDRESS = "0xAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TX_HASH = "0x" + "ab" * 32


def make_instance(name, address=CONTRACT_ADDRESS, chain_id=31337, block_number=1):
    """Builds a stand-in for a deployed ape contract instance."""
    abi_entry = Mock()
    abi_entry.model_dump.return_value = {"type": "constructor", "inputs": []}
    instance = Mock()
    instance.address = address
    instance.contract_type.name = name
    instance.contract_type.abi = [abi_entry]
    instance.receipt.chain_id = chain_id
    instance.receipt.txn_hash = TX_HASH
    instance.receipt.block_number = block_number
    instance.receipt.gas_used = 21_000
    instance.receipt.transaction.sender = DEPLOYER_ADDRESS
    return instance


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for envvar in (
        PRIVATE_KEY_ENVVAR,
        DEPLOYER_PASSPHRASE_ENVVAR,
        GOERLI_RPC_URL_ENVVAR,
        ETHERSCAN_API_KEY_ENVVAR,
    ):
        monkeypatch.delenv(envvar, raising=False)


@pytest.fixture
def deployer_account():
    account = Mock()
    account.address = DEPLOYER_ADDRESS
    return account


@pytest.fixture
def fake_deployer():
    """Stands in for the framework's deploy-contract operation."""
    deployer = Mock(spec=ContractDeployer)
    deployer.deploy.side_effect = lambda contract_name, **kwargs: make_instance(contract_name)
    return deployer


@pytest.fixture
def contract_containers(monkeypatch):
    """Contract containers by name, standing in for the compiled project."""
    containers = dict()

    def get_contract_container(contract_name):
        if contract_name not in containers:
            container = Mock()
            container.contract_type.name = contract_name
            containers[contract_name] = container
        return containers[contract_name]

    monkeypatch.setattr(
        "raffle_deployment.deployer.get_contract_container", get_contract_container
    )
    return containers


@pytest.fixture
def instance_factory():
    return make_instance
