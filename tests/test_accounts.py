from unittest.mock import Mock

import pytest
from eth_account import Account

from raffle_deployment.accounts import get_named_account
from raffle_deployment.constants import (
    DEPLOYER_ALIAS,
    DEPLOYER_PASSPHRASE_ENVVAR,
    PRIVATE_KEY_ENVVAR,
)
from raffle_deployment.exceptions import ConfigurationError, MissingEnvironmentVariable

PRIVATE_KEY = "0x" + "11" * 32
OTHER_PRIVATE_KEY = "0x" + "22" * 32
PASSPHRASE = "correct horse battery staple"


@pytest.mark.parametrize("network_name", ["hardhat", "localhost", "local"])
def test_development_named_accounts(accounts, network_name):
    deployer = get_named_account("deployer", network_name)
    player = get_named_account("player", network_name)
    assert deployer.address == accounts[0].address
    assert player.address == accounts[1].address


def test_unknown_role():
    with pytest.raises(ConfigurationError, match="Unknown named account"):
        get_named_account("owner", "hardhat")


def test_only_deployer_on_public_networks():
    with pytest.raises(ConfigurationError, match="not available on 'goerli'"):
        get_named_account("player", "goerli")


def test_public_deployer_requires_passphrase():
    with pytest.raises(MissingEnvironmentVariable, match=DEPLOYER_PASSPHRASE_ENVVAR):
        get_named_account("deployer", "goerli")


class FakeKeystore:
    """Stands in for ape's keystore accounts."""

    def __init__(self):
        self.stored = dict()

    @property
    def aliases(self):
        return iter(self.stored)

    def load(self, alias):
        return self.stored[alias]

    def import_account(self, alias, passphrase, private_key):
        account = Mock()
        account.address = Account.from_key(private_key).address
        self.stored[alias] = account
        return account


@pytest.fixture
def keystore(monkeypatch):
    keystore = FakeKeystore()
    monkeypatch.setattr("raffle_deployment.accounts.accounts", keystore)
    monkeypatch.setattr(
        "raffle_deployment.accounts.import_account_from_private_key", keystore.import_account
    )
    return keystore.stored


@pytest.fixture
def public_environment(monkeypatch):
    monkeypatch.setenv(DEPLOYER_PASSPHRASE_ENVVAR, PASSPHRASE)
    monkeypatch.setenv(PRIVATE_KEY_ENVVAR, PRIVATE_KEY)


def test_public_deployer_is_imported_on_first_use(keystore, public_environment):
    deployer = get_named_account("deployer", "goerli", autosign=True)

    assert deployer.address == Account.from_key(PRIVATE_KEY).address
    assert keystore[DEPLOYER_ALIAS] is deployer
    deployer.set_autosign.assert_called_once_with(True, passphrase=PASSPHRASE)


def test_public_deployer_is_loaded_once_imported(keystore, public_environment):
    first = get_named_account("deployer", "goerli")
    second = get_named_account("deployer", "goerli")
    assert second is first
    assert len(keystore) == 1


def test_public_deployer_must_match_private_key(monkeypatch, keystore, public_environment):
    get_named_account("deployer", "goerli")

    monkeypatch.setenv(PRIVATE_KEY_ENVVAR, OTHER_PRIVATE_KEY)
    with pytest.raises(ConfigurationError, match="does not match"):
        get_named_account("deployer", "goerli")
