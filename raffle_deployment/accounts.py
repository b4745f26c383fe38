import os

from ape import accounts
from ape.api import AccountAPI
from ape_accounts import import_account_from_private_key
from eth_account import Account

from raffle_deployment.config import get_account_index, get_private_key
from raffle_deployment.constants import DEPLOYER_ALIAS, DEPLOYER_PASSPHRASE_ENVVAR
from raffle_deployment.exceptions import ConfigurationError, MissingEnvironmentVariable
from raffle_deployment.networks import is_development_network


def _get_passphrase() -> str:
    passphrase = os.environ.get(DEPLOYER_PASSPHRASE_ENVVAR)
    if not passphrase:
        raise MissingEnvironmentVariable(
            f"{DEPLOYER_PASSPHRASE_ENVVAR} is not set; it is required to unlock the deployer."
        )
    return passphrase


def _load_private_key_account(network_name: str, autosign: bool) -> AccountAPI:
    """Loads the keystore account for $PRIVATE_KEY, importing it on first use."""
    passphrase = _get_passphrase()
    private_key = get_private_key(network_name)
    if DEPLOYER_ALIAS in accounts.aliases:
        account = accounts.load(DEPLOYER_ALIAS)
        expected_address = Account.from_key(private_key).address
        if account.address != expected_address:
            raise ConfigurationError(
                f"Keystore account '{DEPLOYER_ALIAS}' ({account.address}) does not match "
                f"the key in $PRIVATE_KEY ({expected_address}); "
                f"run 'ape accounts delete {DEPLOYER_ALIAS}' to re-import it."
            )
    else:
        account = import_account_from_private_key(DEPLOYER_ALIAS, passphrase, private_key)
        print(f"Account imported: {account.address}")
    account.set_autosign(autosign, passphrase=passphrase)
    return account


def get_named_account(role: str, network_name: str, autosign: bool = False) -> AccountAPI:
    """
    Returns the account playing a role ("deployer", "player") on a network.

    Development networks use ape's funded test accounts. Public networks only
    have the single account derived from $PRIVATE_KEY.
    """
    index = get_account_index(role)
    if is_development_network(network_name):
        return accounts.test_accounts[index]

    if index != 0:
        raise ConfigurationError(
            f"Named account '{role}' is not available on '{network_name}'; "
            "only the deployer account is configured for public networks."
        )
    return _load_private_key_account(network_name, autosign=autosign)
