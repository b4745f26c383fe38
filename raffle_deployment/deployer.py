import typing
from collections import OrderedDict
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from ape import networks
from ape.api import AccountAPI
from ape.contracts import ContractInstance

from raffle_deployment.config import check_chain_id, get_network_settings
from raffle_deployment.confirm import _confirm_arguments
from raffle_deployment.constants import ARTIFACTS_DIR
from raffle_deployment.exceptions import DeploymentNotFound
from raffle_deployment.networks import ActiveNetwork, is_development_network
from raffle_deployment.registry import load_deployment, record_from_instance, save_deployment
from raffle_deployment.utils import check_plugins, get_contract_container


def _has_code(address: str) -> bool:
    return bool(networks.provider.get_code(address))


class ContractDeployer:
    """
    Deploys contracts by name on the active network and saves a record of
    each one so later steps, and later runs, can look it up.
    """

    def __init__(
        self,
        network: ActiveNetwork,
        verify: bool = False,
        autosign: bool = False,
        deployments_dir: Path = ARTIFACTS_DIR,
    ):
        self.network = network
        self.settings = get_network_settings(network.name)
        check_chain_id(self.settings, network)
        self.development = is_development_network(network.name)
        self.verify = verify and not self.development
        if self.verify:
            check_plugins(network.name)
        if autosign:
            print("WARNING: Autosign is enabled. Deployments will not be confirmed.")
        self.autosign = autosign
        self.deployments_dir = deployments_dir
        self.deployments: typing.OrderedDict[str, ContractInstance] = OrderedDict()
        self._print_deployment_info()

    def _get_kwargs(self) -> Dict[str, Any]:
        """Returns the deployment kwargs."""
        kwargs = {"publish": self.verify}
        if not self.development:
            # local chains mine instantly
            kwargs["required_confirmations"] = self.settings.block_confirmations
            if self.settings.gas_limit:
                kwargs["gas_limit"] = self.settings.gas_limit
        return kwargs

    def deploy(
        self,
        contract_name: str,
        sender: AccountAPI,
        args: Optional[Sequence[Any]] = None,
        log: bool = False,
    ) -> ContractInstance:
        """Deploys a contract with the given constructor arguments from the sender."""
        args = list(args or [])
        container = get_contract_container(contract_name)
        if not self.autosign:
            _confirm_arguments(args, contract_name)
        if log:
            print(f'deploying "{contract_name}" from {sender.address}...')

        instance = sender.deploy(container, *args, **self._get_kwargs())

        if log:
            receipt = instance.receipt
            print(
                f'deployed "{contract_name}" at {instance.address} '
                f"(tx: {receipt.txn_hash}) with {receipt.gas_used} gas"
            )
        self.deployments[contract_name] = instance
        record = record_from_instance(instance, network=self.network.name, args=args)
        save_deployment(record, deployments_dir=self.deployments_dir)
        return instance

    def get(self, contract_name: str) -> ContractInstance:
        """
        Returns a contract deployed earlier in this run or, failing that,
        the one recorded by an earlier run if it is still on chain.
        """
        try:
            return self.deployments[contract_name]
        except KeyError:
            pass

        record = load_deployment(self.deployments_dir, self.network.name, contract_name)
        if record is None:
            raise DeploymentNotFound(
                f"{contract_name} has not been deployed on '{self.network.name}'."
            )
        if record.chain_id != self.network.chain_id or not _has_code(record.address):
            # the chain was reset or replaced since the record was written
            raise DeploymentNotFound(
                f"{contract_name} recorded at {record.address} is no longer deployed "
                f"on '{self.network.name}'."
            )
        print(f'reusing "{contract_name}" at {record.address}')
        return get_contract_container(contract_name).at(record.address)

    def _print_deployment_info(self):
        print(
            f"Network: {self.network.name}",
            f"Chain ID: {self.network.chain_id}",
            f"Block Confirmations: {self.settings.block_confirmations}",
            f"Verify: {self.verify}",
            f"Deployments: {self.deployments_dir / self.network.name}",
            sep="\n",
        )
