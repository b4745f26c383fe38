from typing import Optional

from ape.api import AccountAPI
from ape.contracts import ContractInstance

from raffle_deployment.constants import ALL, BASE_FEE, GAS_PRICE_LINK, MOCKS, VRF_COORDINATOR_MOCK
from raffle_deployment.deployer import ContractDeployer
from raffle_deployment.networks import is_development_network
from raffle_deployment.steps import DeploymentContext, deployment_step


def provision_mocks_if_needed(
    network_name: str, deployer_account: AccountAPI, deployer: ContractDeployer
) -> Optional[ContractInstance]:
    """
    Deploys a mock VRF coordinator on development networks so local runs
    don't depend on a live oracle. Does nothing on any other network.
    """
    if not is_development_network(network_name):
        return None

    print("Local network detected! Deploying mocks...")
    vrf_coordinator_mock = deployer.deploy(
        VRF_COORDINATOR_MOCK,
        sender=deployer_account,
        args=[BASE_FEE, GAS_PRICE_LINK],
        log=True,
    )
    print("Mocks deployed!")
    print("-" * 50)
    return vrf_coordinator_mock


@deployment_step("00-deploy-mocks", tags=(ALL, MOCKS))
def deploy_mocks(context: DeploymentContext) -> Optional[ContractInstance]:
    return provision_mocks_if_needed(
        network_name=context.network.name,
        deployer_account=context.get_named_account("deployer"),
        deployer=context.deployer,
    )
