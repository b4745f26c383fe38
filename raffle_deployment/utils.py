import os

from ape import project
from ape.contracts import ContractContainer

from raffle_deployment.constants import ETHERSCAN_API_KEY_ENVVAR
from raffle_deployment.exceptions import DeploymentError, MissingEnvironmentVariable
from raffle_deployment.networks import is_development_network


def check_etherscan_plugin(network_name: str) -> None:
    """
    Checks that the ape-etherscan plugin is installed and that
    the ETHERSCAN_API_KEY environment variable is set.
    """
    if is_development_network(network_name):
        # unnecessary for local deployment
        return
    try:
        import ape_etherscan  # noqa: F401
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to verify contracts.")
    if not os.environ.get(ETHERSCAN_API_KEY_ENVVAR):
        raise MissingEnvironmentVariable(f"{ETHERSCAN_API_KEY_ENVVAR} is not set.")


def check_plugins(network_name: str) -> None:
    print("Checking plugins...")
    check_etherscan_plugin(network_name)


def get_contract_container(contract_name: str) -> ContractContainer:
    """
    Returns the compiled contract with the given name, looking in the project
    sources first and then in the declared dependencies (chainlink mocks).
    """
    container = project.get(contract_name)
    if container is not None:
        return container
    for dependency in project.dependencies.specified:
        container = dependency.project.get(contract_name)
        if container is not None:
            return container
    raise DeploymentError(
        f"No contract named '{contract_name}' in the project or its dependencies."
    )
