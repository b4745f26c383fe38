#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, network_option

from raffle_deployment.config import check_network_configuration
from raffle_deployment.deployer import ContractDeployer
from raffle_deployment.networks import get_active_network, is_development_network
from raffle_deployment.options import (
    autosign_option,
    deployments_dir_option,
    tags_option,
    verify_option,
)
from raffle_deployment.steps import DeploymentContext, run_steps


@click.command(cls=ConnectedProviderCommand)
@network_option()
@tags_option
@verify_option
@autosign_option
@deployments_dir_option
def cli(network, tags, verify, autosign, deployments_dir):
    """
    Runs the tagged deployment steps against the connected network.

    ape run deploy --network ethereum:local:test
    ape run deploy --network ethereum:goerli:node --tags raffle --verify
    """
    active_network = get_active_network()
    click.echo(
        f"You are connected to network '{active_network.name}' (chain {active_network.chain_id})."
    )

    check_network_configuration(active_network)

    # nothing to confirm on a throwaway chain
    autosign = autosign or is_development_network(active_network.name)

    deployer = ContractDeployer(
        network=active_network,
        verify=verify,
        autosign=autosign,
        deployments_dir=deployments_dir,
    )
    context = DeploymentContext(network=active_network, deployer=deployer, autosign=autosign)
    results = run_steps(context, tags=tags)

    for step_name, instance in results.items():
        if instance is not None:
            click.secho(f"{step_name}: {instance.address}", fg="green")
    click.echo(f"Deployment records saved to {deployments_dir / active_network.name}")


if __name__ == "__main__":
    cli()
