#!/usr/bin/python3

from pathlib import Path
from typing import List

import click

from raffle_deployment.constants import ARTIFACTS_DIR
from raffle_deployment.registry import DeploymentRecord, list_networks, read_deployments


def _display_records(network: str, records: List[DeploymentRecord]) -> None:
    chain_ids = ", ".join(sorted({str(record.chain_id) for record in records}))
    click.secho(f"\n{network.capitalize()} (chain {chain_ids})", fg="yellow")
    for index, record in enumerate(records, start=1):
        click.secho(f"    {index}. {record.name} {record.address}", fg="cyan")
        if record.args:
            click.echo(f"       args: {record.args}")


@click.command(name="list-deployments")
@click.option(
    "--deployments-dir",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=ARTIFACTS_DIR,
    help="Directory holding the deployment records.",
)
@click.option("--network", "-n", help="Only list this network's deployments.")
def cli(deployments_dir, network):
    """List the contracts recorded for each network."""
    network_names = [network] if network else list_networks(deployments_dir)
    if not network_names:
        click.echo(f"No deployments found in {deployments_dir}.")
        return
    for network_name in network_names:
        records = read_deployments(deployments_dir, network_name)
        if records:
            _display_records(network_name, records)


if __name__ == "__main__":
    cli()
