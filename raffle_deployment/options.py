from pathlib import Path

import click

from raffle_deployment.constants import ALL, ARTIFACTS_DIR
from raffle_deployment.steps import load_steps

tags_option = click.option(
    "--tags",
    "-t",
    help=(
        "Only run deployment steps carrying one of these tags; "
        "contracts from earlier runs on the same network are reused."
    ),
    type=click.Choice(load_steps().tags),
    multiple=True,
    default=[ALL],
    show_default=True,
)

verify_option = click.option(
    "--verify/--no-verify",
    help="Publish contract sources to the block explorer (public networks only).",
    default=False,
)

autosign_option = click.option(
    "--autosign",
    help="Sign and deploy without confirmation prompts.",
    is_flag=True,
    default=False,
)

deployments_dir_option = click.option(
    "--deployments-dir",
    "-d",
    help="Directory deployment records are saved to and reused from.",
    type=click.Path(file_okay=False, path_type=Path),
    default=ARTIFACTS_DIR,
    show_default=True,
)
