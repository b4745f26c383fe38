from typing import Any, Sequence

from ape.utils import ZERO_ADDRESS


def _abort() -> None:
    print("Aborting deployment!")
    exit(-1)


def _confirm_deployment(contract_name: str) -> None:
    """Asks the user to confirm the deployment of a single contract."""
    answer = input(f"Deploy {contract_name} Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _confirm_zero_address() -> None:
    answer = input("Zero Address detected for deployment parameter; Continue? Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _confirm_arguments(args: Sequence[Any], contract_name: str) -> None:
    """Asks the user to confirm the constructor arguments for a single contract."""
    if len(args) == 0:
        print(f"\n(i) No constructor arguments for {contract_name}")
        _confirm_deployment(contract_name)
        return

    print(f"\nConstructor arguments for {contract_name}")
    for position, value in enumerate(args):
        print(f"\t[{position}]={value}")
    _confirm_deployment(contract_name)
    if ZERO_ADDRESS in args:
        _confirm_zero_address()
