import sys
from typing import Mapping

from ape.utils import ZERO_ADDRESS


def _ask(question: str) -> None:
    """Exits the run when the user answers 'n'."""
    answer = input(f"{question} Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        sys.exit(-1)


def confirm_start() -> None:
    _ask("Continue")


def confirm_deployment(contract_name: str, named_args: Mapping[str, object]) -> None:
    """Shows the constructor arguments of a contract and asks to deploy it."""
    print(f"\nConstructor arguments for {contract_name}")
    for name, value in named_args.items():
        print(f"\t{name}={value}")
    _ask(f"Deploy {contract_name}")
    if ZERO_ADDRESS in named_args.values():
        _ask("Zero Address detected for a constructor argument; Continue?")
