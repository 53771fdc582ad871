import json
import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from ape import accounts, networks, project
from ape.api import AccountAPI
from ape.cli.choices import select_account
from ape.contracts import ContractContainer

from fundme_deployment.constants import DEVELOPMENT_CHAINS, ETHERSCAN_API_KEY_ENVVAR
from fundme_deployment.networks import NetworkIdentity, is_development_network


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def _get_dependency_contract_container(contract: str) -> ContractContainer:
    for dependency_name, dependency_versions in project.dependencies.items():
        if len(dependency_versions) > 1:
            raise ValueError(f"Ambiguous {dependency_name} dependency for {contract}")
        try:
            dependency_api = list(dependency_versions.values())[0]
            contract_container = getattr(dependency_api, contract)
            return contract_container
        except AttributeError:
            continue
    raise ValueError(f"No contract found with name '{contract}'.")


def get_contract_container(contract: str) -> ContractContainer:
    try:
        contract_container = getattr(project, contract)
    except AttributeError:
        # not in root project; check dependencies
        contract_container = _get_dependency_contract_container(contract)

    return contract_container


def get_network_identity(block_confirmations: Optional[int] = None) -> NetworkIdentity:
    """
    Returns the identity of the connected network.
    An explicit confirmation count takes precedence over the network's configured one.
    """
    network = networks.provider.network
    if block_confirmations is None:
        # ape uses 0 for "not configured" on local networks
        block_confirmations = network.required_confirmations or None
    return NetworkIdentity(
        name=network.name,
        chain_id=network.chain_id,
        block_confirmations=block_confirmations,
    )


def get_account(
    alias: Optional[str],
    network: NetworkIdentity,
    autosign: bool = False,
    development_chains=DEVELOPMENT_CHAINS,
) -> AccountAPI:
    """
    Returns the deployer account: the first test account on development networks,
    otherwise the named (or interactively selected) ape account.
    """
    if is_development_network(network.name, development_chains):
        return accounts.test_accounts[0]

    account = select_account() if alias is None else accounts.load(alias)
    if autosign:
        print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
    account.set_autosign(autosign)
    return account


def get_explorer_api_key(environ: Optional[Dict[str, str]] = None) -> Optional[str]:
    """Returns the block explorer API key, if one is set."""
    environ = os.environ if environ is None else environ
    return environ.get(ETHERSCAN_API_KEY_ENVVAR) or None


def check_etherscan_plugin() -> None:
    """Checks that the ape-etherscan plugin is installed."""
    try:
        import ape_etherscan  # noqa: F401
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to verify contracts.")
