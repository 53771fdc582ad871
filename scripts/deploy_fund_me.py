#!/usr/bin/python3

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from fundme_deployment.config import NetworkConfig
from fundme_deployment.confirm import confirm_start
from fundme_deployment.constants import TAGS
from fundme_deployment.deployer import ApeDeployer
from fundme_deployment.options import (
    account_alias_option,
    autosign_option,
    confirmations_option,
    network_config_option,
    registry_filepath_option,
    tag_option,
)
from fundme_deployment.orchestrator import deploy_fund_me, is_selected
from fundme_deployment.registry import ArtifactRegistry
from fundme_deployment.utils import get_account, get_explorer_api_key, get_network_identity
from fundme_deployment.verifier import ExplorerVerifier


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@account_alias_option
@autosign_option
@network_config_option
@registry_filepath_option
@confirmations_option
@tag_option
def cli(
    network,
    account_alias,
    autosign,
    network_config_filepath,
    registry_filepath,
    confirmations,
    tags,
):
    """
    Deploy FundMe with the price feed of the connected network.

    ape run deploy_fund_me --network ethereum:sepolia:infura --account <ALIAS>
    """
    if not is_selected(tags):
        print(f"(i) Skipping FundMe deployment; tags {list(tags)} do not match {list(TAGS)}")
        return

    network_identity = get_network_identity(block_confirmations=confirmations)
    account = get_account(alias=account_alias, network=network_identity, autosign=autosign)
    verification_enabled = get_explorer_api_key() is not None
    registry = ArtifactRegistry(filepath=registry_filepath)

    print(
        f"Account: {account.address}",
        f"Network Config: {network_config_filepath}",
        f"Registry: {registry_filepath}",
        f"Verify: {verification_enabled}",
        f"Ecosystem: {networks.provider.network.ecosystem.name}",
        f"Network: {network_identity.name}",
        f"Chain ID: {network_identity.chain_id}",
        f"Confirmations: {network_identity.confirmations}",
        sep="\n",
    )
    if not autosign:
        confirm_start()

    deploy_fund_me(
        network=network_identity,
        sender=account,
        deployer=ApeDeployer(
            registry=registry, chain_id=network_identity.chain_id, autosign=autosign
        ),
        verifier=ExplorerVerifier(),
        registry=registry,
        network_config=NetworkConfig.from_yaml(network_config_filepath),
        verification_enabled=verification_enabled,
    )


if __name__ == "__main__":
    cli()
