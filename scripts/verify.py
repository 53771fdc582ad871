from pathlib import Path

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from fundme_deployment.constants import FUND_ME, REGISTRY_FILEPATH
from fundme_deployment.registry import ArtifactRegistry
from fundme_deployment.verifier import ExplorerVerifier


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@click.option(
    "--contract-name",
    "-c",
    help="Contract to verify",
    type=click.STRING,
    default=FUND_ME,
    show_default=True,
)
@click.option(
    "--registry-filepath",
    "-f",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    help="Artifact registry holding the deployment",
    default=REGISTRY_FILEPATH,
    show_default=True,
)
def cli(network, contract_name, registry_filepath):
    """Verify a previously deployed contract recorded in the artifact registry."""
    chain_id = networks.active_provider.chain_id
    record = ArtifactRegistry(filepath=registry_filepath).latest(
        name=contract_name, chain_id=chain_id
    )
    if record is None:
        raise click.ClickException(
            f"Contract '{contract_name}' not found in registry, '{registry_filepath}', "
            f"for chain {chain_id}"
        )

    ExplorerVerifier().verify(record.address, record.args)


if __name__ == "__main__":
    cli()
