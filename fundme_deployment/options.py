from pathlib import Path

import click

from fundme_deployment.constants import NETWORK_CONFIG_FILEPATH, REGISTRY_FILEPATH

account_alias_option = click.option(
    "--account",
    "-a",
    "account_alias",
    help="Alias of the ape account to deploy from; prompts when omitted.",
    type=click.STRING,
    required=False,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions automatically, skipping confirmation prompts.",
    is_flag=True,
    default=False,
)

network_config_option = click.option(
    "--network-config",
    "-n",
    "network_config_filepath",
    help="Network config YAML holding per-chain price feed addresses.",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=NETWORK_CONFIG_FILEPATH,
    show_default=True,
)

registry_filepath_option = click.option(
    "--registry-filepath",
    "-f",
    help="Artifact registry JSON file.",
    type=click.Path(dir_okay=False, path_type=Path),
    default=REGISTRY_FILEPATH,
    show_default=True,
)

confirmations_option = click.option(
    "--confirmations",
    "-c",
    help="Block confirmations to wait for; overrides the network's configured value.",
    type=click.IntRange(min=1),
    required=False,
)

tag_option = click.option(
    "--tag",
    "-t",
    "tags",
    help="Only run when one of the given tags matches.",
    multiple=True,
)
