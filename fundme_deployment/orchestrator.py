"""
Deploys FundMe with the price feed address of the target network.

On development networks the price feed is the MockV3Aggregator recorded in the
artifact registry by an earlier mock deployment. On every other network it is
read from the static network config. The deployed contract is published to the
block explorer only on non-development networks, and only when verification is
enabled.
"""

from typing import Iterable

from fundme_deployment.config import NetworkConfig
from fundme_deployment.constants import DEVELOPMENT_CHAINS, FUND_ME, TAGS
from fundme_deployment.environments import Production, environment_for
from fundme_deployment.networks import NetworkIdentity
from fundme_deployment.registry import ArtifactRegistry, DeploymentRecord


def is_selected(tags: Iterable[str]) -> bool:
    """Returns True if a run requesting the given tags should deploy FundMe."""
    tags = set(tags)
    return not tags or bool(tags & set(TAGS))


def deploy_fund_me(
    network: NetworkIdentity,
    sender,
    deployer,
    verifier,
    registry: ArtifactRegistry,
    network_config: NetworkConfig,
    verification_enabled: bool,
    development_chains: Iterable[str] = DEVELOPMENT_CHAINS,
) -> DeploymentRecord:
    environment = environment_for(
        network=network,
        registry=registry,
        network_config=network_config,
        development_chains=development_chains,
    )
    args = [environment.price_feed_address(network)]

    record = deployer.deploy(
        FUND_ME,
        sender=sender,
        args=args,
        confirmations=network.confirmations,
    )

    if isinstance(environment, Production):
        if verification_enabled:
            verifier.verify(record.address, args)
        else:
            print(f"(i) Verification disabled; {FUND_ME} at {record.address} not published")

    print("-" * 63)
    return record
