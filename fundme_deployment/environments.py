from typing import Iterable, NamedTuple, Union

from fundme_deployment.config import NetworkConfig
from fundme_deployment.constants import DEVELOPMENT_CHAINS, MOCK_PRICE_FEED, PRICE_FEED_FIELD
from fundme_deployment.exceptions import MissingMockDependency
from fundme_deployment.networks import NetworkIdentity, is_development_network
from fundme_deployment.registry import ArtifactRegistry


class Development(NamedTuple):
    """A local chain; the price feed is a mock deployed in an earlier step."""

    registry: ArtifactRegistry

    def price_feed_address(self, network: NetworkIdentity) -> str:
        record = self.registry.latest(name=MOCK_PRICE_FEED, chain_id=network.chain_id)
        if record is None:
            raise MissingMockDependency(contract_name=MOCK_PRICE_FEED, chain_id=network.chain_id)
        return record.address


class Production(NamedTuple):
    """A live chain; the price feed address comes from the static network config."""

    network_config: NetworkConfig

    def price_feed_address(self, network: NetworkIdentity) -> str:
        return self.network_config.get(chain_id=network.chain_id, field=PRICE_FEED_FIELD)


Environment = Union[Development, Production]


def environment_for(
    network: NetworkIdentity,
    registry: ArtifactRegistry,
    network_config: NetworkConfig,
    development_chains: Iterable[str] = DEVELOPMENT_CHAINS,
) -> Environment:
    if is_development_network(network.name, development_chains):
        return Development(registry=registry)
    return Production(network_config=network_config)
