import pytest

from fundme_deployment.config import NetworkConfig
from fundme_deployment.registry import DeploymentRecord

DEPLOYED_ADDRESS = "0xF00D"
MOCK_ADDRESS = "0xMOCK"
MAINNET_PRICE_FEED = "0xAAA"


class FakeDeployer:
    def __init__(self, chain_id: int = 0, address: str = DEPLOYED_ADDRESS, error=None):
        self.chain_id = chain_id
        self.address = address
        self.error = error
        self.calls = []

    def deploy(self, contract_name, sender, args, confirmations):
        self.calls.append(
            dict(
                contract_name=contract_name,
                sender=sender,
                args=list(args),
                confirmations=confirmations,
            )
        )
        if self.error is not None:
            raise self.error
        return DeploymentRecord(
            name=contract_name, chain_id=self.chain_id, address=self.address, args=list(args)
        )


class FakeVerifier:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def verify(self, address, args):
        self.calls.append((address, list(args)))
        if self.error is not None:
            raise self.error


class FakeRegistry:
    def __init__(self, records=None):
        self._records = {(r.name, r.chain_id): r for r in records or []}
        self.lookups = []

    def latest(self, name, chain_id):
        self.lookups.append((name, chain_id))
        return self._records.get((name, chain_id))


class SpyNetworkConfig(NetworkConfig):
    def __init__(self, entries):
        super().__init__(entries=entries)
        self.lookups = []

    def get(self, chain_id, field):
        self.lookups.append((chain_id, field))
        return super().get(chain_id=chain_id, field=field)


# Fixtures
@pytest.fixture
def deployer():
    return FakeDeployer()


@pytest.fixture
def verifier():
    return FakeVerifier()


@pytest.fixture
def sender():
    return object()


@pytest.fixture
def network_config():
    return SpyNetworkConfig(entries={1: {"name": "mainnet", "ethUsdPriceFeed": MAINNET_PRICE_FEED}})


@pytest.fixture
def mock_registry():
    mock = DeploymentRecord(name="MockV3Aggregator", chain_id=31337, address=MOCK_ADDRESS, args=[])
    return FakeRegistry(records=[mock])


@pytest.fixture
def empty_registry():
    return FakeRegistry()
