from typing import Iterable, NamedTuple, Optional

from fundme_deployment.constants import DEFAULT_BLOCK_CONFIRMATIONS, DEVELOPMENT_CHAINS


class NetworkIdentity(NamedTuple):
    """The network a deployment run targets."""

    name: str
    chain_id: int
    block_confirmations: Optional[int] = None

    @property
    def confirmations(self) -> int:
        """Number of confirmations to wait for, defaulting to one."""
        if self.block_confirmations is None:
            return DEFAULT_BLOCK_CONFIRMATIONS
        return self.block_confirmations


def is_development_network(
    name: str, development_chains: Iterable[str] = DEVELOPMENT_CHAINS
) -> bool:
    """Returns True if the network name is a local/ephemeral development chain."""
    return name in development_chains
