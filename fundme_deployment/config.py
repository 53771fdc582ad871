import typing
from pathlib import Path
from typing import Any, Dict

from fundme_deployment.constants import NETWORK_CONFIG_FILEPATH, PRICE_FEED_FIELD
from fundme_deployment.exceptions import MissingConfigField, UnknownNetworkConfig
from fundme_deployment.utils import _load_yaml

NETWORKS_KEY = "networks"


class NetworkConfig:
    """Static per-chain configuration, keyed by chain id."""

    class Invalid(Exception):
        """Raised when the network config file is malformed"""

    def __init__(self, entries: Dict[int, Dict[str, Any]]):
        self.entries = entries

    @classmethod
    def from_dict(cls, config: typing.Dict) -> "NetworkConfig":
        networks = (config or dict()).get(NETWORKS_KEY)
        if not isinstance(networks, dict):
            raise cls.Invalid(f"Network config is missing a '{NETWORKS_KEY}' mapping.")

        entries = dict()
        for chain_id, entry in networks.items():
            try:
                chain_id = int(chain_id)
            except (TypeError, ValueError):
                raise cls.Invalid(f"Invalid chain_id '{chain_id}' in network config.")
            if not isinstance(entry, dict):
                raise cls.Invalid(f"Malformed network config entry for chain_id {chain_id}.")
            price_feed = entry.get(PRICE_FEED_FIELD)
            if price_feed is not None and not isinstance(price_feed, str):
                # unquoted hex addresses load from YAML as integers
                raise cls.Invalid(
                    f"'{PRICE_FEED_FIELD}' for chain_id {chain_id} must be a quoted "
                    f"address string, got {price_feed!r}."
                )
            entries[chain_id] = entry

        return cls(entries=entries)

    @classmethod
    def from_yaml(cls, filepath: Path = NETWORK_CONFIG_FILEPATH) -> "NetworkConfig":
        config = _load_yaml(filepath)
        return cls.from_dict(config)

    def entry(self, chain_id: int) -> Dict[str, Any]:
        try:
            return self.entries[chain_id]
        except KeyError:
            raise UnknownNetworkConfig(chain_id=chain_id)

    def get(self, chain_id: int, field: str) -> Any:
        entry = self.entry(chain_id)
        value = entry.get(field)
        if value is None or value == "":
            raise MissingConfigField(chain_id=chain_id, field=field)
        return value

    def __contains__(self, chain_id: int) -> bool:
        return chain_id in self.entries
