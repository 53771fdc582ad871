from typing import Any, List

from ape import networks

from fundme_deployment.exceptions import VerificationUnavailable
from fundme_deployment.utils import check_etherscan_plugin


class ExplorerVerifier:
    """Publishes contract source to the block explorer of the connected network."""

    def verify(self, address: str, args: List[Any]) -> None:
        # the explorer plugin derives constructor arguments from the creation transaction
        check_etherscan_plugin()
        explorer = networks.provider.network.explorer
        if explorer is None:
            raise VerificationUnavailable(
                f"No block explorer configured for network '{networks.provider.network.name}'."
            )
        pretty_args = ", ".join(str(arg) for arg in args)
        print(f"(i) Verifying contract at {address} with constructor arguments [{pretty_args}]...")
        explorer.publish_contract(address)
