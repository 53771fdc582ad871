"""Exceptions raised while resolving and deploying FundMe."""


class DeploymentError(Exception):
    """Base exception for deployment orchestration errors."""


class UnknownNetworkConfig(DeploymentError, KeyError):
    """Raised when the network config table has no entry for a chain id."""

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"No network config entry for chain_id {chain_id}.")

    def __str__(self) -> str:
        return self.args[0]


class MissingConfigField(DeploymentError, KeyError):
    """Raised when a network config entry lacks a required field."""

    def __init__(self, chain_id: int, field: str):
        self.chain_id = chain_id
        self.field = field
        super().__init__(f"Network config entry for chain_id {chain_id} is missing '{field}'.")

    def __str__(self) -> str:
        return self.args[0]


class MissingMockDependency(DeploymentError, LookupError):
    """Raised when a development chain has no prior deployment of a mock contract."""

    def __init__(self, contract_name: str, chain_id: int):
        self.contract_name = contract_name
        self.chain_id = chain_id
        super().__init__(
            f"No {contract_name} deployment found for chain_id {chain_id}; "
            f"deploy the mocks before deploying to a development network."
        )


class VerificationUnavailable(DeploymentError, RuntimeError):
    """Raised when the active network has no block explorer to publish to."""
