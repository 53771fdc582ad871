import typing
from collections import OrderedDict
from typing import Any, List, Optional

from ape import chain
from ape.api import AccountAPI
from ape.contracts.base import ContractInstance
from eth_utils import to_checksum_address
from web3.auto import w3

from fundme_deployment.confirm import confirm_deployment
from fundme_deployment.registry import ArtifactRegistry, ChainId, DeploymentRecord
from fundme_deployment.utils import get_contract_container


def _validate_constructor_abi_inputs(
    contract_name: str,
    abi_inputs: List[Any],
    args: typing.Sequence[Any],
) -> OrderedDict:
    """Validates constructor arguments against the constructor ABI; returns them by name."""
    if len(args) != len(abi_inputs):
        raise ApeDeployer.InvalidArgs(
            f"Constructor arguments length mismatch - "
            f"{contract_name} ABI requires {len(abi_inputs)}, Got {len(args)}."
        )

    named_args = OrderedDict()
    for position, (abi_input, value) in enumerate(zip(abi_inputs, args)):
        if not w3.is_encodable(abi_input.type, value):
            raise ApeDeployer.InvalidArgs(
                f"{contract_name} constructor argument at position {position} has a value "
                f"'{value}' whose type does not match expected ABI type '{abi_input.type}'"
            )
        named_args[abi_input.name or f"arg{position}"] = value
    return named_args


class ApeDeployer:
    """
    Deploys project contracts from an ape account and records each
    deployment in the artifact registry.
    """

    class InvalidArgs(Exception):
        """Raised when constructor arguments do not match the contract ABI"""

    def __init__(self, registry: ArtifactRegistry, chain_id: ChainId, autosign: bool = False):
        self.registry = registry
        self.chain_id = chain_id
        self.autosign = autosign

    def deploy(
        self,
        contract_name: str,
        sender: AccountAPI,
        args: List[Any],
        confirmations: int,
    ) -> DeploymentRecord:
        container = get_contract_container(contract_name)
        named_args = _validate_constructor_abi_inputs(
            contract_name=contract_name,
            abi_inputs=container.constructor.abi.inputs,
            args=args,
        )

        existing = self._existing_deployment(contract_name, args)
        if existing is not None:
            print(f"(i) Reusing {contract_name} already deployed at {existing.address}")
            return existing

        if not self.autosign:
            confirm_deployment(contract_name, named_args)

        print(f"\nDeploying {contract_name} (waiting for {confirmations} confirmation(s))...")
        instance = sender.deploy(
            container,
            *args,
            publish=False,
            required_confirmations=confirmations,
        )
        record = self._get_record(contract_name, instance, args, sender)
        self.registry.add(record)
        print(f"(i) {contract_name} deployed to {record.address}")
        return record

    def _existing_deployment(
        self, contract_name: str, args: List[Any]
    ) -> Optional[DeploymentRecord]:
        """Returns the registry record for the same deployment if its code is still on chain."""
        record = self.registry.latest(name=contract_name, chain_id=self.chain_id)
        if record is None or list(record.args) != list(args):
            return None
        if not chain.provider.get_code(record.address):
            return None
        return record

    def _get_record(
        self,
        contract_name: str,
        instance: ContractInstance,
        args: List[Any],
        sender: AccountAPI,
    ) -> DeploymentRecord:
        receipt = instance.receipt
        return DeploymentRecord(
            name=contract_name,
            chain_id=self.chain_id,
            address=to_checksum_address(instance.address),
            args=list(args),
            tx_hash=str(receipt.txn_hash),
            block_number=int(receipt.block_number),
            deployer=sender.address,
        )
