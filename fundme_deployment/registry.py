import json
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional

from fundme_deployment.utils import _load_json

ChainId = int
ContractName = str


STANDARD_REGISTRY_JSON_FORMAT = {"indent": 4, "separators": (",", ": ")}


class DeploymentRecord(NamedTuple):
    """Represents a single deployed contract in the artifact registry."""

    name: ContractName
    chain_id: ChainId
    address: str
    args: List[str]
    tx_hash: str = ""
    block_number: int = 0
    deployer: str = ""


def read_registry(filepath: Path) -> List[DeploymentRecord]:
    data = _load_json(filepath)
    records = list()
    for chain_id, entries in data.items():
        for contract_name, artifacts in entries.items():
            record = DeploymentRecord(
                name=contract_name,
                chain_id=int(chain_id),
                address=artifacts["address"],
                args=list(artifacts.get("args", [])),
                tx_hash=artifacts.get("tx_hash", ""),
                block_number=int(artifacts.get("block_number", 0)),
                deployer=artifacts.get("deployer", ""),
            )
            records.append(record)
    return records


def write_registry(records: List[DeploymentRecord], filepath: Path, silent: bool = False) -> Path:
    """
    Writes deployment records to a registry file. Records for a chain id and
    contract name already present in the file are replaced.
    """
    if not records:
        print("No records provided.")
        return filepath

    existing = read_registry(filepath) if filepath.exists() else list()
    merged = {(r.chain_id, r.name): r for r in existing}
    for record in records:
        merged[(record.chain_id, record.name)] = record

    # Sort registry entries to enforce common order
    entries = sorted(merged.values(), key=lambda r: (str(r.chain_id), r.name))

    data = defaultdict(dict)
    for record in entries:
        data[str(record.chain_id)][record.name] = {
            "address": record.address,
            "args": list(record.args),
            "tx_hash": record.tx_hash,
            "block_number": int(record.block_number),
            "deployer": record.deployer,
        }

    # Create the parent directory if it does not exist
    filepath.parent.mkdir(parents=True, exist_ok=True)

    if not silent:
        action = "Updating existing" if existing else "Creating new"
        print(f"{action} registry at {filepath}.")

    with open(filepath, "w") as file:
        json.dump(data, file, **STANDARD_REGISTRY_JSON_FORMAT)

    return filepath


class ArtifactRegistry:
    """File backed store of deployment records, one per contract name per chain."""

    def __init__(self, filepath: Path):
        self.filepath = filepath

    def records(self, chain_id: ChainId) -> Dict[ContractName, DeploymentRecord]:
        if not self.filepath.exists():
            return dict()
        return {r.name: r for r in read_registry(self.filepath) if r.chain_id == chain_id}

    def latest(self, name: ContractName, chain_id: ChainId) -> Optional[DeploymentRecord]:
        """Returns the most recent record of a contract on a chain, if there is one."""
        return self.records(chain_id).get(name)

    def add(self, record: DeploymentRecord) -> Path:
        filepath = write_registry(records=[record], filepath=self.filepath)
        print(f"(i) {record.name} recorded in registry {filepath}")
        return filepath
