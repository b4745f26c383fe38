"""
Deployment records, one JSON file per contract and network.

A record is written to ``<deployments dir>/<network>/<ContractName>.json`` as
soon as the contract is deployed, with the constructor arguments it was
deployed with. Later runs against the same network read the records back to
find contracts deployed by earlier runs.
"""

import json
from pathlib import Path
from typing import Any, List, NamedTuple, Optional, Sequence

from ape.contracts import ContractInstance
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from eth_typing import ABI

ChainId = int
ContractName = str

RECORD_JSON_FORMAT = {"indent": 4, "separators": (",", ": ")}


class DeploymentRecord(NamedTuple):
    """A contract deployed on a network, as saved to disk."""

    network: str
    chain_id: ChainId
    name: ContractName
    address: ChecksumAddress
    args: List[Any]
    tx_hash: str
    block_number: int
    deployer: ChecksumAddress
    abi: ABI


def _get_abi(contract_instance: ContractInstance) -> ABI:
    abi = [entry.model_dump(mode="json") for entry in contract_instance.contract_type.abi]
    abi.sort(key=lambda d: (d["type"], d.get("name", "")))
    return abi


def record_from_instance(
    contract_instance: ContractInstance, network: str, args: Sequence[Any]
) -> DeploymentRecord:
    receipt = contract_instance.receipt
    return DeploymentRecord(
        network=network,
        chain_id=receipt.chain_id,
        name=contract_instance.contract_type.name,
        address=to_checksum_address(contract_instance.address),
        args=list(args),
        tx_hash=receipt.txn_hash,
        block_number=int(receipt.block_number),
        deployer=to_checksum_address(receipt.transaction.sender),
        abi=_get_abi(contract_instance),
    )


def get_record_filepath(deployments_dir: Path, network: str, contract_name: str) -> Path:
    return deployments_dir / network / f"{contract_name}.json"


def save_deployment(record: DeploymentRecord, deployments_dir: Path) -> Path:
    """Writes a deployment record, replacing any earlier record of the same contract."""
    filepath = get_record_filepath(deployments_dir, record.network, record.name)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w") as file:
        json.dump(record._asdict(), file, **RECORD_JSON_FORMAT)
    return filepath


def _read_record(filepath: Path) -> DeploymentRecord:
    with open(filepath, "r") as file:
        return DeploymentRecord(**json.load(file))


def load_deployment(
    deployments_dir: Path, network: str, contract_name: str
) -> Optional[DeploymentRecord]:
    filepath = get_record_filepath(deployments_dir, network, contract_name)
    if not filepath.exists():
        return None
    return _read_record(filepath)


def read_deployments(deployments_dir: Path, network: str) -> List[DeploymentRecord]:
    """Returns the records saved for a network, ordered by contract name."""
    network_dir = deployments_dir / network
    return [_read_record(filepath) for filepath in sorted(network_dir.glob("*.json"))]


def list_networks(deployments_dir: Path) -> List[str]:
    if not deployments_dir.is_dir():
        return []
    return sorted(path.name for path in deployments_dir.iterdir() if path.is_dir())
