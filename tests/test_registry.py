import json

from eth_utils import to_checksum_address

from raffle_deployment.registry import (
    DeploymentRecord,
    get_record_filepath,
    list_networks,
    load_deployment,
    read_deployments,
    record_from_instance,
    save_deployment,
)

DEPLOYER = to_checksum_address("0xAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA")
ABI = [
    {"type": "function", "name": "enterRaffle", "inputs": [], "outputs": []},
    {"type": "constructor", "inputs": []},
    {"type": "event", "name": "RaffleEnter", "inputs": []},
]


def _record(network, chain_id, name, address, args=(), block_number=1):
    return DeploymentRecord(
        network=network,
        chain_id=chain_id,
        name=name,
        address=address,
        args=list(args),
        tx_hash="0x" + "cd" * 32,
        block_number=block_number,
        deployer=DEPLOYER,
        abi=ABI,
    )


def test_save_and_load_deployment(tmp_path):
    record = _record(
        "goerli",
        5,
        "Raffle",
        "0x5FbDB2315678afecb367f032d93F642f64180aa3",
        args=["0x2Ca8E0C643bDe4C2E08ab1fA0da3401AdAD7734D", 10**16],
        block_number=20,
    )
    filepath = save_deployment(record, deployments_dir=tmp_path)
    assert filepath == tmp_path / "goerli" / "Raffle.json"
    assert filepath == get_record_filepath(tmp_path, "goerli", "Raffle")

    with open(filepath) as file:
        data = json.load(file)
    assert data["args"] == ["0x2Ca8E0C643bDe4C2E08ab1fA0da3401AdAD7734D", 10**16]

    assert load_deployment(tmp_path, "goerli", "Raffle") == record


def test_load_missing_deployment(tmp_path):
    assert load_deployment(tmp_path, "hardhat", "Raffle") is None


def test_save_replaces_earlier_record(tmp_path):
    save_deployment(_record("hardhat", 31337, "Raffle", "0x" + "11" * 20), tmp_path)
    latest = _record("hardhat", 31337, "Raffle", "0x" + "22" * 20, block_number=7)
    save_deployment(latest, tmp_path)

    assert load_deployment(tmp_path, "hardhat", "Raffle") == latest
    assert len(read_deployments(tmp_path, "hardhat")) == 1


def test_records_are_kept_per_network(tmp_path):
    save_deployment(_record("hardhat", 31337, "VRFCoordinatorV2Mock", "0x" + "11" * 20), tmp_path)
    save_deployment(_record("hardhat", 31337, "Raffle", "0x" + "22" * 20), tmp_path)
    save_deployment(_record("localhost", 31337, "Raffle", "0x" + "33" * 20), tmp_path)

    assert list_networks(tmp_path) == ["hardhat", "localhost"]
    hardhat = read_deployments(tmp_path, "hardhat")
    assert [r.name for r in hardhat] == ["Raffle", "VRFCoordinatorV2Mock"]
    assert read_deployments(tmp_path, "goerli") == []


def test_list_networks_without_deployments(tmp_path):
    assert list_networks(tmp_path / "missing") == []


def test_record_from_instance(instance_factory):
    instance = instance_factory("VRFCoordinatorV2Mock")
    instance.contract_type.abi = [
        _abi_entry({"type": "function", "name": "fundSubscription"}),
        _abi_entry({"type": "constructor"}),
        _abi_entry({"type": "event", "name": "SubscriptionCreated"}),
    ]

    record = record_from_instance(instance, network="hardhat", args=(1, 2))

    assert record.network == "hardhat"
    assert record.chain_id == 31337
    assert record.name == "VRFCoordinatorV2Mock"
    assert record.address == instance.address
    assert record.args == [1, 2]
    assert record.deployer == DEPLOYER
    assert [d["type"] for d in record.abi] == ["constructor", "event", "function"]


def _abi_entry(data):
    class AbiEntry:
        def model_dump(self, mode):
            return data

    return AbiEntry()
