"""
Unit tests for reading an exported bundle back
"""

import json

import pytest
from web3 import Web3

from contract_export.exporter import ArtifactExporter, default_contracts
from contract_export.utils.bundle_loader import ContractData, contract_factory, load_bundle
from contract_export.utils.exceptions import ArtifactFormatError, ArtifactNotFoundError

GREET_ABI = [
    {
        "type": "function",
        "name": "greet",
        "inputs": [],
        "outputs": [{"name": "", "type": "string", "internalType": "string"}],
        "stateMutability": "view",
    },
    {
        "type": "event",
        "name": "Greeted",
        "inputs": [{"name": "who", "type": "address", "indexed": True}],
        "anonymous": False,
    },
]


class TestLoadBundle:
    """Test loading exported bundles"""

    def test_load_exported_bundle(self, project_root, output_path):
        ArtifactExporter(default_contracts(project_root), output_path).export()

        bundle = load_bundle(output_path)

        assert list(bundle.keys()) == ["ServiceFramework", "GreetingService"]
        assert bundle["ServiceFramework"].bytecode == "0x600160005401"
        assert bundle["ServiceFramework"].function_names() == ["greet"]
        assert bundle["GreetingService"].abi == []

    def test_missing_bundle(self, tmp_path):
        with pytest.raises(ArtifactNotFoundError):
            load_bundle(tmp_path / "ExportedArtifacts.json")

    def test_entry_without_bytecode(self, tmp_path):
        path = tmp_path / "bundle.json"
        path.write_text(json.dumps({"Token": {"abi": []}}), encoding="utf-8")

        with pytest.raises(ArtifactFormatError) as exc_info:
            load_bundle(path)

        assert exc_info.value.details["contract"] == "Token"

    def test_non_utf8_bundle(self, tmp_path):
        path = tmp_path / "bundle.json"
        path.write_bytes(b'{"Token": {"abi": [], "bytecode": "\xff"}}')

        with pytest.raises(ArtifactFormatError):
            load_bundle(path)


class TestContractFactory:
    """Test building web3 contract factories"""

    def test_factory_from_bundle_data(self):
        data = ContractData(abi=GREET_ABI, bytecode="0x600160005401")

        factory = contract_factory(Web3(), data)

        assert factory.abi == GREET_ABI
        assert bytes(factory.bytecode) == bytes.fromhex("600160005401")
        assert data.function_names() == ["greet"]
