"""
Shared fixtures for contract export tests.

Fixtures build a throwaway project root laid out like a Hardhat project:

    <root>/artifacts/contracts/<Name>.sol/<Name>.json
"""

import json
from pathlib import Path

import pytest

from ..exporter import default_artifact_path, default_output_path

SERVICE_FRAMEWORK_ARTIFACT = {
    "_format": "hh-sol-artifact-1",
    "contractName": "ServiceFramework",
    "sourceName": "contracts/ServiceFramework.sol",
    "abi": [{"type": "function", "name": "greet"}],
    "bytecode": "0x600160005401",
    "deployedBytecode": "0x6001",
    "linkReferences": {},
    "deployedLinkReferences": {},
}

GREETING_SERVICE_ARTIFACT = {
    "_format": "hh-sol-artifact-1",
    "contractName": "GreetingService",
    "sourceName": "contracts/GreetingService.sol",
    "abi": [],
    "bytecode": "0x00",
    "deployedBytecode": "0x",
    "linkReferences": {},
    "deployedLinkReferences": {},
}


def write_artifact(root: Path, name: str, record) -> Path:
    """Write an artifact at its conventional location"""
    path = default_artifact_path(root, name)
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(record, str):
        path.write_text(record, encoding="utf-8")
    else:
        path.write_text(json.dumps(record, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def project_root(tmp_path):
    """Project root containing both default artifacts"""
    write_artifact(tmp_path, "ServiceFramework", SERVICE_FRAMEWORK_ARTIFACT)
    write_artifact(tmp_path, "GreetingService", GREETING_SERVICE_ARTIFACT)
    return tmp_path


@pytest.fixture
def output_path(project_root):
    return default_output_path(project_root)

