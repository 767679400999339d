"""
Helpers for consuming an exported bundle
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from web3 import Web3
from web3.contract import Contract

from .exceptions import ArtifactFormatError, ArtifactNotFoundError

LOG = logging.getLogger(__name__)


@dataclass
class ContractData:
    """Contract bytecode and ABI data"""
    abi: List[Dict[str, Any]]
    bytecode: str

    def function_names(self) -> List[str]:
        return [entry["name"] for entry in self.abi if entry.get("type") == "function"]


def load_bundle(path: Union[str, Path]) -> Dict[str, ContractData]:
    """Load an exported bundle

    Args:
        path: Bundle file written by the exporter

    Returns:
        Contract name -> ContractData, in file order
    """
    path = Path(path)
    if not path.is_file():
        raise ArtifactNotFoundError(f"Bundle not found: {path}", path=str(path))

    with open(path, 'r', encoding='utf-8') as f:
        try:
            raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ArtifactFormatError(f"Invalid JSON in bundle {path}: {e}", path=str(path)) from e

    if not isinstance(raw, dict):
        raise ArtifactFormatError(f"Bundle {path} is not a JSON object", path=str(path))

    bundle = {}
    for name, entry in raw.items():
        if not isinstance(entry, dict) or "abi" not in entry or "bytecode" not in entry:
            raise ArtifactFormatError(
                f"Bundle entry {name} needs abi and bytecode",
                contract=name,
                path=str(path)
            )
        bundle[name] = ContractData(abi=entry["abi"], bytecode=entry["bytecode"])

    LOG.debug(f"Loaded bundle {path} with {len(bundle)} contract(s)")
    return bundle


def contract_factory(w3: Web3, data: ContractData) -> Contract:
    """Build a deployable contract factory from bundle data"""
    return w3.eth.contract(abi=data.abi, bytecode=data.bytecode)
