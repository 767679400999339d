"""
Artifact exporter

Reads compiled contract artifacts (Hardhat JSON output) and writes a single
bundle holding only the ABI and bytecode of each contract.

Design Notes:
- The exported contracts are a list of (name, artifact path) pairs
- Export is all-or-nothing: the output is written only after every
  artifact has been loaded and projected
- Output key order follows the contract list, so identical inputs give
  byte-identical output
- Fields other than abi/bytecode are dropped without validation
"""

import json
import logging
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from .utils.exceptions import (
    ArtifactFormatError,
    ArtifactNotFoundError,
    ConfigurationError,
    ExportWriteError,
)

LOG = logging.getLogger(__name__)

ARTIFACTS_DIR = "artifacts"
OUTPUT_FILENAME = "ExportedArtifacts.json"

# Contracts exported when no configuration is given, in output order
DEFAULT_CONTRACT_NAMES = ("ServiceFramework", "GreetingService")

ExportBundle = Dict[str, Dict[str, Any]]


@dataclass
class ContractSpec:
    """A contract to export and the artifact it is read from"""
    name: str
    artifact_path: Path


@dataclass
class ExportResult:
    """Result of a successful export"""
    output_path: Path
    contracts: List[str] = field(default_factory=list)


def default_artifact_path(project_root: Union[str, Path], name: str) -> Path:
    """Conventional Hardhat location: artifacts/contracts/<Name>.sol/<Name>.json"""
    return Path(project_root) / ARTIFACTS_DIR / "contracts" / f"{name}.sol" / f"{name}.json"


def default_output_path(project_root: Union[str, Path]) -> Path:
    return Path(project_root) / ARTIFACTS_DIR / OUTPUT_FILENAME


def default_contracts(project_root: Union[str, Path]) -> List[ContractSpec]:
    return [
        ContractSpec(name=name, artifact_path=default_artifact_path(project_root, name))
        for name in DEFAULT_CONTRACT_NAMES
    ]


def load_artifact(path: Union[str, Path], name: str = None) -> Dict[str, Any]:
    """Load a build artifact from disk

    Args:
        path: Artifact JSON file
        name: Contract name, used in error details

    Returns:
        Parsed artifact record

    Raises:
        ArtifactNotFoundError: If the file does not exist
        ArtifactFormatError: If the file is not UTF-8 JSON holding an object
    """
    path = Path(path)
    if not path.is_file():
        raise ArtifactNotFoundError(
            f"Artifact not found: {path}",
            contract=name,
            path=str(path)
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            record = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ArtifactFormatError(
            f"Invalid JSON in artifact {path}: {e}",
            contract=name,
            path=str(path)
        ) from e

    if not isinstance(record, dict):
        raise ArtifactFormatError(
            f"Artifact {path} is not a JSON object",
            contract=name,
            path=str(path)
        )

    return record


def project_artifact(name: str, record: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only abi and bytecode from an artifact record

    Raises:
        ArtifactFormatError: If the record lacks abi or bytecode
    """
    missing = [key for key in ("abi", "bytecode") if key not in record]
    if missing:
        raise ArtifactFormatError(
            f"Artifact for {name} is missing field(s): {', '.join(missing)}",
            contract=name
        )

    return {
        "abi": record["abi"],
        "bytecode": record["bytecode"],
    }


def build_bundle(contracts: Sequence[ContractSpec]) -> ExportBundle:
    """Load and project every contract, in order

    Any failure aborts the whole build; no partial bundle is returned.
    """
    bundle: ExportBundle = {}

    for spec in contracts:
        if spec.name in bundle:
            raise ConfigurationError(
                f"Duplicate contract name: {spec.name}",
                field="contracts"
            )

        record = load_artifact(spec.artifact_path, spec.name)
        entry = project_artifact(spec.name, record)
        bundle[spec.name] = entry

        abi = entry["abi"]
        bytecode = entry["bytecode"]
        LOG.info(
            f"Loaded {spec.name}: ABI {len(abi) if isinstance(abi, list) else '?'} entries, "
            f"bytecode {len(bytecode) if isinstance(bytecode, str) else '?'} characters"
        )

    return bundle


def serialize_bundle(bundle: ExportBundle) -> str:
    """Serialize with 2-space indentation and no trailing newline"""
    return json.dumps(bundle, indent=2, ensure_ascii=False)


def _output_mode(path: Path) -> int:
    """Mode of the existing output, or the umask default for a new file"""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_bundle(text: str, path: Union[str, Path]) -> Path:
    """Write the serialized bundle, replacing any previous file

    The text goes to a temporary file in the same directory first, so a
    failed write leaves the previous output untouched. The file keeps the mode
    of the output it replaces.
    """
    path = Path(path)
    tmp_name = None

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
        )
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise ExportWriteError(
            f"Failed to write {path}: {e}",
            path=str(path)
        ) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    return path


class ArtifactExporter:
    """
    Exports a fixed list of contracts into one bundle file.

    Usage:
        exporter = ArtifactExporter(default_contracts(root), default_output_path(root))
        result = exporter.export()
    """

    def __init__(self, contracts: Sequence[ContractSpec], output_path: Union[str, Path]):
        self.contracts = list(contracts)
        self.output_path = Path(output_path)

    def export(self) -> ExportResult:
        """Build, serialize and write the bundle

        Raises:
            ContractExportError: On any load, projection or write failure
        """
        LOG.debug(f"Exporting {len(self.contracts)} contract(s) to {self.output_path}")

        bundle = build_bundle(self.contracts)
        text = serialize_bundle(bundle)
        output_path = write_bundle(text, self.output_path)

        return ExportResult(
            output_path=output_path.resolve(),
            contracts=list(bundle.keys())
        )
