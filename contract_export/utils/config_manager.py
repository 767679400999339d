"""
Configuration manager with JSON schema validation

Resolves which contracts are exported and where the bundle is written.

Design Notes:
- Uses jsonschema for configuration validation
- Without a configuration file the built-in contract list is used
- Relative paths resolve against the project root
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from ..exporter import (
    ContractSpec,
    default_artifact_path,
    default_contracts,
    default_output_path,
)
from .exceptions import ConfigurationError, ErrorCodes

LOG = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of configuration validation"""
    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class ExportConfiguration:
    """Validated export configuration"""
    project_root: Path
    output_path: Path
    contracts: List[ContractSpec]


class ConfigManager:
    """
    Loads and validates export configuration.
    """

    def __init__(self, schema_dir: Path = None):
        """
        Initialize configuration manager.

        Args:
            schema_dir: Directory containing JSON schemas (default: package configs/schemas/)
        """
        if schema_dir is None:
            schema_dir = Path(__file__).parent.parent / "configs" / "schemas"

        self.schema_dir = Path(schema_dir)
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def _load_schema(self, schema_name: str) -> Dict[str, Any]:
        """Load a JSON schema from file or cache"""
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_file = self.schema_dir / f"{schema_name}_schema.json"
        if not schema_file.exists():
            raise ConfigurationError(
                f"Schema file not found: {schema_file}",
                config_file=str(schema_file),
                code=ErrorCodes.CONFIG_FILE_NOT_FOUND
            )

        try:
            with open(schema_file, 'r') as f:
                schema = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in schema file {schema_file}: {e}",
                config_file=str(schema_file)
            ) from e

        self._schemas[schema_name] = schema
        return schema

    def _validate_config(self, config: Any, schema: Dict[str, Any]) -> ValidationResult:
        """Validate configuration against a schema"""
        validator = jsonschema.Draft7Validator(schema)
        errors = []

        for error in sorted(validator.iter_errors(config), key=lambda e: [str(p) for p in e.path]):
            if error.path:
                path = " -> ".join(str(p) for p in error.path)
                errors.append(f"'{path}' {error.message}")
            else:
                errors.append(error.message)

        return ValidationResult(is_valid=not errors, errors=errors)

    def read_config_file(self, config_file: Union[str, Path]) -> Dict[str, Any]:
        """
        Read and validate a configuration file.

        Raises:
            ConfigurationError: If the file is missing, not JSON or fails validation
        """
        config_file = Path(config_file)

        if not config_file.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {config_file}",
                config_file=str(config_file),
                code=ErrorCodes.CONFIG_FILE_NOT_FOUND
            )

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {config_file}: {e}",
                config_file=str(config_file)
            ) from e

        validation = self._validate_config(config, self._load_schema("export"))
        if not validation.is_valid:
            error_msg = f"Configuration validation failed for {config_file}:\n"
            error_msg += "\n".join(f"  - {error}" for error in validation.errors)
            raise ConfigurationError(error_msg, config_file=str(config_file))

        return config

    def load_export_config(
        self,
        project_root: Union[str, Path] = None,
        config_file: Optional[Union[str, Path]] = None,
        output_path: Optional[Union[str, Path]] = None
    ) -> ExportConfiguration:
        """
        Resolve the export configuration.

        Args:
            project_root: Base for relative paths (default: current directory)
            config_file: Optional JSON configuration file
            output_path: Explicit output path, takes precedence over the config file

        Returns:
            ExportConfiguration with absolute paths
        """
        root = Path(project_root) if project_root is not None else Path.cwd()
        root = root.resolve()

        contracts = default_contracts(root)
        configured_output = None

        if config_file is not None:
            config = self.read_config_file(config_file)
            configured_output = config.get("output")

            if "contracts" in config:
                contracts = []
                seen = set()
                for item in config["contracts"]:
                    name = item["name"]
                    if name in seen:
                        raise ConfigurationError(
                            f"Duplicate contract name in configuration: {name}",
                            config_file=str(config_file),
                            field="contracts"
                        )
                    seen.add(name)

                    artifact = item.get("artifact")
                    artifact_path = (
                        root / artifact if artifact else default_artifact_path(root, name)
                    )
                    contracts.append(ContractSpec(name=name, artifact_path=artifact_path))

            LOG.debug(f"Loaded configuration from {config_file}: {len(contracts)} contract(s)")

        if output_path is None:
            output_path = configured_output

        resolved_output = root / output_path if output_path else default_output_path(root)

        return ExportConfiguration(
            project_root=root,
            output_path=resolved_output,
            contracts=contracts
        )
