#!/usr/bin/env python3
import argparse
import logging
import sys

from .exporter import ArtifactExporter
from .utils.config_manager import ConfigManager
from .utils.exceptions import ContractExportError
from .utils.logging import setup_logging

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export contract ABI and bytecode from build artifacts"
    )
    parser.add_argument("--config", default=None,
                       help="Path to JSON export configuration")
    parser.add_argument("--project-root", default=None,
                       help="Project root for artifact and output paths (default: current directory)")
    parser.add_argument("--output", default=None,
                       help="Output file, relative to the project root")
    parser.add_argument("--log-level", default="WARNING",
                       choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                       help="Logging level")
    parser.add_argument("--log-file", default=None,
                       help="Path to log file")
    return parser


def run(argv=None) -> int:
    """Run the export and return the process exit code"""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    try:
        config = ConfigManager().load_export_config(
            project_root=args.project_root,
            config_file=args.config,
            output_path=args.output
        )
        result = ArtifactExporter(config.contracts, config.output_path).export()
    except (ContractExportError, OSError) as e:
        LOG.debug("Export failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1

    print(f"Exported artifacts to {result.output_path}")
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
