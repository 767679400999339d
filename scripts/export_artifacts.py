#!/usr/bin/env python3
"""
Export ABI and bytecode of the compiled contracts into artifacts/ExportedArtifacts.json

Usage: python scripts/export_artifacts.py [--config export.json] [--project-root DIR]

Run after 'npx hardhat compile'.
"""

import sys
from pathlib import Path

from contract_export.main import run

PROJECT_ROOT = Path(__file__).resolve().parent.parent

if __name__ == "__main__":
    args = sys.argv[1:]
    if "--project-root" not in args:
        args = ["--project-root", str(PROJECT_ROOT)] + args
    sys.exit(run(args))
