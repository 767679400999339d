"""
contract-export

Collects the ABI and bytecode of compiled contracts into one JSON bundle.
"""

__version__ = "0.1.0"
