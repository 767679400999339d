"""
contract-export tests

Run with:
   pytest contract_export/tests/ -v
"""
