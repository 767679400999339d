from setuptools import setup, find_packages

setup(
    name="contract-export",
    version="0.1.0",
    description="Export compiled contract ABI and bytecode into a single bundle",
    packages=find_packages(),
    package_data={
        "contract_export": ["configs/schemas/*.json"],
    },
    install_requires=[
        "web3>=6.0.0",
        "jsonschema>=4.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "contract-export=contract_export.main:main",
        ],
    },
)
