from setuptools import setup, find_packages

setup(
    name="platformq-bridge-sdk",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"platformq_bridge_sdk": ["abis/*.json"]},
    include_package_data=True,
    install_requires=[
        "web3>=7.0.0",
        "eth-account>=0.13.0",
        "eth-utils>=5.0.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "hexbytes>=1.0.0",
        ],
    },
    python_requires=">=3.9",
    author="PlatformQ Team",
    description="L1/L2 token bridge helpers for PlatformQ services",
)
