"""
Bridge contract ABIs and well-known predeploy addresses.
"""

import json
import logging
import os
from functools import lru_cache
from typing import Any, Dict, List

from web3 import AsyncWeb3
from web3.contract import AsyncContract

from .types import AddressLike
from .utils import to_address

logger = logging.getLogger(__name__)

ABI_DIR = os.path.join(os.path.dirname(__file__), "abis")

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# L2 predeploys
OVM_ETH = "0xDeadDeAddeAddEAddeadDEaDDEAdDeaDDeAD0000"
L2_STANDARD_BRIDGE = "0x4200000000000000000000000000000000000010"

CONTRACT_NAMES = ("L1StandardBridge", "IL2ERC20Bridge", "L2StandardERC20")


@lru_cache(maxsize=None)
def _load_abi(name: str) -> str:
    abi_path = os.path.join(ABI_DIR, f"{name}.json")
    with open(abi_path) as f:
        abi = json.load(f)
    if isinstance(abi, dict) and "abi" in abi:
        abi = abi["abi"]
    logger.debug(f"Loaded ABI for {name} from {abi_path}")
    return json.dumps(abi)


def get_contract_abi(name: str) -> List[Dict[str, Any]]:
    """
    Get the ABI of a bundled bridge contract.

    Args:
        name: Contract name, one of CONTRACT_NAMES

    Returns:
        A fresh copy of the contract ABI

    Raises:
        ValueError: If no ABI is bundled under that name
    """
    if name not in CONTRACT_NAMES:
        raise ValueError(f"Unknown contract: {name}")
    return json.loads(_load_abi(name))


def get_contract(w3: AsyncWeb3, name: str, address: AddressLike) -> AsyncContract:
    """Bind a bundled contract ABI to an address on the given provider"""
    return w3.eth.contract(address=to_address(address), abi=get_contract_abi(name))
