"""
Core types, enums and errors for cross-chain token bridging.
"""

from enum import Enum
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from eth_account.signers.base import BaseAccount
from web3 import AsyncWeb3


class MessageDirection(Enum):
    """Direction a bridge message travels"""
    L1_TO_L2 = "l1_to_l2"
    L2_TO_L1 = "l2_to_l1"


# Loosely-typed inputs accepted by the public API
AddressLike = Union[str, Any]
NumberLike = Union[int, str, bytes, Decimal, float]
TransactionLike = Union[str, bytes, Mapping[str, Any], Any]
SignerOrProviderLike = Union[str, AsyncWeb3, BaseAccount]


class BridgeError(Exception):
    """Base exception for bridge operations"""
    def __init__(self, message: str, error_code: Optional[str] = None):
        self.error_code = error_code
        super().__init__(message)


class InvalidAddressError(BridgeError, ValueError):
    """Input could not be converted into an address"""
    pass


class InvalidNumberError(BridgeError, ValueError):
    """Input could not be converted into an integer"""
    pass


class InvalidTransactionError(BridgeError, ValueError):
    """Input could not be converted into a transaction hash"""
    pass


class InvalidProviderError(BridgeError, ValueError):
    """Input is neither a provider nor a signer"""
    pass


class TokenPairNotSupportedError(BridgeError):
    """Token pair cannot be moved by the selected bridge"""
    pass
