"""
Coercion helpers that turn loosely-typed inputs into canonical on-chain values.
"""

import logging
import re
from decimal import Decimal
from typing import Any, Mapping, Union

from eth_account.signers.base import BaseAccount
from eth_utils import (
    is_checksum_address,
    is_checksum_formatted_address,
    is_hex_address,
    is_hexstr,
    to_checksum_address,
    to_hex,
)
from web3 import AsyncWeb3

from .types import (
    AddressLike,
    InvalidAddressError,
    InvalidNumberError,
    InvalidProviderError,
    InvalidTransactionError,
    NumberLike,
    SignerOrProviderLike,
    TransactionLike,
)

logger = logging.getLogger(__name__)

# Largest integer that survives a round trip through an IEEE-754 double
MAX_SAFE_INTEGER = 2 ** 53 - 1

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DEC_DIGITS = re.compile(r"[0-9]+")


def to_signer_or_provider(signer_or_provider: SignerOrProviderLike) -> Union[AsyncWeb3, BaseAccount]:
    """
    Convert a signer-or-provider-like value into a signer or a provider.

    Strings are assumed to be JSON-RPC URLs and are wrapped in an async HTTP
    provider.
    """
    if isinstance(signer_or_provider, str):
        logger.debug(f"Creating JSON-RPC provider for {signer_or_provider}")
        return AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(signer_or_provider))
    elif isinstance(signer_or_provider, AsyncWeb3):
        return signer_or_provider
    elif isinstance(signer_or_provider, BaseAccount):
        return signer_or_provider
    raise InvalidProviderError("Invalid provider")


def to_transaction_hash(transaction: TransactionLike) -> str:
    """
    Pull a transaction hash out of a hash string, raw hash bytes, a receipt
    (``transactionHash``) or a transaction (``hash``).
    """
    if isinstance(transaction, str):
        if not _is_hex_string(transaction, 32):
            raise InvalidTransactionError("Invalid transaction hash")
        return transaction.lower()

    if isinstance(transaction, (bytes, bytearray)):
        if len(transaction) != 32:
            raise InvalidTransactionError("Invalid transaction hash")
        return to_hex(bytes(transaction))

    for field in ("transactionHash", "hash"):
        value = _get_field(transaction, field)
        if value and isinstance(value, (str, bytes, bytearray)):
            return to_transaction_hash(value)

    raise InvalidTransactionError("Invalid transaction")


def to_big_number(num: NumberLike) -> int:
    """Convert a number-like into an arbitrary-precision integer."""
    if isinstance(num, bool):
        raise InvalidNumberError(f"Invalid number: {num!r}")

    if isinstance(num, int):
        return num

    if isinstance(num, str):
        negative = num.startswith("-")
        digits = num[1:] if negative else num
        if digits.startswith("0x") and _HEX_DIGITS.fullmatch(digits[2:]):
            value = int(digits[2:], 16)
        elif _DEC_DIGITS.fullmatch(digits):
            value = int(digits, 10)
        else:
            raise InvalidNumberError(f"Invalid number: {num!r}")
        return -value if negative else value

    if isinstance(num, (bytes, bytearray)):
        return int.from_bytes(num, "big")

    if isinstance(num, Decimal):
        if not num.is_finite() or num != num.to_integral_value():
            raise InvalidNumberError(f"Invalid number: {num!r}")
        return int(num)

    if isinstance(num, float):
        if not num.is_integer() or abs(num) > MAX_SAFE_INTEGER:
            raise InvalidNumberError(f"Invalid number: {num!r}")
        return int(num)

    raise InvalidNumberError(f"Invalid number: {num!r}")


def to_number(num: NumberLike) -> int:
    """Convert a number-like into an integer within the safe-integer range."""
    value = to_big_number(num)
    if abs(value) > MAX_SAFE_INTEGER:
        raise InvalidNumberError(f"Number out of safe range: {value}")
    return value


def to_address(addr: AddressLike) -> str:
    """Convert an address-like into a checksummed 0x-prefixed address."""
    if not isinstance(addr, str):
        addr = getattr(addr, "address", None)

    if not _is_valid_address(addr):
        raise InvalidAddressError("Invalid address")
    return to_checksum_address(addr)


def hex_string_equals(a: str, b: str) -> bool:
    """Compare two hex strings case-insensitively."""
    if not _is_hex_string(a) or not _is_hex_string(b):
        raise ValueError("Input is not a hex string")
    return a.lower() == b.lower()


def _is_valid_address(value: Any) -> bool:
    if not is_hex_address(value):
        return False
    # Mixed-case input carries an EIP-55 checksum that must hold
    if is_checksum_formatted_address(value):
        return is_checksum_address(value)
    return True


def _is_hex_string(value: Any, length: int = None) -> bool:
    if not isinstance(value, str) or not value.startswith("0x"):
        return False
    if value != "0x" and not is_hexstr(value):
        return False
    if length is not None and len(value) != 2 + 2 * length:
        return False
    return True


def _get_field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)
