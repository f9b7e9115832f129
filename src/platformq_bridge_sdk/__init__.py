"""
PlatformQ Bridge SDK

Helpers for moving ERC20 tokens between an L1 chain and its L2 through the
standard token bridge contracts.
"""

from .types import (
    MessageDirection,
    AddressLike,
    NumberLike,
    TransactionLike,
    SignerOrProviderLike,
    BridgeError,
    InvalidAddressError,
    InvalidNumberError,
    InvalidTransactionError,
    InvalidProviderError,
    TokenPairNotSupportedError
)

from .interfaces import (
    IBridgeAdapter,
    ICrossChainMessenger
)

from .models import TokenBridgeMessage

from .utils import (
    to_signer_or_provider,
    to_transaction_hash,
    to_big_number,
    to_number,
    to_address,
    hex_string_equals
)

from .contracts import (
    OVM_ETH,
    L2_STANDARD_BRIDGE,
    ZERO_ADDRESS,
    get_contract_abi
)

from .config import BridgeSettings, get_settings
from .adapter_factory import AdapterFactory
from .adapters import (
    BaseBridgeAdapter,
    StandardBridgeAdapter
)
from .messenger import CrossChainMessenger

__all__ = [
    # Types
    "MessageDirection",
    "AddressLike",
    "NumberLike",
    "TransactionLike",
    "SignerOrProviderLike",
    "BridgeError",
    "InvalidAddressError",
    "InvalidNumberError",
    "InvalidTransactionError",
    "InvalidProviderError",
    "TokenPairNotSupportedError",

    # Interfaces
    "IBridgeAdapter",
    "ICrossChainMessenger",

    # Models
    "TokenBridgeMessage",

    # Utils
    "to_signer_or_provider",
    "to_transaction_hash",
    "to_big_number",
    "to_number",
    "to_address",
    "hex_string_equals",

    # Contracts
    "OVM_ETH",
    "L2_STANDARD_BRIDGE",
    "ZERO_ADDRESS",
    "get_contract_abi",

    # Config
    "BridgeSettings",
    "get_settings",

    # Factory, adapters & messenger
    "AdapterFactory",
    "BaseBridgeAdapter",
    "StandardBridgeAdapter",
    "CrossChainMessenger"
]

__version__ = "1.0.0"
