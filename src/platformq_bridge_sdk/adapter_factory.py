"""
Bridge adapter factory for creating adapters by kind.
"""

import logging
from typing import Dict, Type, Any

from .interfaces import IBridgeAdapter, ICrossChainMessenger
from .types import AddressLike
from .adapters import StandardBridgeAdapter

logger = logging.getLogger(__name__)


class AdapterFactory:
    """Factory for creating bridge adapters"""

    # Mapping of adapter kinds to adapter classes
    _adapters: Dict[str, Type[IBridgeAdapter]] = {
        "standard": StandardBridgeAdapter,
    }

    @classmethod
    def create_adapter(cls, kind: str, messenger: ICrossChainMessenger,
                       l1_bridge: AddressLike, l2_bridge: AddressLike,
                       **kwargs: Any) -> IBridgeAdapter:
        """
        Create an adapter instance for the given bridge contracts.

        Args:
            kind: Adapter kind, e.g. "standard"
            messenger: Messenger providing the L1 and L2 connections
            l1_bridge: Address of the L1 bridge contract
            l2_bridge: Address of the L2 bridge contract
            **kwargs: Extra adapter-specific options

        Returns:
            Configured bridge adapter instance

        Raises:
            ValueError: If the adapter kind is not supported
        """
        if kind not in cls._adapters:
            raise ValueError(f"Unsupported adapter kind: {kind}")

        adapter_class = cls._adapters[kind]
        return adapter_class(messenger, l1_bridge, l2_bridge, **kwargs)

    @classmethod
    def register_adapter(cls, kind: str, adapter_class: Type[IBridgeAdapter]):
        """
        Register a custom adapter implementation for a kind.

        Args:
            kind: The adapter kind
            adapter_class: The adapter class to use
        """
        cls._adapters[kind] = adapter_class
        logger.info(f"Registered adapter {adapter_class.__name__} for {kind}")

    @classmethod
    def get_supported_adapters(cls) -> list[str]:
        """Get list of supported adapter kinds"""
        return list(cls._adapters.keys())

    @classmethod
    def is_adapter_supported(cls, kind: str) -> bool:
        """Check if an adapter kind is supported"""
        return kind in cls._adapters
