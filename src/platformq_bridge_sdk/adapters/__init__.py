"""
Bridge adapter implementations.
"""

from .base import BaseBridgeAdapter
from .standard import StandardBridgeAdapter

__all__ = [
    "BaseBridgeAdapter",
    "StandardBridgeAdapter",
]
