"""
Cross-chain messenger owning the L1 and L2 connections and the registered bridges.
"""

import logging
from typing import Optional, Dict, Any, List, Union

from eth_account.signers.base import BaseAccount
from eth_utils import to_hex
from web3 import AsyncWeb3
from web3.types import BlockIdentifier

from .adapter_factory import AdapterFactory
from .config import BridgeSettings, get_settings
from .interfaces import ICrossChainMessenger, IBridgeAdapter
from .models import TokenBridgeMessage
from .types import (
    AddressLike, NumberLike, MessageDirection, SignerOrProviderLike,
    BridgeError, InvalidProviderError, TokenPairNotSupportedError
)
from .utils import to_address, to_signer_or_provider

logger = logging.getLogger(__name__)

STANDARD_BRIDGE = "Standard"


class CrossChainMessenger(ICrossChainMessenger):
    """Entry point for moving tokens between an L1 and an L2 chain"""

    def __init__(self, l1_provider: SignerOrProviderLike, l2_provider: SignerOrProviderLike):
        self.l1_provider = self._to_provider(l1_provider, "L1")
        self.l2_provider = self._to_provider(l2_provider, "L2")
        self.bridges: Dict[str, IBridgeAdapter] = {}

    @classmethod
    def from_settings(cls, settings: Optional[BridgeSettings] = None) -> "CrossChainMessenger":
        """
        Create a messenger with the standard bridge registered.

        Args:
            settings: Bridge settings, loaded from the environment when omitted

        Raises:
            BridgeError: If the L1 standard bridge address is not configured
        """
        settings = settings or get_settings()
        logging.getLogger("platformq_bridge_sdk").setLevel(settings.LOG_LEVEL)
        if not settings.L1_STANDARD_BRIDGE_ADDRESS:
            raise BridgeError("L1 standard bridge address is not configured",
                              error_code="missing_l1_bridge")

        messenger = cls(settings.L1_RPC_URL, settings.L2_RPC_URL)
        messenger.add_bridge(
            STANDARD_BRIDGE,
            "standard",
            l1_bridge=settings.L1_STANDARD_BRIDGE_ADDRESS,
            l2_bridge=settings.L2_STANDARD_BRIDGE_ADDRESS,
            default_l2_gas_limit=settings.DEFAULT_L2_GAS_LIMIT,
        )
        return messenger

    def add_bridge(self, name: str, kind: str, l1_bridge: AddressLike,
                   l2_bridge: AddressLike, **kwargs: Any) -> IBridgeAdapter:
        """Create an adapter through the factory and register it under a name"""
        adapter = AdapterFactory.create_adapter(kind, self, l1_bridge, l2_bridge, **kwargs)
        self.bridges[name] = adapter
        logger.info(f"Registered {kind} bridge '{name}'")
        return adapter

    async def get_bridge_for_token_pair(self, l1_token: AddressLike,
                                        l2_token: AddressLike) -> IBridgeAdapter:
        """Return the first registered bridge that supports the token pair"""
        for name, bridge in self.bridges.items():
            if await bridge.supports_token_pair(l1_token, l2_token):
                logger.debug(f"Bridge '{name}' supports {l1_token} -> {l2_token}")
                return bridge
        raise TokenPairNotSupportedError("no supported bridge for token pair")

    async def get_token_bridge_messages_by_address(
        self,
        address: AddressLike,
        direction: Optional[MessageDirection] = None,
        from_block: BlockIdentifier = 0,
        to_block: BlockIdentifier = "latest",
    ) -> List[TokenBridgeMessage]:
        """Collect bridge messages sent by an address across every registered bridge"""
        messages: List[TokenBridgeMessage] = []
        for bridge in self.bridges.values():
            messages.extend(
                await bridge.get_token_bridge_messages_by_address(
                    address, direction=direction, from_block=from_block, to_block=to_block
                )
            )
        return messages

    async def deposit_erc20(self, l1_token: AddressLike, l2_token: AddressLike,
                            amount: NumberLike, signer: Union[BaseAccount, str],
                            **opts: Any) -> str:
        bridge = await self.get_bridge_for_token_pair(l1_token, l2_token)
        return await bridge.deposit(l1_token, l2_token, amount, signer, **opts)

    async def withdraw_erc20(self, l1_token: AddressLike, l2_token: AddressLike,
                             amount: NumberLike, signer: Union[BaseAccount, str],
                             **opts: Any) -> str:
        bridge = await self.get_bridge_for_token_pair(l1_token, l2_token)
        return await bridge.withdraw(l1_token, l2_token, amount, signer, **opts)

    async def send_transaction(self, direction: MessageDirection, tx: Dict[str, Any],
                               signer: Union[BaseAccount, str]) -> str:
        """
        Fill in the missing transaction fields and send it on the chain the
        direction starts from.

        An eth_account signer signs locally; an address string relies on an
        account unlocked on the node.
        """
        w3 = self._provider_for(direction)
        if isinstance(signer, BaseAccount):
            sender = signer.address
        else:
            sender = to_address(signer)

        tx = dict(tx)
        tx["from"] = sender
        if "nonce" not in tx:
            tx["nonce"] = await w3.eth.get_transaction_count(sender, "pending")
        if "chainId" not in tx:
            tx["chainId"] = await w3.eth.chain_id
        if "gas" not in tx:
            tx["gas"] = await w3.eth.estimate_gas(tx)
        if "gasPrice" not in tx and "maxFeePerGas" not in tx:
            tx["gasPrice"] = await w3.eth.gas_price

        if isinstance(signer, BaseAccount):
            signed_tx = signer.sign_transaction(tx)
            tx_hash = await w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            tx_hash = await w3.eth.send_transaction(tx)

        tx_hash = to_hex(tx_hash)
        logger.info(f"Sent {direction.value} transaction {tx_hash} from {sender}")
        return tx_hash

    async def estimate_gas(self, direction: MessageDirection, tx: Dict[str, Any]) -> int:
        return await self._provider_for(direction).eth.estimate_gas(tx)

    def _provider_for(self, direction: MessageDirection) -> AsyncWeb3:
        if direction == MessageDirection.L1_TO_L2:
            return self.l1_provider
        return self.l2_provider

    @staticmethod
    def _to_provider(value: SignerOrProviderLike, layer: str) -> AsyncWeb3:
        provider = to_signer_or_provider(value)
        if not isinstance(provider, AsyncWeb3):
            raise InvalidProviderError(f"{layer} provider must be a JSON-RPC URL or AsyncWeb3 instance")
        return provider
