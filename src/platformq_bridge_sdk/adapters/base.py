"""
Base adapter implementation with common functionality.
"""

import logging
from typing import Optional, Dict, Any, List, Union
from abc import ABC, abstractmethod

from eth_account.signers.base import BaseAccount
from web3.contract import AsyncContract
from web3.types import BlockIdentifier

from ..contracts import get_contract
from ..interfaces import IBridgeAdapter, ICrossChainMessenger
from ..models import TokenBridgeMessage
from ..types import AddressLike, NumberLike, MessageDirection

logger = logging.getLogger(__name__)

# Transaction fields owned by the adapter
RESERVED_TX_FIELDS = ("to", "data")


class BaseBridgeAdapter(IBridgeAdapter, ABC):
    """Base adapter holding the L1/L2 bridge contracts of a token bridge"""

    L1_BRIDGE_ABI = "L1StandardBridge"
    L2_BRIDGE_ABI = "IL2ERC20Bridge"

    def __init__(self, messenger: ICrossChainMessenger, l1_bridge: AddressLike,
                 l2_bridge: AddressLike):
        self.messenger = messenger
        self.l1_bridge: AsyncContract = get_contract(
            messenger.l1_provider, self.L1_BRIDGE_ABI, l1_bridge
        )
        self.l2_bridge: AsyncContract = get_contract(
            messenger.l2_provider, self.L2_BRIDGE_ABI, l2_bridge
        )
        logger.info(
            f"{type(self).__name__} using L1 bridge {self.l1_bridge.address} "
            f"and L2 bridge {self.l2_bridge.address}"
        )

    @abstractmethod
    async def get_deposits_by_address(self, address: AddressLike,
                                      from_block: BlockIdentifier = 0,
                                      to_block: BlockIdentifier = "latest") -> List[TokenBridgeMessage]:
        """Get L1 to L2 messages sent by an address"""
        ...

    @abstractmethod
    async def get_withdrawals_by_address(self, address: AddressLike,
                                         from_block: BlockIdentifier = 0,
                                         to_block: BlockIdentifier = "latest") -> List[TokenBridgeMessage]:
        """Get L2 to L1 messages sent by an address"""
        ...

    async def get_token_bridge_messages_by_address(
        self,
        address: AddressLike,
        direction: Optional[MessageDirection] = None,
        from_block: BlockIdentifier = 0,
        to_block: BlockIdentifier = "latest",
    ) -> List[TokenBridgeMessage]:
        """Get deposits followed by withdrawals, optionally for one direction only"""
        messages: List[TokenBridgeMessage] = []

        if direction is None or direction == MessageDirection.L1_TO_L2:
            messages.extend(await self.get_deposits_by_address(address, from_block, to_block))

        if direction is None or direction == MessageDirection.L2_TO_L1:
            messages.extend(await self.get_withdrawals_by_address(address, from_block, to_block))

        return messages

    async def deposit(self, l1_token: AddressLike, l2_token: AddressLike, amount: NumberLike,
                      signer: Union[BaseAccount, str], **opts: Any) -> str:
        """Deposit tokens into L2 and return the L1 transaction hash"""
        tx = await self.populate_deposit(l1_token, l2_token, amount, **opts)
        return await self.messenger.send_transaction(MessageDirection.L1_TO_L2, tx, signer)

    async def withdraw(self, l1_token: AddressLike, l2_token: AddressLike, amount: NumberLike,
                       signer: Union[BaseAccount, str], **opts: Any) -> str:
        """Withdraw tokens back to L1 and return the L2 transaction hash"""
        tx = await self.populate_withdraw(l1_token, l2_token, amount, **opts)
        return await self.messenger.send_transaction(MessageDirection.L2_TO_L1, tx, signer)

    async def estimate_deposit_gas(self, l1_token: AddressLike, l2_token: AddressLike,
                                   amount: NumberLike, **opts: Any) -> int:
        tx = await self.populate_deposit(l1_token, l2_token, amount, **opts)
        return await self.messenger.estimate_gas(MessageDirection.L1_TO_L2, tx)

    async def estimate_withdraw_gas(self, l1_token: AddressLike, l2_token: AddressLike,
                                    amount: NumberLike, **opts: Any) -> int:
        tx = await self.populate_withdraw(l1_token, l2_token, amount, **opts)
        return await self.messenger.estimate_gas(MessageDirection.L2_TO_L1, tx)

    def _populate(self, contract: AsyncContract, fn_name: str, args: List[Any],
                  overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Encode a bridge call into transaction parameters"""
        overrides = dict(overrides or {})
        for field in RESERVED_TX_FIELDS:
            if field in overrides:
                raise ValueError(f"Cannot override transaction field '{field}'")

        tx = {
            **overrides,
            "to": contract.address,
            "data": contract.encode_abi(fn_name, args=args),
        }
        logger.debug(f"Populated {fn_name} call to {contract.address}")
        return tx
