"""
Interfaces (protocols) for cross-chain messengers and bridge adapters.
Using Python's Protocol for structural subtyping.
"""

from typing import Protocol, Dict, Any, Optional, List, Union
from abc import abstractmethod

from eth_account.signers.base import BaseAccount
from web3 import AsyncWeb3
from web3.types import BlockIdentifier

from .types import AddressLike, NumberLike, MessageDirection
from .models import TokenBridgeMessage


class ICrossChainMessenger(Protocol):
    """Interface for the object that owns both chain connections"""

    l1_provider: AsyncWeb3
    l2_provider: AsyncWeb3

    @abstractmethod
    async def send_transaction(self, direction: MessageDirection, tx: Dict[str, Any],
                               signer: Union[BaseAccount, str]) -> str:
        """Send a populated transaction on the chain the direction starts from"""
        ...

    @abstractmethod
    async def estimate_gas(self, direction: MessageDirection, tx: Dict[str, Any]) -> int:
        """Estimate gas on the chain the direction starts from"""
        ...


class IBridgeAdapter(Protocol):
    """Interface for token bridge adapters"""

    messenger: ICrossChainMessenger

    @abstractmethod
    async def get_token_bridge_messages_by_address(
        self,
        address: AddressLike,
        direction: Optional[MessageDirection] = None,
        from_block: BlockIdentifier = 0,
        to_block: BlockIdentifier = "latest",
    ) -> List[TokenBridgeMessage]:
        """Get deposits and/or withdrawals sent by an address"""
        ...

    @abstractmethod
    async def supports_token_pair(self, l1_token: AddressLike, l2_token: AddressLike) -> bool:
        """Check whether this bridge can move the given token pair"""
        ...

    @abstractmethod
    async def populate_deposit(self, l1_token: AddressLike, l2_token: AddressLike,
                               amount: NumberLike, **opts: Any) -> Dict[str, Any]:
        """Build an L1 transaction that deposits tokens into L2"""
        ...

    @abstractmethod
    async def populate_withdraw(self, l1_token: AddressLike, l2_token: AddressLike,
                                amount: NumberLike, **opts: Any) -> Dict[str, Any]:
        """Build an L2 transaction that withdraws tokens back to L1"""
        ...
