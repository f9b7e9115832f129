"""
Data models returned by bridge adapters.
"""

from typing import Dict, Any
from dataclasses import dataclass

from .types import MessageDirection


@dataclass(frozen=True)
class TokenBridgeMessage:
    """Deposit or withdrawal as emitted by a bridge contract"""
    direction: MessageDirection
    from_address: str
    to_address: str
    l1_token: str
    l2_token: str
    amount: int
    data: str
    log_index: int
    block_number: int
    transaction_hash: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "direction": self.direction.value,
            "from": self.from_address,
            "to": self.to_address,
            "l1Token": self.l1_token,
            "l2Token": self.l2_token,
            "amount": str(self.amount),
            "data": self.data,
            "logIndex": self.log_index,
            "blockNumber": self.block_number,
            "transactionHash": self.transaction_hash,
        }
