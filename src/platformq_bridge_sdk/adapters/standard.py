"""
Adapter for token bridges that implement the standard ERC20 bridge interface.
ETH is deliberately out of scope for this bridge.
"""

import logging
from typing import Optional, Dict, Any, List, Iterable

from eth_utils import to_hex
from web3.contract import AsyncContract
from web3.exceptions import BadFunctionCallOutput, ContractLogicError
from web3.types import BlockIdentifier, EventData

from ..contracts import OVM_ETH, ZERO_ADDRESS, get_contract
from ..interfaces import ICrossChainMessenger
from ..models import TokenBridgeMessage
from ..types import AddressLike, NumberLike, MessageDirection, TokenPairNotSupportedError
from ..utils import hex_string_equals, to_address, to_big_number, to_number, to_transaction_hash
from .base import BaseBridgeAdapter

logger = logging.getLogger(__name__)

DEFAULT_L2_GAS_LIMIT = 200_000

# L1 gas is not charged when withdrawing through the standard bridge
WITHDRAW_L1_GAS = 0

EMPTY_DATA = b""


class StandardBridgeAdapter(BaseBridgeAdapter):
    """Bridge adapter for any token bridge using the standard bridge interface"""

    L2_TOKEN_ABI = "L2StandardERC20"

    def __init__(self, messenger: ICrossChainMessenger, l1_bridge: AddressLike,
                 l2_bridge: AddressLike, default_l2_gas_limit: int = DEFAULT_L2_GAS_LIMIT):
        super().__init__(messenger, l1_bridge, l2_bridge)
        self.default_l2_gas_limit = default_l2_gas_limit

    async def get_deposits_by_address(self, address: AddressLike,
                                      from_block: BlockIdentifier = 0,
                                      to_block: BlockIdentifier = "latest") -> List[TokenBridgeMessage]:
        events = await self.l1_bridge.events.ERC20DepositInitiated().get_logs(
            argument_filters={"_from": to_address(address)},
            from_block=from_block,
            to_block=to_block,
        )
        return self._to_messages(events, MessageDirection.L1_TO_L2)

    async def get_withdrawals_by_address(self, address: AddressLike,
                                         from_block: BlockIdentifier = 0,
                                         to_block: BlockIdentifier = "latest") -> List[TokenBridgeMessage]:
        events = await self.l2_bridge.events.WithdrawalInitiated().get_logs(
            argument_filters={"_from": to_address(address)},
            from_block=from_block,
            to_block=to_block,
        )
        return self._to_messages(events, MessageDirection.L2_TO_L1)

    async def supports_token_pair(self, l1_token: AddressLike, l2_token: AddressLike) -> bool:
        """
        Check that the L2 token is a standard ERC20 paired with the L1 token
        and minted by this adapter's L2 bridge.

        Returns:
            False for ETH or for tokens that do not expose the standard
            interface. Any other failure is raised.
        """
        l1_address = to_address(l1_token)
        l2_address = to_address(l2_token)

        # ETH deposits and withdrawals go through the ETH bridge
        if hex_string_equals(l1_address, ZERO_ADDRESS) or hex_string_equals(l2_address, OVM_ETH):
            return False

        contract = self._get_l2_token_contract(l2_address)
        try:
            remote_l1_token = await contract.functions.l1Token().call()
            if not hex_string_equals(remote_l1_token, l1_address):
                return False

            remote_l2_bridge = await contract.functions.l2Bridge().call()
            if not hex_string_equals(remote_l2_bridge, self.l2_bridge.address):
                return False
        except (ContractLogicError, BadFunctionCallOutput) as e:
            logger.warning(f"Token {l2_address} does not implement the standard L2 token interface: {e}")
            return False

        return True

    async def populate_deposit(self, l1_token: AddressLike, l2_token: AddressLike,
                               amount: NumberLike, recipient: Optional[AddressLike] = None,
                               l2_gas_limit: Optional[NumberLike] = None,
                               overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if not await self.supports_token_pair(l1_token, l2_token):
            raise TokenPairNotSupportedError("token pair not supported by bridge")

        # A missing or zero L2 gas limit falls back to the default
        l2_gas = to_number(l2_gas_limit) if l2_gas_limit is not None else 0
        l2_gas = l2_gas or self.default_l2_gas_limit

        if recipient is None:
            return self._populate(self.l1_bridge, "depositERC20", [
                to_address(l1_token),
                to_address(l2_token),
                to_big_number(amount),
                l2_gas,
                EMPTY_DATA,
            ], overrides)

        return self._populate(self.l1_bridge, "depositERC20To", [
            to_address(l1_token),
            to_address(l2_token),
            to_address(recipient),
            to_big_number(amount),
            l2_gas,
            EMPTY_DATA,
        ], overrides)

    async def populate_withdraw(self, l1_token: AddressLike, l2_token: AddressLike,
                                amount: NumberLike, recipient: Optional[AddressLike] = None,
                                overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if not await self.supports_token_pair(l1_token, l2_token):
            raise TokenPairNotSupportedError("token pair not supported by bridge")

        if recipient is None:
            return self._populate(self.l2_bridge, "withdraw", [
                to_address(l2_token),
                to_big_number(amount),
                WITHDRAW_L1_GAS,
                EMPTY_DATA,
            ], overrides)

        return self._populate(self.l2_bridge, "withdrawTo", [
            to_address(l2_token),
            to_address(recipient),
            to_big_number(amount),
            WITHDRAW_L1_GAS,
            EMPTY_DATA,
        ], overrides)

    def _get_l2_token_contract(self, l2_token: AddressLike) -> AsyncContract:
        return get_contract(self.messenger.l2_provider, self.L2_TOKEN_ABI, l2_token)

    @staticmethod
    def _to_messages(events: Iterable[EventData], direction: MessageDirection) -> List[TokenBridgeMessage]:
        messages = []
        for event in events:
            args = event["args"]
            if hex_string_equals(args["_l1Token"], ZERO_ADDRESS) or hex_string_equals(args["_l2Token"], OVM_ETH):
                continue

            messages.append(TokenBridgeMessage(
                direction=direction,
                from_address=args["_from"],
                to_address=args["_to"],
                l1_token=args["_l1Token"],
                l2_token=args["_l2Token"],
                amount=args["_amount"],
                data=to_hex(args["_data"]),
                log_index=event["logIndex"],
                block_number=event["blockNumber"],
                transaction_hash=to_transaction_hash(event["transactionHash"]),
            ))
        return messages
