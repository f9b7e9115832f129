"""
Shared fixtures for bridge SDK tests
"""

import pytest
from unittest.mock import Mock, AsyncMock
from eth_account import Account

from platformq_bridge_sdk import CrossChainMessenger, StandardBridgeAdapter, L2_STANDARD_BRIDGE

L1_RPC_URL = "http://localhost:8545"
L2_RPC_URL = "http://localhost:9545"

L1_BRIDGE = "0x99c9fc46f92e8a1c0dec1b1747d010903e884be1"
L1_TOKEN = "0x6b175474e89094c44da98b954eedeac495271d0f"
L2_TOKEN = "0xda10009cbd5d07dd0cecc66161fc93d7c9000da1"
RECIPIENT = "0x00000000000000000000000000000000000000aa"

TX_HASH = "0x" + "ab" * 32


class AwaitableValue:
    """Stands in for web3 properties that must be awaited, e.g. eth.chain_id"""

    def __init__(self, value):
        self.value = value

    def __await__(self):
        return self._resolve().__await__()

    async def _resolve(self):
        return self.value


@pytest.fixture
def signer():
    return Account.from_key("0x" + "11" * 32)


@pytest.fixture
def messenger():
    return CrossChainMessenger(L1_RPC_URL, L2_RPC_URL)


@pytest.fixture
def adapter(messenger):
    return StandardBridgeAdapter(messenger, L1_BRIDGE, L2_STANDARD_BRIDGE)


@pytest.fixture
def mock_eth():
    """Mock of the web3 eth module used for sending transactions"""
    eth = Mock()
    eth.chain_id = AwaitableValue(10)
    eth.gas_price = AwaitableValue(1_000_000_000)
    eth.get_transaction_count = AsyncMock(return_value=7)
    eth.estimate_gas = AsyncMock(return_value=150_000)
    eth.send_raw_transaction = AsyncMock(return_value=bytes.fromhex("ab" * 32))
    eth.send_transaction = AsyncMock(return_value=bytes.fromhex("cd" * 32))
    return eth
