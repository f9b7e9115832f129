"""
Tests for bridge settings and bundled contracts
"""

import pytest
from pydantic import ValidationError

from platformq_bridge_sdk import BridgeSettings, L2_STANDARD_BRIDGE, get_contract_abi, to_address

from conftest import L1_BRIDGE


class TestBridgeSettings:
    """Test environment-driven configuration"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BRIDGE_L1_STANDARD_BRIDGE_ADDRESS", raising=False)
        settings = BridgeSettings(_env_file=None)
        assert settings.L1_STANDARD_BRIDGE_ADDRESS is None
        assert settings.L2_STANDARD_BRIDGE_ADDRESS == L2_STANDARD_BRIDGE
        assert settings.DEFAULT_L2_GAS_LIMIT == 200_000

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("BRIDGE_L1_RPC_URL", "https://eth.example.org")
        monkeypatch.setenv("BRIDGE_L1_STANDARD_BRIDGE_ADDRESS", L1_BRIDGE)
        monkeypatch.setenv("BRIDGE_DEFAULT_L2_GAS_LIMIT", "300000")
        monkeypatch.setenv("BRIDGE_LOG_LEVEL", "DEBUG")

        settings = BridgeSettings(_env_file=None)

        assert settings.L1_RPC_URL == "https://eth.example.org"
        assert settings.L1_STANDARD_BRIDGE_ADDRESS == to_address(L1_BRIDGE)
        assert settings.DEFAULT_L2_GAS_LIMIT == 300_000
        assert settings.LOG_LEVEL == "DEBUG"

    def test_log_level_defaults_to_info(self):
        assert BridgeSettings(_env_file=None).LOG_LEVEL == "INFO"

    def test_log_level_is_normalized(self):
        assert BridgeSettings(_env_file=None, LOG_LEVEL="warning").LOG_LEVEL == "WARNING"

    def test_unknown_log_level_fails_validation(self):
        with pytest.raises(ValidationError):
            BridgeSettings(_env_file=None, LOG_LEVEL="LOUD")

    def test_invalid_address_fails_validation(self):
        with pytest.raises(ValidationError):
            BridgeSettings(_env_file=None, L1_STANDARD_BRIDGE_ADDRESS="0x1234")

    def test_gas_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            BridgeSettings(_env_file=None, DEFAULT_L2_GAS_LIMIT=0)


class TestContractAbis:
    """Test bundled ABI loading"""

    @pytest.mark.parametrize("name,member", [
        ("L1StandardBridge", "ERC20DepositInitiated"),
        ("L1StandardBridge", "depositERC20To"),
        ("IL2ERC20Bridge", "WithdrawalInitiated"),
        ("IL2ERC20Bridge", "withdrawTo"),
        ("L2StandardERC20", "l1Token"),
        ("L2StandardERC20", "l2Bridge"),
    ])
    def test_abi_contains_member(self, name, member):
        assert member in {item["name"] for item in get_contract_abi(name)}

    def test_abi_copies_are_independent(self):
        abi = get_contract_abi("L2StandardERC20")
        abi.clear()
        assert get_contract_abi("L2StandardERC20")

    def test_unknown_contract(self):
        with pytest.raises(ValueError):
            get_contract_abi("OVM_ETH")
