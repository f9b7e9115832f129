"""
Bridge SDK Configuration
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .contracts import L2_STANDARD_BRIDGE
from .utils import to_address

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class BridgeSettings(BaseSettings):
    """Bridge settings, read from BRIDGE_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="BRIDGE_", env_file=".env", extra="ignore")

    # JSON-RPC endpoints
    L1_RPC_URL: str = "http://localhost:8545"
    L2_RPC_URL: str = "http://localhost:9545"

    # Bridge contracts
    L1_STANDARD_BRIDGE_ADDRESS: Optional[str] = None
    L2_STANDARD_BRIDGE_ADDRESS: str = L2_STANDARD_BRIDGE

    # Deposit defaults
    DEFAULT_L2_GAS_LIMIT: int = Field(200_000, gt=0)

    # Level for the platformq_bridge_sdk logger
    LOG_LEVEL: str = "INFO"

    @field_validator("L1_STANDARD_BRIDGE_ADDRESS", "L2_STANDARD_BRIDGE_ADDRESS")
    @classmethod
    def checksum_address(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return to_address(value)

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value


@lru_cache()
def get_settings() -> BridgeSettings:
    return BridgeSettings()
