"""
Runtime configuration read from the environment.

Variables:
    IP_REGISTRATION_RPC_URL: JSON-RPC endpoint (default: local node)
    IP_REGISTRATION_CONTRACT_ADDRESS: address of a deployed work contract
    IP_REGISTRATION_ARTIFACTS_DIR: directory overriding the shipped artifacts
"""

import os
from dataclasses import dataclass
from typing import Optional

from web3 import Web3

DEFAULT_RPC_URL = "http://127.0.0.1:8545"


@dataclass(frozen=True)
class Settings:
    rpc_url: str = DEFAULT_RPC_URL
    contract_address: Optional[str] = None
    artifacts_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            rpc_url=os.getenv("IP_REGISTRATION_RPC_URL", DEFAULT_RPC_URL),
            contract_address=os.getenv("IP_REGISTRATION_CONTRACT_ADDRESS") or None,
            artifacts_dir=os.getenv("IP_REGISTRATION_ARTIFACTS_DIR") or None,
        )

    def web3(self) -> Web3:
        """Build a Web3 instance connected to the configured RPC endpoint."""
        return Web3(Web3.HTTPProvider(self.rpc_url))


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings.from_env()
