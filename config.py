"""
DEX Order Client — Configuration
All tunable parameters in one place.
"""

import os
from dataclasses import dataclass, field
from typing import List


@dataclass
class RpcConfig:
    """Settings for the caller-built chain transport (key, endpoints).
    The order manager itself only reads `private_key_permission`."""
    endpoints: List[str] = field(default_factory=lambda: [
        "https://proton.eoscafeblock.com",
        "https://proton.greymass.com",
    ])
    private_key: str = ""
    private_key_permission: str = "active"


@dataclass
class DexApiConfig:
    base_url: str = "https://dex.api.mainnet.metalx.com"
    timeout_sec: float = 10.0


@dataclass
class ExecutionConfig:
    exchange_account: str = "dex"       # Contract that holds funds and the book
    blocks_behind: int = 300            # TAPOS reference depth
    expire_seconds: int = 3000          # Transaction validity horizon
    submit_process_q_size: int = 60     # process action appended to each flush
    trigger_process_q_size: int = 100   # standalone process action
    cancel_page_size: int = 150         # open-order page size for cancel-all
    show_error_msg: bool = False


@dataclass
class BotConfig:
    rpc: RpcConfig = field(default_factory=RpcConfig)
    dex_api: DexApiConfig = field(default_factory=DexApiConfig)
    execution: ExecutionConfig = field(default_factory=ExecutionConfig)
    username: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BotConfig":
        """Load config with environment variable overrides."""
        config = cls()
        endpoints = os.getenv("DEX_RPC_ENDPOINTS", "")
        if endpoints:
            config.rpc.endpoints = [e.strip() for e in endpoints.split(",") if e.strip()]
        config.rpc.private_key = os.getenv("DEX_PRIVATE_KEY", "")
        config.rpc.private_key_permission = os.getenv("DEX_PRIVATE_KEY_PERMISSION", "active")
        config.username = os.getenv("DEX_USERNAME", "")
        config.dex_api.base_url = os.getenv("DEX_API_URL", config.dex_api.base_url)
        config.execution.exchange_account = os.getenv("DEX_EXCHANGE_ACCOUNT", "dex")
        config.execution.blocks_behind = int(os.getenv("DEX_BLOCKS_BEHIND", "300"))
        config.execution.expire_seconds = int(os.getenv("DEX_EXPIRE_SECONDS", "3000"))
        config.log_level = os.getenv("LOG_LEVEL", "INFO")
        return config

    def validate(self) -> List[str]:
        """Missing identity settings (the authorization actor/permission)."""
        missing = []
        if not self.username:
            missing.append("DEX_USERNAME")
        if not self.rpc.private_key_permission:
            missing.append("DEX_PRIVATE_KEY_PERMISSION")
        return missing
