"""
DEX Order Client — composition root.
Loads configuration, configures logging and wires the order manager around
a chain transport supplied by the caller. The caller builds that transport
from `config.rpc` (signing key, endpoints); only the permission name is
read here.
"""

from __future__ import annotations
import logging
import sys
from typing import Optional, TYPE_CHECKING

from dotenv import load_dotenv

from config import BotConfig
from exchange.dex_api import DexApiClient
from exchange.models import Authorization
from trading.order_manager import DexOrderManager
from trading.submitter import TransactionSubmitter

if TYPE_CHECKING:
    from exchange.transport import ChainTransport

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def load_env(path: Optional[str] = None) -> BotConfig:
    """Read .env (if any) into the environment, then build the config."""
    load_dotenv(path)
    return BotConfig.from_env()


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
    )


def build_order_manager(
    config: BotConfig,
    transport: "ChainTransport",
    dex_api: Optional[DexApiClient] = None,
) -> DexOrderManager:
    """Wire components. Markets still need `await dex_api.load_markets()`."""
    missing = config.validate()
    if missing:
        logger.critical(f"[BOOT] Missing required settings: {', '.join(missing)}")
        raise ValueError(f"Missing required settings: {', '.join(missing)}")

    if dex_api is None:
        dex_api = DexApiClient(config.dex_api.base_url, timeout_sec=config.dex_api.timeout_sec)

    submitter = TransactionSubmitter(
        transport,
        Authorization(actor=config.username, permission=config.rpc.private_key_permission),
        blocks_behind=config.execution.blocks_behind,
        expire_seconds=config.execution.expire_seconds,
    )
    logger.info(
        f"[BOOT] Order manager ready for {config.username}@"
        f"{config.rpc.private_key_permission} on {config.execution.exchange_account}"
    )
    return DexOrderManager(config.username, dex_api, submitter, config.execution)


async def start_order_manager(
    config: BotConfig,
    transport: "ChainTransport",
    dex_api: Optional[DexApiClient] = None,
) -> DexOrderManager:
    """Build the order manager and load market metadata."""
    manager = build_order_manager(config, transport, dex_api)
    await manager.dex_api.load_markets()
    return manager
