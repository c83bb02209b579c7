"""
DEX REST API Client.
Market metadata lookup and paginated open-order listing.
"""

from __future__ import annotations
import asyncio
from typing import Any, Dict, List, Optional
import aiohttp
import logging

from exchange.errors import DexApiError
from exchange.models import Market, OpenOrder

logger = logging.getLogger(__name__)


class DexApiClient:
    """Async wrapper around the public DEX API."""

    def __init__(self, base_url: str, timeout_sec: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout_sec = timeout_sec
        self._session: Optional[aiohttp.ClientSession] = None
        self._markets: Dict[str, Market] = {}

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_sec)
            )
        return self._session

    async def close(self):
        if self._session and not self._session.closed:
            await self._session.close()

    async def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> List[Dict]:
        """GET an endpoint and return its `data` list."""
        session = await self._get_session()
        url = f"{self.base_url}{endpoint}"

        try:
            async with session.get(url, params=params) as resp:
                if resp.status >= 300:
                    body = await resp.text()
                    logger.error(f"[DEXAPI] GET {endpoint} Error: status={resp.status}, body={body[:200]}")
                    raise DexApiError(
                        f"GET {endpoint} failed ({resp.status}): {body[:200]}",
                        status=resp.status,
                    )
                payload = await resp.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"[DEXAPI] GET {endpoint} Exception: {e!r}")
            raise DexApiError(f"GET {endpoint} failed: {e!r}") from e
        except ValueError as e:
            # Body was not valid JSON
            logger.error(f"[DEXAPI] GET {endpoint} Bad JSON: {e}")
            raise DexApiError(f"GET {endpoint} returned malformed JSON: {e}") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            logger.error(f"[DEXAPI] GET {endpoint} Unexpected payload: {str(payload)[:200]}")
            raise DexApiError(f"GET {endpoint} returned unexpected payload: {str(payload)[:200]}")
        return data

    @staticmethod
    def _parse_rows(endpoint: str, rows: List[Dict], parse) -> list:
        try:
            return [parse(row) for row in rows]
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.error(f"[DEXAPI] GET {endpoint} Malformed row: {e!r}")
            raise DexApiError(f"GET {endpoint} returned a malformed row: {e!r}") from e

    # ==================== Markets ====================

    async def load_markets(self) -> List[Market]:
        """Fetch all markets and refresh the symbol cache."""
        endpoint = "/dex/v1/markets/all"
        markets = self._parse_rows(endpoint, await self._get(endpoint), Market.from_api)
        self._markets = {m.symbol: m for m in markets}
        logger.info(f"[DEXAPI] Loaded {len(markets)} markets")
        return markets

    def get_market_by_symbol(self, symbol: str) -> Optional[Market]:
        return self._markets.get(symbol)

    # ==================== Orders ====================

    async def fetch_open_orders(self, account: str, limit: int = 100, offset: int = 0) -> List[OpenOrder]:
        """One page of open orders for an account, in API order."""
        endpoint = "/dex/v1/orders/open"
        rows = await self._get(endpoint, {"account": account, "limit": str(limit), "offset": str(offset)})
        return self._parse_rows(endpoint, rows, OpenOrder.from_api)
