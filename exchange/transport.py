"""
Chain transport interface.

The transport owns the signing key, ABI serialization and the RPC endpoint
list. It receives fully authorized actions (as contract-ready dicts) and
pushes them as ONE transaction; its atomicity is relied upon, not re-checked.
"""

from __future__ import annotations
from typing import Any, Dict, List, Protocol


class ChainTransport(Protocol):
    async def transact(
        self,
        actions: List[Dict[str, Any]],
        blocks_behind: int,
        expire_seconds: int,
    ) -> Dict[str, Any]:
        """
        Sign and push the actions as a single transaction.
        The transaction is valid for `expire_seconds` and references a block
        `blocks_behind` the head. Raises on any transport/validation error.
        """
        ...
