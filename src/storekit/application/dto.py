"""Data Transfer Objects — plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StoreStatusDTO:
    """Output: whether the store is open and today's holiday discount."""

    online: bool
    discount: float
    checked_at: str
