"""Capability interfaces an item may satisfy.

These are structural: anything with the right attributes and methods
qualifies, so a single concrete item type can be shippable and perishable
at the same time without inheriting from either.
"""

from __future__ import annotations

from typing import Protocol


class Shippable(Protocol):
    """Something that may need to be physically delivered."""

    name: str
    weight: float

    def is_shippable(self) -> bool:
        """True when the item has positive physical weight."""


class Perishable(Protocol):
    """Something that can expire and then must not be sold."""

    def is_expirable(self) -> bool: ...

    def has_expired(self) -> bool: ...
