"""
Pydantic schemas for cards.

A card has a ``category`` (free text, used as the lookup key) and an
``is_valid`` flag, exposed to GraphQL clients as ``isValid``.  Cards
are immutable once created; two cards with the same field values are
equal.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Card(BaseModel):
    """A single card record."""

    category: str = Field(..., description="Card category, e.g. ``Bank Card``")
    is_valid: bool = Field(..., description="Whether the card is currently valid")

    model_config = {
        "frozen": True,
    }


class CardLookupArgs(BaseModel):
    """Arguments of the ``card`` query field.

    Only ``category`` takes part in the lookup.  When it is omitted the
    lookup matches nothing.
    """

    category: Optional[str] = None
