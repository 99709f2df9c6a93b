"""Data models for pasted listing rows."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lush_lister.utils.ids import new_id


LINK_SLOTS = 8


class ListingRecord(BaseModel):
    """One sellable item parsed from a pasted line of text.

    ``links`` always holds exactly ``LINK_SLOTS`` entries; unused slots are
    empty strings.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    title: str = Field(min_length=1)
    sku: str = ""
    cost: str = "1"
    links: List[str] = Field(default_factory=lambda: [""] * LINK_SLOTS)

    @field_validator("links")
    @classmethod
    def _exact_slots(cls, v: List[str]) -> List[str]:
        if len(v) != LINK_SLOTS:
            raise ValueError(f"expected {LINK_SLOTS} link slots, got {len(v)}")
        return v

    @property
    def link_count(self) -> int:
        return sum(1 for l in self.links if l)
