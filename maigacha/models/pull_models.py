import math
from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from maigacha.pull_rules import DEFAULT_HISTORY_SIZE


class Category(str, Enum):
    common = "common"
    rare = "rare"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique, case-sensitive item name")
    category: Category = Field(..., description="Rarity category of the item")
    weight: float = Field(..., ge=0, description="Relative pull weight (not normalized)")

    @field_validator("weight")
    @classmethod
    def finite(cls, v):
        if not math.isfinite(v):
            raise ValueError("weight must be a finite number")
        return v


class PullRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    pulled_at: datetime
    category: Category
    name: str


class PullHistory(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: int = Field(DEFAULT_HISTORY_SIZE, ge=1, description="Maximum records kept")
    entries: List[PullRecord] = Field(default_factory=list, description="Oldest first")

    def record(self, item: Item, pulled_at: datetime) -> "PullHistory":
        """Return a new history with `item` appended, oldest records dropped past `size`."""
        entry = PullRecord(pulled_at=pulled_at, category=item.category, name=item.name)
        entries = [*self.entries, entry][-self.size:]
        return self.model_copy(update={"entries": entries})


class PullList(BaseModel):
    """Everything persisted in the store file."""

    model_config = ConfigDict(frozen=True)

    items: List[Item] = Field(default_factory=list)
    history: PullHistory = Field(default_factory=PullHistory)
