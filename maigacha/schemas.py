import math
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from maigacha.errors import InvalidCategory, InvalidRequest, InvalidWeight
from maigacha.models.pull_models import Category
from maigacha.pull_rules import DEFAULT_SIMULATIONS, MAX_SIMULATIONS


# -----------------------------
# ADD REQUEST
# -----------------------------

class AddRequest(BaseModel):
    name: str = Field(
        min_length=1,
        description="Item name. Must not already be in the list."
    )
    category: Category = Field(
        description="common or rare (any casing)."
    )
    weight: float = Field(
        description="Relative pull weight. Must be a positive number."
    )

    @field_validator("category", mode="before")
    @classmethod
    def lower_category(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("weight", mode="before")
    @classmethod
    def positive_weight(cls, v):
        try:
            weight = float(v)
        except (TypeError, ValueError):
            raise ValueError("weight must be a number")
        if not math.isfinite(weight) or weight <= 0:
            raise ValueError("weight must be a positive number")
        return weight

    @classmethod
    def parse(cls, name: str, category: str, weight: str) -> "AddRequest":
        """Validate raw command-line strings, raising the matching typed error."""
        try:
            return cls(name=name, category=category, weight=weight)
        except ValidationError as e:
            failed = {err["loc"][0] for err in e.errors()}
            if "category" in failed:
                raise InvalidCategory(category) from e
            if "weight" in failed:
                raise InvalidWeight(weight) from e
            raise InvalidRequest("Item name cannot be empty.") from e


# -----------------------------
# PULL REQUEST
# -----------------------------

class PullRequest(BaseModel):
    seed: Optional[int] = Field(
        default=None,
        description="Optional RNG seed for deterministic results."
    )


# -----------------------------
# SIMULATION REQUEST
# -----------------------------

class SimulationRequest(BaseModel):
    simulations: int = Field(
        default=DEFAULT_SIMULATIONS,
        ge=1,
        le=MAX_SIMULATIONS,
        description=f"Number of simulated pulls. Max: {MAX_SIMULATIONS:,}"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Optional RNG seed lock"
    )

    @classmethod
    def parse(cls, simulations: int, seed: Optional[int] = None) -> "SimulationRequest":
        try:
            return cls(simulations=simulations, seed=seed)
        except ValidationError as e:
            raise InvalidRequest(
                f"Simulation count must be between 1 and {MAX_SIMULATIONS:,}."
            ) from e
