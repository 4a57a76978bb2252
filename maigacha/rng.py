import random
from typing import Optional, Protocol


class UniformSource(Protocol):
    """Anything that yields uniform floats in [0, 1). `random.Random` qualifies."""

    def random(self) -> float: ...


def get_rng(seed: Optional[int] = None) -> random.Random:
    """Same seed always produces the same pull order."""
    return random.Random(seed)
