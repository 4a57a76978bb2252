import logging
from collections import Counter
from typing import Callable, Dict, List, Sequence, TypeVar

from maigacha.errors import EmptyCollection, NoSelectableItems
from maigacha.models.pull_models import Category, Item
from maigacha.rng import UniformSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def partition_by_category(items: Sequence[Item]) -> Dict[Category, List[Item]]:
    """Group items by category, keeping list order inside each group."""
    groups: Dict[Category, List[Item]] = {category: [] for category in Category}
    for item in items:
        groups[item.category].append(item)
    return groups


def category_totals(items: Sequence[Item]) -> Dict[Category, float]:
    return {
        category: sum(item.weight for item in group)
        for category, group in partition_by_category(items).items()
    }


def _walk(entries: Sequence[T], weight_of: Callable[[T], float], total: float, rng: UniformSource) -> T:
    # Draw in [0, total) and return the first entry whose running sum passes it.
    # Entries with weight 0 never move the running sum, so they are never hit.
    draw = rng.random() * total
    running = 0.0
    for entry in entries:
        running += weight_of(entry)
        if running > draw:
            return entry

    # Float rounding can leave draw == running on the last step
    return [e for e in entries if weight_of(e) > 0][-1]


def select_pull(items: Sequence[Item], rng: UniformSource) -> Item:
    """Pull one item.

    A category is picked first, weighted by the summed weights of its
    items; then an item is picked inside that category by its own weight.
    The net chance of any item is its weight over the grand total.
    """
    if not items:
        raise EmptyCollection()

    totals = category_totals(items)
    grand_total = sum(totals.values())
    if grand_total <= 0:
        raise NoSelectableItems()

    category = _walk(list(totals), lambda c: totals[c], grand_total, rng)
    pool = partition_by_category(items)[category]
    pulled = _walk(pool, lambda item: item.weight, totals[category], rng)

    logger.debug("Pulled %s %r (weight %s)", category.label, pulled.name, pulled.weight)
    return pulled


def expected_probabilities(items: Sequence[Item]) -> Dict[str, float]:
    total = sum(item.weight for item in items)
    if total <= 0:
        return {item.name: 0.0 for item in items}
    return {item.name: item.weight / total for item in items}


def simulate_pulls(items: Sequence[Item], rng: UniformSource, simulations: int) -> Counter:
    """Pull `simulations` times and count how often each name came up."""
    results = Counter()

    for _ in range(simulations):
        results[select_pull(items, rng).name] += 1

    return results
