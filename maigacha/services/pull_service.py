import logging
from datetime import datetime
from typing import Callable, Optional

from maigacha.models.pull_models import Item, PullHistory, PullList
from maigacha.pull_engine import (
    category_totals,
    expected_probabilities,
    partition_by_category,
    select_pull,
    simulate_pulls,
)
from maigacha.pull_store import PullStore, add_item, remove_item
from maigacha.rng import UniformSource
from maigacha.schemas import AddRequest, SimulationRequest

logger = logging.getLogger(__name__)


def add(store: PullStore, request: AddRequest) -> Item:
    pull_list = store.load()
    items = add_item(pull_list.items, request.name, request.category, request.weight)
    store.save(pull_list.model_copy(update={"items": items}))
    logger.info("Added %r as %s with weight %s", request.name, request.category.label, request.weight)
    return items[-1]


def remove(store: PullStore, name: str) -> None:
    pull_list = store.load()
    items = remove_item(pull_list.items, name)
    store.save(pull_list.model_copy(update={"items": items}))
    logger.info("Removed %r", name)


def list_items(store: PullStore) -> dict:
    """Items grouped by category, for display."""
    return partition_by_category(store.load().items)


def pull(
    store: PullStore,
    rng: UniformSource,
    history_size: Optional[int] = None,
    now: Callable[[], datetime] = datetime.now,
) -> Item:
    """Pull one item and record it in the history.

    The item list itself is never changed by a pull.
    """
    pull_list = resize_history(store.load(), history_size)
    pulled = select_pull(pull_list.items, rng)
    history = pull_list.history.record(pulled, now())
    store.save(pull_list.model_copy(update={"history": history}))
    return pulled


def history(store: PullStore) -> PullHistory:
    return store.load().history


def resize_history(pull_list: PullList, size: Optional[int]) -> PullList:
    """Apply a configured history size, trimming old records if it shrank."""
    if size is None or size == pull_list.history.size:
        return pull_list
    entries = pull_list.history.entries[-size:]
    return pull_list.model_copy(update={"history": PullHistory(size=size, entries=entries)})


def simulate(store: PullStore, request: SimulationRequest, rng: UniformSource) -> dict:
    """Run pulls without touching the store, and compare against expected odds."""
    items = store.load().items
    counts = simulate_pulls(items, rng, request.simulations)
    logger.info("Simulated %d pulls over %d items", request.simulations, len(items))

    expected = expected_probabilities(items)
    totals = category_totals(items)
    grand_total = sum(totals.values())

    category_counts = {category: 0 for category in totals}
    for item in items:
        category_counts[item.category] += counts.get(item.name, 0)

    return {
        "simulations": request.simulations,
        "categories": [
            {
                "category": category,
                "observed": round(category_counts[category] / request.simulations * 100, 2),
                "expected": round(totals[category] / grand_total * 100, 2),
            }
            for category in totals
        ],
        "items": [
            {
                "item": item,
                "count": counts.get(item.name, 0),
                "observed": round(counts.get(item.name, 0) / request.simulations * 100, 2),
                "expected": round(expected[item.name] * 100, 2),
            }
            for item in sorted(items, key=lambda i: counts.get(i.name, 0), reverse=True)
        ],
    }
