import math
from datetime import datetime
from typing import Any, Dict, List

from maigacha.pull_rules import (
    CATEGORY_KEYS,
    FATAL_MISSING_ITEM_FIELDS,
    FATAL_MISSING_RECORD_FIELDS,
)


def validate_pull_list(document: Any) -> Dict[str, Any]:
    errors: List[Dict[str, str]] = []
    warnings: List[Dict[str, str]] = []

    summary = {
        "total_items": 0,
        "category_counts": {c: 0 for c in CATEGORY_KEYS},
        "history_entries": 0,
    }

    # ---- top-level must be dict ----
    if not isinstance(document, dict):
        errors.append({
            "path": "$",
            "message": "Top-level store document must be an object/dict."
        })
        return {
            "valid": False,
            "errors": errors,
            "warnings": warnings,
            "summary": summary,
        }

    items = document.get("items", [])
    if not isinstance(items, list):
        errors.append({
            "path": "$.items",
            "message": "items must be a list of item objects."
        })
        items = []

    seen_names = set()
    total_weight = 0.0

    # Walk items
    for i, item in enumerate(items):
        path = f"$.items[{i}]"

        if not isinstance(item, dict):
            errors.append({
                "path": path,
                "message": "Item must be an object/dict."
            })
            continue

        missing = [f for f in FATAL_MISSING_ITEM_FIELDS if f not in item]
        if missing:
            errors.append({
                "path": path,
                "message": f"Missing required fields: {', '.join(missing)}"
            })
            continue

        # name
        name = item["name"]
        if not isinstance(name, str) or not name:
            errors.append({
                "path": f"{path}.name",
                "message": "Item name must be a non-empty string."
            })
            continue

        if name in seen_names:
            errors.append({
                "path": f"{path}.name",
                "message": f"Duplicate item name '{name}'."
            })
            continue
        seen_names.add(name)

        # category
        category = item["category"]
        if category not in CATEGORY_KEYS:
            errors.append({
                "path": f"{path}.category",
                "message": f"Unknown category {category!r}. Allowed: {CATEGORY_KEYS}"
            })
            continue

        # weight
        weight = item["weight"]
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            errors.append({
                "path": f"{path}.weight",
                "message": "weight must be a number >= 0."
            })
            continue
        # JSON integers can be too large for a float
        try:
            weight = float(weight)
        except OverflowError:
            weight = math.inf
        if not math.isfinite(weight) or weight < 0:
            errors.append({
                "path": f"{path}.weight",
                "message": "weight must be a finite number >= 0."
            })
            continue

        # Zero weight is loadable but can never be pulled
        if weight == 0:
            warnings.append({
                "path": f"{path}.weight",
                "message": f"'{name}' has weight 0 and will never be pulled."
            })

        total_weight += weight
        summary["total_items"] += 1
        summary["category_counts"][category] += 1

    if not math.isfinite(total_weight):
        errors.append({
            "path": "$.items",
            "message": "Sum of all weights is too large to pull from."
        })

    _validate_history(document.get("history"), errors, summary)

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "summary": summary,
    }


def _validate_history(history: Any, errors: List[Dict[str, str]], summary: Dict[str, Any]) -> None:
    # Older store files carry no history at all
    if history is None:
        return

    if not isinstance(history, dict):
        errors.append({
            "path": "$.history",
            "message": "history must be an object/dict."
        })
        return

    size = history.get("size")
    if size is not None and (isinstance(size, bool) or not isinstance(size, int) or size < 1):
        errors.append({
            "path": "$.history.size",
            "message": "history.size must be an integer >= 1."
        })

    entries = history.get("entries", [])
    if not isinstance(entries, list):
        errors.append({
            "path": "$.history.entries",
            "message": "history.entries must be a list of pull records."
        })
        return

    for i, entry in enumerate(entries):
        path = f"$.history.entries[{i}]"

        if not isinstance(entry, dict):
            errors.append({
                "path": path,
                "message": "Pull record must be an object/dict."
            })
            continue

        missing = [f for f in FATAL_MISSING_RECORD_FIELDS if f not in entry]
        if missing:
            errors.append({
                "path": path,
                "message": f"Missing required fields: {', '.join(missing)}"
            })
            continue

        if entry["category"] not in CATEGORY_KEYS:
            errors.append({
                "path": f"{path}.category",
                "message": f"Unknown category {entry['category']!r}. Allowed: {CATEGORY_KEYS}"
            })
            continue

        try:
            datetime.fromisoformat(entry["pulled_at"])
        except (TypeError, ValueError):
            errors.append({
                "path": f"{path}.pulled_at",
                "message": "pulled_at must be an ISO-8601 timestamp string."
            })
            continue

        summary["history_entries"] += 1
