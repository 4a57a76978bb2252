# text rendering for command output. every function returns a string,
# printing is left to the command handlers.
from typing import Dict, List

from maigacha.models.pull_models import Category, Item, PullHistory

GREEN = '\033[32m'
YELLOW = '\033[33m'
RESET = '\033[0m'

CATEGORY_COLORS = {
    Category.common: GREEN,
    Category.rare: YELLOW,
}


def format_weight(weight: float) -> str:
    """2.0 -> '2', 0.5 -> '0.5'. Anything else keeps its exact repr."""
    if float(weight).is_integer():
        return str(int(weight))
    return repr(float(weight))


def colorize(category: Category, color: bool) -> str:
    if not color:
        return category.label
    return f"{CATEGORY_COLORS[category]}{category.label}{RESET}"


def format_list(groups: Dict[Category, List[Item]]) -> str:
    if not any(groups.values()):
        return "No items to list"

    lines = []
    for category, items in groups.items():
        if not items:
            continue
        lines.append(f"-{category.label} Pulls-")
        width = max(len(item.name) for item in items) + 2
        for item in items:
            quoted = f'"{item.name}"'
            lines.append(f"{quoted:<{width}} : {format_weight(item.weight)}")
    return "\n".join(lines)


def format_pull(item: Item, color: bool = False) -> str:
    return (
        f"Pulled a {colorize(item.category, color)}\n"
        f'"{item.name}" : {format_weight(item.weight)}'
    )


def format_history(history: PullHistory) -> str:
    if not history.entries:
        return "History is empty."
    return "\n".join(
        f'{e.pulled_at.strftime("%Y-%m-%d %H:%M:%S")} {e.category.label} "{e.name}"'
        for e in history.entries
    )


def format_simulation(report: dict, color: bool = False) -> str:
    lines = [f"Simulated {report['simulations']:,} pulls", ""]

    for row in report["categories"]:
        lines.append(
            f"{colorize(row['category'], color)}: "
            f"{row['observed']:.2f}% (expected {row['expected']:.2f}%)"
        )

    if report["items"]:
        lines.append("")
        width = max(len(row["item"].name) for row in report["items"]) + 2
        for row in report["items"]:
            quoted = f'"{row["item"].name}"'
            lines.append(
                f"{quoted:<{width}} : {row['count']:>7,}  "
                f"{row['observed']:6.2f}% (expected {row['expected']:.2f}%)"
            )

    return "\n".join(lines)


def format_added(item: Item) -> str:
    return f'Added "{item.name}" as {item.category.label} : {format_weight(item.weight)}'
