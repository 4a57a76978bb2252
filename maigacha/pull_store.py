import json
import logging
import math
import os
import tempfile
from pathlib import Path
from typing import List

from pydantic import ValidationError

from maigacha.errors import DuplicateName, InvalidWeight, NotFound, StoreCorrupted, StoreError
from maigacha.models.pull_models import Category, Item, PullList
from maigacha.pull_validator import validate_pull_list

logger = logging.getLogger(__name__)


class PullStore:
    """The store file holding the whole pull list.

    `load` and `save` are the only places that touch the disk. Everything
    else works on the in-memory `PullList` they hand over.
    """

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> PullList:
        if not self.path.exists():
            logger.debug("No store at %s, starting with an empty list", self.path)
            return PullList()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreCorrupted(self.path, [{"path": "$", "message": f"Invalid JSON: {e}"}]) from e
        except OSError as e:
            raise StoreError(self.path, f"could not read store file: {e}") from e

        result = validate_pull_list(document)
        if not result["valid"]:
            raise StoreCorrupted(self.path, result["errors"])
        for warning in result["warnings"]:
            logger.warning("%s: %s", warning["path"], warning["message"])

        try:
            pull_list = PullList.model_validate(document)
        except ValidationError as e:
            raise StoreCorrupted(self.path, [
                {"path": "$." + ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]) from e

        logger.debug("Loaded %d items from %s", len(pull_list.items), self.path)
        return pull_list

    def save(self, pull_list: PullList) -> None:
        """Replace the store file with `pull_list`.

        Writes to a sibling temp file and renames it over the target, so a
        reader never sees a half-written list.
        """
        payload = json.dumps(pull_list.model_dump(mode="json"), indent=2, ensure_ascii=False)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreError(self.path, f"could not write store file: {e}") from e

        logger.debug("Saved %d items to %s", len(pull_list.items), self.path)


def add_item(items: List[Item], name: str, category: Category, weight: float) -> List[Item]:
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidWeight(weight)
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidWeight(weight)
    if any(item.name == name for item in items):
        raise DuplicateName(name)
    if not math.isfinite(sum(item.weight for item in items) + weight):
        raise InvalidWeight(weight)

    return [*items, Item(name=name, category=category, weight=weight)]


def remove_item(items: List[Item], name: str) -> List[Item]:
    for index, item in enumerate(items):
        if item.name == name:
            return items[:index] + items[index + 1:]
    raise NotFound(name)
