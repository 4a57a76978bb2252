import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from maigacha.errors import InvalidRequest
from maigacha.pull_rules import STORE_DIR_NAME, STORE_FILE_NAME


def setup_logging(verbose: bool = False, env: Mapping[str, str] = os.environ) -> None:
    """Configure logging based on verbosity level.

    Logs go to stderr so they never mix with command output.
    """
    level = logging.DEBUG if verbose else env.get("MAIGACHA_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def config_dir(env: Mapping[str, str] = os.environ, platform: str = sys.platform) -> Path:
    if platform.startswith("win") and env.get("APPDATA"):
        return Path(env["APPDATA"])
    if platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    if env.get("XDG_CONFIG_HOME"):
        return Path(env["XDG_CONFIG_HOME"])
    return Path.home() / ".config"


def default_store_path(env: Mapping[str, str] = os.environ, platform: str = sys.platform) -> Path:
    if env.get("MAIGACHA_FILE"):
        return Path(env["MAIGACHA_FILE"]).expanduser()
    return config_dir(env, platform) / STORE_DIR_NAME / STORE_FILE_NAME


@dataclass
class AppConfig:
    """Settings for one invocation."""

    store_path: Path
    verbose: bool = False
    color: bool = False
    history_size: Optional[int] = None

    def __post_init__(self):
        """Ensure paths are Path objects."""
        if isinstance(self.store_path, str):
            self.store_path = Path(self.store_path)

    @classmethod
    def from_args(cls, args, env: Mapping[str, str] = os.environ, isatty: bool = False) -> "AppConfig":
        store_path = Path(args.file).expanduser() if args.file else default_store_path(env)
        color = isatty and not args.no_color and "NO_COLOR" not in env

        return cls(
            store_path=store_path,
            verbose=args.verbose,
            color=color,
            history_size=parse_history_size(env.get("MAIGACHA_HISTORY_SIZE")),
        )


def parse_history_size(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    try:
        size = int(raw)
    except ValueError:
        size = 0
    if size < 1:
        raise InvalidRequest(f"MAIGACHA_HISTORY_SIZE must be a positive integer, got {raw!r}.")
    return size
