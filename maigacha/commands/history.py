from maigacha.config import AppConfig
from maigacha.pretty_display import format_history
from maigacha.pull_store import PullStore
from maigacha.services import pull_service


def register(subparsers):
    history_parser = subparsers.add_parser("history", aliases=["h"], help="Shows the history.")
    history_parser.set_defaults(handler=history_command)


def history_command(args, config: AppConfig):
    print(format_history(pull_service.history(PullStore(config.store_path))))
