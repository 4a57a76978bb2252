from maigacha.config import AppConfig
from maigacha.pretty_display import format_added, format_list, format_pull
from maigacha.pull_store import PullStore
from maigacha.rng import get_rng
from maigacha.schemas import AddRequest, PullRequest
from maigacha.services import pull_service


def register(subparsers):
    add_parser = subparsers.add_parser(
        "add",
        aliases=["a"],
        help="Add an item to the list.",
        description="Add an item to the list. Add format is <name> <common/rare> <weight>.",
    )
    add_parser.add_argument("name", help="Item name (case-sensitive, must be unique)")
    add_parser.add_argument("category", help="common or rare")
    add_parser.add_argument("weight", help="Relative pull weight, a positive number")
    add_parser.set_defaults(handler=add_command)

    remove_parser = subparsers.add_parser("remove", aliases=["r"], help="Remove an item from the list.")
    remove_parser.add_argument("name", help="Exact name of the item to remove")
    remove_parser.set_defaults(handler=remove_command)

    list_parser = subparsers.add_parser("list", aliases=["l"], help="Shows the list.")
    list_parser.set_defaults(handler=list_command)

    pull_parser = subparsers.add_parser("pull", aliases=["p"], help="Pulls an item from the list.")
    pull_parser.add_argument("--seed", type=int, help="Optional RNG seed for a reproducible pull")
    pull_parser.set_defaults(handler=pull_command)


def add_command(args, config: AppConfig):
    request = AddRequest.parse(args.name, args.category, args.weight)
    item = pull_service.add(PullStore(config.store_path), request)
    print(format_added(item))


def remove_command(args, config: AppConfig):
    pull_service.remove(PullStore(config.store_path), args.name)
    print(f'"{args.name}", has been removed.')


def list_command(args, config: AppConfig):
    print(format_list(pull_service.list_items(PullStore(config.store_path))))


def pull_command(args, config: AppConfig):
    request = PullRequest(seed=args.seed)
    item = pull_service.pull(
        PullStore(config.store_path),
        get_rng(request.seed),
        history_size=config.history_size,
    )
    print(format_pull(item, color=config.color))
