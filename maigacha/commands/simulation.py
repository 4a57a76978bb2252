from maigacha.config import AppConfig
from maigacha.pretty_display import format_simulation
from maigacha.pull_rules import DEFAULT_SIMULATIONS, MAX_SIMULATIONS
from maigacha.pull_store import PullStore
from maigacha.rng import get_rng
from maigacha.schemas import SimulationRequest
from maigacha.services import pull_service


def register(subparsers):
    simulate_parser = subparsers.add_parser(
        "simulate",
        aliases=["s"],
        help="Run many pulls and compare observed odds with the weights.",
        description="Simulated pulls are not recorded in the history.",
    )
    simulate_parser.add_argument(
        "-n", "--simulations",
        type=int,
        default=DEFAULT_SIMULATIONS,
        help=f"Number of pulls to simulate (default: {DEFAULT_SIMULATIONS}, max: {MAX_SIMULATIONS})",
    )
    simulate_parser.add_argument("--seed", type=int, help="Optional RNG seed lock")
    simulate_parser.set_defaults(handler=simulate_command)


def simulate_command(args, config: AppConfig):
    request = SimulationRequest.parse(args.simulations, args.seed)
    report = pull_service.simulate(PullStore(config.store_path), request, get_rng(request.seed))
    print(format_simulation(report, color=config.color))
