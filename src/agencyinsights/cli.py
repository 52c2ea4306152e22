"""Command-line interface for agencyinsights."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from agencyinsights.config.settings import Settings
from agencyinsights.console.logger import InsightsConsole
from agencyinsights.core.errors import InsightsError
from agencyinsights.orchestrator.service import InsightsService


if TYPE_CHECKING:
    from collections.abc import Sequence

console = InsightsConsole()


def run_query(service: InsightsService, args: argparse.Namespace) -> None:  # noqa: PLR0912
    """Dispatch a parsed sub-command to the service and print its result."""
    command = args.command
    if command == "agents-in-area":
        console.print_count(f"Agents in {args.area}", service.agent_count_in_area(args.area))
    elif command == "agents-speaking":
        console.print_agents(service.agents_speaking(args.area, args.language))
    elif command == "customers-for-agent":
        count = service.customers_for_agent(args.area, args.first_name, args.last_name)
        console.print_count(f"Customers in {args.area} using {args.first_name} {args.last_name}", count)
    elif command == "retained":
        console.print_customers(
            service.retained_customers(args.years), f"Retained {args.years} years"
        )
    elif command == "leads":
        console.print_customers(service.leads(), "Leads")
    elif command == "vendors":
        console.print_vendors(service.vendors(args.area, args.rating, args.in_scope))
    elif command == "undisclosed-drivers":
        console.print_customers(
            service.undisclosed_drivers(args.vehicles, args.dependents), "Undisclosed Drivers"
        )
    elif command == "agent-rank":
        agent_id = service.agent_id_at_rank(args.rank)
        if console.verbose:
            console.print_ranking(service.agent_ranking(), highlight=args.rank)
        console.print_count(f"Agent at rank {args.rank}", agent_id)
    elif command == "recent-claims":
        console.print_customers(
            service.customers_with_recent_claims(args.months),
            f"Claims within {args.months} months",
        )
    elif command == "summary":
        console.print_dataset_stats(service.get_stats())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agencyinsights", description="Business queries over insurance agency datasets"
    )
    parser.add_argument("--data-dir", help="Directory holding the dataset CSV files")
    parser.add_argument("--strict", action="store_true", help="Fail on missing files or bad rows")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show log output")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    area = subparsers.add_parser("agents-in-area", help="Count agents in an area")
    area.add_argument("area")

    speaking = subparsers.add_parser("agents-speaking", help="Agents in an area speaking a language")
    speaking.add_argument("area")
    speaking.add_argument("language")

    for_agent = subparsers.add_parser(
        "customers-for-agent", help="Count customers in an area using an agent"
    )
    for_agent.add_argument("area")
    for_agent.add_argument("first_name")
    for_agent.add_argument("last_name")

    retained = subparsers.add_parser("retained", help="Customers retained N years, by premium")
    retained.add_argument("years", type=int)

    subparsers.add_parser("leads", help="Customers with no active policy")

    vendors = subparsers.add_parser("vendors", help="Vendors by area, rating and scope")
    vendors.add_argument("area")
    vendors.add_argument("rating", type=int)
    vendors.add_argument("--in-scope", action="store_true", help="Only vendors in scope")

    drivers = subparsers.add_parser("undisclosed-drivers", help="Customers aged 40-50 with extra vehicles")
    drivers.add_argument("vehicles", type=int, help="Vehicles insured must exceed this")
    drivers.add_argument("dependents", type=int, help="Dependents must not exceed this")

    rank = subparsers.add_parser("agent-rank", help="Agent id at a satisfaction rank")
    rank.add_argument("rank", type=int)

    claims = subparsers.add_parser("recent-claims", help="Customers with claims open N months or less")
    claims.add_argument("months", type=int)

    subparsers.add_parser("summary", help="Show dataset record counts")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    settings = Settings()
    if args.data_dir:
        settings.data.data_dir = Path(args.data_dir)
    if args.strict:
        settings.strict = True
    console.verbose = args.verbose
    console.setup_logging(settings.log_level)

    try:
        if args.verbose:
            console.print_header(args.command, settings.data.data_dir)
        run_query(InsightsService(settings), args)
    except KeyboardInterrupt:
        console.console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except InsightsError as e:
        console.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
