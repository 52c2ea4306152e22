"""Console logging and output for the command-line interface."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from agencyinsights.console.display import (
    print_agents_table,
    print_count,
    print_customers_table,
    print_dataset_stats,
    print_ranking_table,
    print_vendors_table,
)


if TYPE_CHECKING:
    from pathlib import Path

    from agencyinsights.core.models import Agent, AgentRating, Customer, Vendor


class InsightsConsole:
    """Rich console interface for query results."""

    def __init__(self, verbose: bool = False, console: Console | None = None) -> None:
        self.console = console or Console()
        self.verbose = verbose

    def setup_logging(self, level: str = "INFO") -> None:
        logging.basicConfig(
            level=level if self.verbose else "WARNING",
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, query: str, data_dir: Path) -> None:
        header = Text()
        header.append("agencyinsights", style="bold blue")
        header.append(" - Agency Dataset Queries\n\n", style="dim")
        header.append("Query: ", style="bold")
        header.append(f"{query}\n", style="green")
        header.append("Data: ", style="bold")
        header.append(str(data_dir), style="dim")
        self.console.print(Panel(header, border_style="blue"))

    def print_count(self, label: str, count: int) -> None:
        print_count(self.console, label, count)

    def print_agents(self, agents: list[Agent]) -> None:
        print_agents_table(self.console, agents)

    def print_customers(self, customers: list[Customer], title: str = "Customers") -> None:
        print_customers_table(self.console, customers, title)

    def print_vendors(self, vendors: list[Vendor]) -> None:
        print_vendors_table(self.console, vendors)

    def print_ranking(self, ranking: list[AgentRating], highlight: int | None = None) -> None:
        print_ranking_table(self.console, ranking, highlight)

    def print_dataset_stats(self, stats: dict[str, dict[str, Any]]) -> None:
        print_dataset_stats(self.console, stats)

    def print_error(self, error: str) -> None:
        self.console.print()
        self.console.print(
            Panel(f"[red]{escape(error)}[/red]", title="[red]Error[/red]", border_style="red")
        )
