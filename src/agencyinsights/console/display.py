"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table


if TYPE_CHECKING:
    from rich.console import Console

    from agencyinsights.core.models import Agent, AgentRating, Customer, Vendor


def print_agents_table(console: Console, agents: list[Agent], title: str = "Agents") -> None:
    """Print agents as a table."""
    if not agents:
        console.print("  [yellow]⚠[/yellow] No matching agents")
        return
    table = Table(title=title, border_style="blue")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name")
    table.add_column("Area")
    table.add_column("Language")
    for agent in agents:
        table.add_row(str(agent.agent_id), agent.full_name, agent.area, agent.language)
    console.print(table)


def print_customers_table(
    console: Console, customers: list[Customer], title: str = "Customers"
) -> None:
    """Print customers with their policy holdings."""
    if not customers:
        console.print("  [yellow]⚠[/yellow] No matching customers")
        return
    table = Table(title=title, border_style="blue")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", width=24)
    table.add_column("Age", justify="right")
    table.add_column("Area")
    table.add_column("Agent", justify="right")
    table.add_column("Policies")
    table.add_column("Premium", justify="right")
    table.add_column("Years", justify="right")
    for c in customers:
        policies = [
            name
            for name, held in (("home", c.home_policy), ("auto", c.auto_policy), ("renters", c.renters_policy))
            if held
        ]
        name = f"{c.first_name} {c.last_name}".strip()
        table.add_row(
            str(c.customer_id),
            name[:22] + "..." if len(name) > 24 else name,
            str(c.age),
            c.area,
            str(c.agent_id),
            ", ".join(policies) or "[dim]none[/dim]",
            f"${c.total_monthly_premium:,.2f}",
            str(c.years_of_service),
        )
    console.print(table)


def print_vendors_table(console: Console, vendors: list[Vendor]) -> None:
    """Print vendors as a table."""
    if not vendors:
        console.print("  [yellow]⚠[/yellow] No matching vendors")
        return
    table = Table(title="Vendors", border_style="blue")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Area")
    table.add_column("Rating", justify="right")
    table.add_column("In Scope")
    for v in vendors:
        scope = "[green]yes[/green]" if v.in_scope else "[red]no[/red]"
        table.add_row(str(v.vendor_id), v.area, str(v.vendor_rating), scope)
    console.print(table)


def print_ranking_table(
    console: Console, ranking: list[AgentRating], highlight: int | None = None
) -> None:
    """Print agents ranked by mean customer satisfaction."""
    table = Table(title="Agent Satisfaction Ranking", border_style="blue")
    table.add_column("Rank", justify="right")
    table.add_column("Agent", justify="right")
    table.add_column("Mean Rating", justify="right")
    table.add_column("Reviews", justify="right")
    for rank, rating in enumerate(ranking, start=1):
        color = "green" if rating.mean_rating >= 4 else "yellow" if rating.mean_rating >= 3 else "red"
        table.add_row(
            str(rank),
            str(rating.agent_id),
            f"[{color}]{rating.mean_rating:.2f}[/{color}]",
            str(rating.review_count),
            style="bold" if rank == highlight else None,
        )
    console.print(table)


def print_dataset_stats(console: Console, stats: dict[str, dict[str, Any]]) -> None:
    """Print per-dataset load statistics."""
    table = Table(title="Datasets", border_style="blue")
    table.add_column("Dataset", style="bold")
    table.add_column("Path", style="dim")
    table.add_column("Records", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_column("Status")
    for name, entry in stats.items():
        status = (
            f"[red]{entry['error']}[/red]"
            if entry["error"]
            else "[yellow]partial[/yellow]" if entry["skipped"] else "[green]ok[/green]"
        )
        table.add_row(name, str(entry["path"]), str(entry["records"]), str(entry["skipped"]), status)
    console.print(table)


def print_count(console: Console, label: str, count: int) -> None:
    """Print a single count result."""
    console.print(Panel(f"[bold]{label}:[/bold] {count}", border_style="blue", expand=False))
