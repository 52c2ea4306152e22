"""Agent queries: area counts, language filters and satisfaction ranking."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agencyinsights.core.errors import AgentNotFoundError, RankOutOfRangeError
from agencyinsights.core.models import Agent, AgentRating, Customer
from agencyinsights.core.types import DatasetKey
from agencyinsights.storage.datasets import load_dataset
from agencyinsights.storage.decoder import read_csv_file


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)


def get_agent_count_in_area(file_path: str | Path, area: str, *, strict: bool = False) -> int:
    """Return the number of agents working in ``area``."""
    agents = read_csv_file(file_path, Agent, strict=strict)
    return sum(1 for agent in agents if agent.area == area)


def get_agents_in_area_that_speak_language(
    file_path: str | Path, area: str, language: str, *, strict: bool = False
) -> list[Agent]:
    """Return agents in ``area`` who speak ``language``."""
    agents = read_csv_file(file_path, Agent, strict=strict)
    return [agent for agent in agents if agent.area == area and agent.language == language]


def find_agent_by_name(agents: Iterable[Agent], first_name: str, last_name: str) -> Agent:
    """Return the first agent with the given name.

    Raises:
        AgentNotFoundError: No agent has that first and last name.
    """
    for agent in agents:
        if agent.first_name == first_name and agent.last_name == last_name:
            return agent
    raise AgentNotFoundError(first_name, last_name)


def count_customers_from_area_that_use_agent(
    csv_file_paths: Mapping[str, str | Path],
    customer_area: str,
    agent_first_name: str,
    agent_last_name: str,
    *,
    strict: bool = False,
) -> int:
    """Count customers in ``customer_area`` served by the named agent.

    Args:
        csv_file_paths: Paths keyed by ``agentList`` and ``customerList``.
        customer_area: Area the customers must live in.
        agent_first_name: Agent first name, exact match.
        agent_last_name: Agent last name, exact match.

    Raises:
        AgentNotFoundError: The agent is not in the agent list.
    """
    agents = load_dataset(csv_file_paths, DatasetKey.AGENTS, Agent, strict=strict)
    agent = find_agent_by_name(agents, agent_first_name, agent_last_name)
    customers = load_dataset(csv_file_paths, DatasetKey.CUSTOMERS, Customer, strict=strict)
    return sum(
        1
        for customer in customers
        if customer.area == customer_area and customer.agent_id == agent.agent_id
    )


def rank_customer_ratings(customers: Iterable[Customer]) -> list[AgentRating]:
    """Rank agents by mean customer rating, best first.

    Equal means are ordered by agent id ascending.
    """
    totals: dict[int, list[int]] = {}
    for customer in customers:
        totals.setdefault(customer.agent_id, []).append(customer.agent_rating)
    ratings = [
        AgentRating(agent_id=agent_id, mean_rating=sum(scores) / len(scores), review_count=len(scores))
        for agent_id, scores in totals.items()
    ]
    ratings.sort(key=lambda r: (-r.mean_rating, r.agent_id))
    return ratings


def rank_agents_by_satisfaction(
    file_path: str | Path, *, strict: bool = False
) -> list[AgentRating]:
    """Load customers and rank their agents by mean satisfaction."""
    return rank_customer_ratings(read_csv_file(file_path, Customer, strict=strict))


def get_agent_id_given_rank(file_path: str | Path, agent_rank: int, *, strict: bool = False) -> int:
    """Return the id of the agent at 1-based ``agent_rank`` by mean rating.

    Raises:
        RankOutOfRangeError: ``agent_rank`` is below 1 or above the number of agents.
    """
    ranking = rank_agents_by_satisfaction(file_path, strict=strict)
    if not 1 <= agent_rank <= len(ranking):
        raise RankOutOfRangeError(agent_rank, len(ranking))
    chosen = ranking[agent_rank - 1]
    logger.debug("Rank %d is agent %d (mean %.2f)", agent_rank, chosen.agent_id, chosen.mean_rating)
    return chosen.agent_id
