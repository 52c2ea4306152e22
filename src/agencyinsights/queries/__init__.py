"""Queries module - Business questions answered over the agency datasets."""

from __future__ import annotations

from agencyinsights.queries.agents import (
    count_customers_from_area_that_use_agent,
    find_agent_by_name,
    get_agent_count_in_area,
    get_agent_id_given_rank,
    get_agents_in_area_that_speak_language,
    rank_agents_by_satisfaction,
    rank_customer_ratings,
)
from agencyinsights.queries.claims import get_customers_with_claims
from agencyinsights.queries.customers import (
    get_customers_retained_for_years_by_policy_cost_asc,
    get_leads_for_insurance,
    get_undisclosed_drivers,
)
from agencyinsights.queries.vendors import get_vendors_with_given_rating_that_are_in_scope


__all__ = [
    "count_customers_from_area_that_use_agent",
    "find_agent_by_name",
    "get_agent_count_in_area",
    "get_agent_id_given_rank",
    "get_agents_in_area_that_speak_language",
    "get_customers_retained_for_years_by_policy_cost_asc",
    "get_customers_with_claims",
    "get_leads_for_insurance",
    "get_undisclosed_drivers",
    "get_vendors_with_given_rating_that_are_in_scope",
    "rank_agents_by_satisfaction",
    "rank_customer_ratings",
]
