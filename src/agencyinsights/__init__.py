"""agencyinsights - Business queries over insurance agency datasets.

This package provides:
- Decoding agent, customer, vendor and claim CSV files into typed records
- Counting and filtering agents by area and language
- Customer retention, lead and undisclosed-driver reports
- Vendor lookup by area, rating and scope
- Agent ranking by customer satisfaction
- Matching customers to recent claims
"""

from __future__ import annotations

from agencyinsights.config.settings import Settings
from agencyinsights.core.errors import (
    AgentNotFoundError,
    DatasetUnavailableError,
    InsightsError,
    RankOutOfRangeError,
    RecordDecodeError,
    RecordNotFoundError,
)
from agencyinsights.core.models import Agent, AgentRating, Claim, Customer, Dependent, Vendor
from agencyinsights.core.types import DatasetKey
from agencyinsights.orchestrator.service import InsightsService
from agencyinsights.queries import (
    count_customers_from_area_that_use_agent,
    get_agent_count_in_area,
    get_agent_id_given_rank,
    get_agents_in_area_that_speak_language,
    get_customers_retained_for_years_by_policy_cost_asc,
    get_customers_with_claims,
    get_leads_for_insurance,
    get_undisclosed_drivers,
    get_vendors_with_given_rating_that_are_in_scope,
    rank_agents_by_satisfaction,
)
from agencyinsights.storage import decode_csv, read_csv_file


__version__ = "0.1.0"

__all__ = [
    "Agent",
    "AgentNotFoundError",
    "AgentRating",
    "Claim",
    "Customer",
    "DatasetKey",
    "DatasetUnavailableError",
    "Dependent",
    "InsightsError",
    "InsightsService",
    "RankOutOfRangeError",
    "RecordDecodeError",
    "RecordNotFoundError",
    "Settings",
    "Vendor",
    "count_customers_from_area_that_use_agent",
    "decode_csv",
    "get_agent_count_in_area",
    "get_agent_id_given_rank",
    "get_agents_in_area_that_speak_language",
    "get_customers_retained_for_years_by_policy_cost_asc",
    "get_customers_with_claims",
    "get_leads_for_insurance",
    "get_undisclosed_drivers",
    "get_vendors_with_given_rating_that_are_in_scope",
    "rank_agents_by_satisfaction",
    "read_csv_file",
]
