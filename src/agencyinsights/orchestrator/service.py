"""Query service bound to configured dataset paths."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agencyinsights.config.settings import Settings
from agencyinsights.core.models import Agent, Claim, Customer, Vendor
from agencyinsights.core.types import DatasetKey
from agencyinsights.queries import agents as agent_queries
from agencyinsights.queries import claims as claim_queries
from agencyinsights.queries import customers as customer_queries
from agencyinsights.queries import vendors as vendor_queries
from agencyinsights.storage.decoder import decode_csv


if TYPE_CHECKING:
    from pathlib import Path

    from agencyinsights.core.models import AgentRating, Record

logger = logging.getLogger(__name__)

RECORD_TYPES: dict[DatasetKey, type[Record]] = {
    DatasetKey.AGENTS: Agent,
    DatasetKey.CUSTOMERS: Customer,
    DatasetKey.VENDORS: Vendor,
    DatasetKey.CLAIMS: Claim,
}


class InsightsService:
    """Runs the agency queries against the datasets named in ``Settings``."""

    def __init__(self, settings: Settings | None = None) -> None:
        if settings is None:
            settings = Settings()
        self.settings = settings

    @property
    def strict(self) -> bool:
        return self.settings.strict

    def path(self, key: DatasetKey) -> Path:
        return self.settings.data.path_for(key)

    def agent_count_in_area(self, area: str) -> int:
        return agent_queries.get_agent_count_in_area(
            self.path(DatasetKey.AGENTS), area, strict=self.strict
        )

    def agents_speaking(self, area: str, language: str) -> list[Agent]:
        return agent_queries.get_agents_in_area_that_speak_language(
            self.path(DatasetKey.AGENTS), area, language, strict=self.strict
        )

    def customers_for_agent(self, area: str, first_name: str, last_name: str) -> int:
        return agent_queries.count_customers_from_area_that_use_agent(
            self.settings.data.file_paths(), area, first_name, last_name, strict=self.strict
        )

    def retained_customers(self, years_of_service: int) -> list[Customer]:
        return customer_queries.get_customers_retained_for_years_by_policy_cost_asc(
            self.path(DatasetKey.CUSTOMERS), years_of_service, strict=self.strict
        )

    def leads(self) -> list[Customer]:
        return customer_queries.get_leads_for_insurance(
            self.path(DatasetKey.CUSTOMERS), strict=self.strict
        )

    def vendors(self, area: str, vendor_rating: int, in_scope: bool = False) -> list[Vendor]:
        return vendor_queries.get_vendors_with_given_rating_that_are_in_scope(
            self.path(DatasetKey.VENDORS), area, in_scope, vendor_rating, strict=self.strict
        )

    def undisclosed_drivers(self, vehicles_insured: int, dependents: int) -> list[Customer]:
        return customer_queries.get_undisclosed_drivers(
            self.path(DatasetKey.CUSTOMERS), vehicles_insured, dependents, strict=self.strict
        )

    def agent_ranking(self) -> list[AgentRating]:
        return agent_queries.rank_agents_by_satisfaction(
            self.path(DatasetKey.CUSTOMERS), strict=self.strict
        )

    def agent_id_at_rank(self, agent_rank: int) -> int:
        return agent_queries.get_agent_id_given_rank(
            self.path(DatasetKey.CUSTOMERS), agent_rank, strict=self.strict
        )

    def customers_with_recent_claims(self, months_open: int) -> list[Customer]:
        return claim_queries.get_customers_with_claims(
            self.settings.data.file_paths(), months_open, strict=self.strict
        )

    def get_stats(self) -> dict[str, dict[str, object]]:
        """Row, issue and error counts for every configured dataset."""
        stats: dict[str, dict[str, object]] = {}
        for key, record_type in RECORD_TYPES.items():
            result = decode_csv(self.path(key), record_type)
            stats[key.value] = {
                "path": result.path,
                "records": len(result.records),
                "skipped": len(result.issues),
                "error": result.error,
            }
            logger.info("%s: %d records from %s", key.value, len(result.records), result.path)
        return stats
