"""Record types decoded from the agency datasets.

Field names are snake_case; the camelCase aliases are the CSV header
names each field is read from.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Record(BaseModel):
    """Base for immutable records decoded from a CSV row."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def column_names(cls) -> frozenset[str]:
        """Header names this record type reads."""
        return frozenset(field.alias or name for name, field in cls.model_fields.items())

    @field_validator("*", mode="before")
    @classmethod
    def _parse_bool_text(cls, value: Any, info: ValidationInfo) -> Any:
        # Boolean columns accept only the words true and false
        if isinstance(value, str) and cls.model_fields[info.field_name].annotation is bool:
            text = value.strip().lower()
            if text not in ("true", "false"):
                msg = f"expected true or false, got '{value}'"
                raise ValueError(msg)
            return text == "true"
        return value


class Agent(Record):
    """An insurance agent."""

    agent_id: int = Field(default=0, alias="agentId")
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    area: str = ""
    language: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Dependent(Record):
    """A dependent listed on a customer's policy."""

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")


class Customer(Record):
    """A customer or lead, with policy holdings and agent satisfaction."""

    customer_id: int = Field(default=0, alias="customerId")
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    age: int = 0
    email: str = ""
    area: str = ""
    agent_id: int = Field(default=0, alias="agentId")
    agent_rating: int = Field(default=0, alias="agentRating")
    primary_language: str = Field(default="", alias="primaryLanguage")
    dependents: tuple[Dependent, ...] = ()
    home_policy: bool = Field(default=False, alias="homePolicy")
    auto_policy: bool = Field(default=False, alias="autoPolicy")
    renters_policy: bool = Field(default=False, alias="rentersPolicy")
    total_monthly_premium: Decimal = Field(default=Decimal(0), alias="totalMonthlyPremium")
    years_of_service: int = Field(default=0, alias="yearsOfService")
    vehicles_insured: int = Field(default=0, alias="vehiclesInsured")

    @field_validator("dependents", mode="before")
    @classmethod
    def _parse_dependents(cls, value: Any) -> Any:
        # Column holds a JSON array of {"firstName", "lastName"} objects
        if isinstance(value, str):
            return json.loads(value) if value.strip() else []
        return value

    @field_validator("total_monthly_premium", mode="before")
    @classmethod
    def _parse_premium(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lstrip("$").replace(",", "")
        return value

    @property
    def has_policy(self) -> bool:
        return self.home_policy or self.auto_policy or self.renters_policy


class Vendor(Record):
    """A repair or service vendor."""

    vendor_id: int = Field(default=0, alias="vendorId")
    area: str = ""
    vendor_rating: int = Field(default=0, alias="vendorRating")
    in_scope: bool = Field(default=False, alias="inScope")


class Claim(Record):
    """A claim filed by a customer."""

    claim_id: int = Field(default=0, alias="claimId")
    customer_id: int = Field(default=0, alias="customerId")
    closed: bool = False
    months_open: int = Field(default=0, alias="monthsOpen")


class AgentRating(BaseModel):
    """Mean customer satisfaction for one agent."""

    model_config = ConfigDict(frozen=True)

    agent_id: int
    mean_rating: float
    review_count: int
