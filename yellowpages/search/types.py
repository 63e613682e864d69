# Data models for the directory search layer.
# Contact is the immutable person record; the rest are per-call values.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Contact(BaseModel):
    """One person entry in the directory. camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        # unquoted YAML scalars like `office: 404`
        coerce_numbers_to_str=True,
    )

    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    job_title: Optional[str] = None
    office: Optional[str] = None
    languages: Optional[List[str]] = None
    time_zone: Optional[str] = None
    nicknames: Optional[List[str]] = None
    manager_id: Optional[str] = None
    reports: Optional[List[str]] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass
class SearchRequest:
    """Query plus optional hard filters and result cap."""
    query: str = ""
    department: Optional[str] = None
    location: Optional[str] = None
    limit: Optional[int] = None


@dataclass
class ScoredCandidate:
    """A record with its boosted score; lives only inside one engine call."""
    record: Contact
    score: float
    is_match: bool


@dataclass
class FilterOptions:
    departments: List[str] = field(default_factory=list)
    locations: List[str] = field(default_factory=list)


@dataclass
class Connections:
    """Resolved manager / direct reports of one record. Dangling ids are dropped."""
    manager: Optional[Contact] = None
    reports: List[Contact] = field(default_factory=list)
