# Directory query engine.
# Scores every record against the query, applies department/location filters
# as hard constraints, boosts satisfied filters, sorts and clips.
# Pure and synchronous: the roster is read-only, so calls share it without locks.

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .normalize import normalize
from .rank import score_record, sort_and_clip
from .source import RecordSource
from .types import Connections, Contact, FilterOptions, ScoredCandidate, SearchRequest

logger = logging.getLogger(__name__)

# Added to the base score for each supplied filter the record satisfies
FILTER_BOOST = 1


class DirectoryEngine:
    def __init__(self, source: RecordSource):
        self.source = source
        self._by_id: Optional[Dict[str, Contact]] = None

    def __len__(self) -> int:
        return len(self.source.records())

    # -------------------------
    # Loaders
    # -------------------------
    def _index(self) -> Dict[str, Contact]:
        if self._by_id is None:
            self._by_id = {c.id: c for c in self.source.records()}
        return self._by_id

    # -------------------------
    # Search
    # -------------------------
    def rank(
        self,
        query: str = "",
        department: Optional[str] = None,
        location: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[ScoredCandidate]:
        """Matching records with their boosted scores, in final order."""
        normalized_query = normalize(query or "")
        department = department or None
        location = location or None

        candidates: List[ScoredCandidate] = []
        for record in self.source.records():
            base = score_record(record, normalized_query)
            matches_query = base > 0 if normalized_query else True
            matches_department = department is None or record.department == department
            matches_location = location is None or record.location == location
            is_match = matches_query and matches_department and matches_location
            # Exclusion first: a filter boost never rescues a record the query missed
            if not is_match:
                continue

            boosted = base
            if department is not None:
                boosted += FILTER_BOOST
            if location is not None:
                boosted += FILTER_BOOST
            candidates.append(ScoredCandidate(record=record, score=boosted, is_match=True))

        ranked = sort_and_clip(candidates, limit)
        logger.debug(
            "search q=%r department=%r location=%r limit=%r -> %d/%d",
            query, department, location, limit, len(ranked), len(candidates),
        )
        return ranked

    def search(
        self,
        query: str = "",
        department: Optional[str] = None,
        location: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Contact]:
        return [c.record for c in self.rank(query, department, location, limit)]

    def search_request(self, request: SearchRequest) -> List[Contact]:
        return self.search(request.query, request.department, request.location, request.limit)

    # -------------------------
    # Lookups
    # -------------------------
    def get_by_id(self, contact_id: str) -> Optional[Contact]:
        return self._index().get(contact_id)

    def connections(self, record: Contact) -> Connections:
        """Resolve manager and direct reports; dangling ids are skipped."""
        manager = self.get_by_id(record.manager_id) if record.manager_id else None
        reports = [r for r in (self.get_by_id(i) for i in (record.reports or [])) if r is not None]
        return Connections(manager=manager, reports=reports)

    def filter_options(self) -> FilterOptions:
        departments = set()
        locations = set()
        for c in self.source.records():
            if c.department:
                departments.add(c.department)
            if c.location:
                locations.add(c.location)
        return FilterOptions(departments=sorted(departments), locations=sorted(locations))
