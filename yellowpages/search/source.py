# Record sources: read access to the ordered, immutable roster.
# The engine only ever calls records(); where they come from is pluggable.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union

import yaml
from pydantic import ValidationError

from .types import Contact

logger = logging.getLogger(__name__)

RecordLike = Union[Contact, Dict[str, Any]]


class RecordSourceError(ValueError):
    """Roster could not be loaded or violates its invariants."""


class RecordSource(Protocol):
    def records(self) -> Sequence[Contact]:
        ...


def _to_contacts(items: Sequence[RecordLike], origin: str) -> List[Contact]:
    contacts: List[Contact] = []
    seen: set[str] = set()
    for i, item in enumerate(items):
        if isinstance(item, Contact):
            c = item
        else:
            if not isinstance(item, dict):
                raise RecordSourceError(f"{origin}: record #{i} is not a mapping")
            try:
                c = Contact.model_validate(item)
            except ValidationError as e:
                raise RecordSourceError(f"{origin}: record #{i} is invalid: {e}") from e
        if c.id in seen:
            raise RecordSourceError(f"{origin}: duplicate contact id {c.id!r}")
        seen.add(c.id)
        contacts.append(c)
    return contacts


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise RecordSourceError(f"Unsupported roster format: {path}")
    with open(path, "r", encoding="utf-8") as f:
        if suffix == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def load_records(path: Union[str, Path]) -> List[Contact]:
    """
    Load a roster file (.json, .yaml or .yml).
    The document is either a list of records or a mapping with a "contacts" list.
    """
    path = Path(path)
    if not path.exists():
        raise RecordSourceError(f"Roster file not found: {path}")
    try:
        data = _read_document(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RecordSourceError(f"Roster file is not parseable: {path}") from e
    except UnicodeDecodeError as e:
        raise RecordSourceError(f"Roster file is not valid UTF-8: {path}") from e
    except OSError as e:
        raise RecordSourceError(f"Roster file is not readable: {path}: {e.strerror or e}") from e

    if isinstance(data, dict):
        data = data.get("contacts")
    if not isinstance(data, list):
        raise RecordSourceError(f"{path}: expected a list of contacts")

    contacts = _to_contacts(data, origin=path.as_posix())
    logger.info("Loaded %d contacts from %s", len(contacts), path)
    return contacts


class StaticRecordSource:
    """In-process roster; validated once on construction."""

    def __init__(self, records: Sequence[RecordLike]):
        self._records = tuple(_to_contacts(records, origin="static"))

    def records(self) -> Sequence[Contact]:
        return self._records


class FileRecordSource:
    """Roster backed by a data file, read on first access and kept for the process lifetime."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._records: Optional[tuple[Contact, ...]] = None

    def records(self) -> Sequence[Contact]:
        if self._records is None:
            self._records = tuple(load_records(self.path))
        return self._records
