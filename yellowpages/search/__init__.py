# Makes the folder importable as a package.
# Exports the engine, record sources and data models for convenience.

from .engine import DirectoryEngine
from .normalize import normalize
from .distance import levenshtein
from .rank import score_field, score_record
from .source import RecordSource, StaticRecordSource, FileRecordSource, RecordSourceError, load_records
from .types import Contact, SearchRequest, ScoredCandidate, FilterOptions, Connections

__all__ = [
    "DirectoryEngine",
    "normalize",
    "levenshtein",
    "score_field",
    "score_record",
    "RecordSource",
    "StaticRecordSource",
    "FileRecordSource",
    "RecordSourceError",
    "load_records",
    "Contact",
    "SearchRequest",
    "ScoredCandidate",
    "FilterOptions",
    "Connections",
]
