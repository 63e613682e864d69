# ============================================================
# Yellow Pages FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Roster loading (settings.DATA_PATH, JSON or YAML)
#   - Directory search with department/location filters
#   - Contact lookup, org connections and filter facets
# ============================================================

import logging
import re
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

# --- Local imports ---
from yellowpages.settings import settings, configure_logging
from yellowpages.search import Contact, DirectoryEngine, FileRecordSource, RecordSourceError

configure_logging()
logger = logging.getLogger(__name__)

# ------------------------------------------------------------
# 🧠 Helpers: engine + request parsing
# ------------------------------------------------------------
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@lru_cache(maxsize=1)
def build_engine() -> DirectoryEngine:
    engine = DirectoryEngine(FileRecordSource(settings.DATA_PATH))
    len(engine)  # forces the roster load
    return engine


def get_engine() -> DirectoryEngine:
    try:
        return build_engine()
    except RecordSourceError as e:
        logger.exception("Roster unavailable")
        raise HTTPException(status_code=500, detail=str(e))


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """Lenient cap: leading digits win ("12abc" -> 12); anything else, zero or negative -> None."""
    if not raw:
        return None
    m = _LEADING_INT.match(raw)
    if not m:
        return None
    value = int(m.group(1))
    return value if value > 0 else None


def _require_contact(engine: DirectoryEngine, contact_id: str) -> Contact:
    contact = engine.get_by_id(contact_id)
    if contact is None:
        logger.info("Contact not found: %s", contact_id)
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title=f"{settings.APP_NAME} API", version="0.1")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class FiltersPayload(BaseModel):
    departments: List[str]
    locations: List[str]

# ------------------------------------------------------------
# 🔎 Contacts
# ------------------------------------------------------------
@app.get("/api/contacts", response_model=List[Contact], response_model_exclude_none=True)
def list_contacts(
    q: str = Query("", description="Free-text query"),
    department: str = Query("", description="Exact department filter"),
    location: str = Query("", description="Exact location filter"),
    limit: Optional[str] = Query(None, description="Result cap"),
    take: Optional[str] = Query(None, description="Alias for limit"),
    engine: DirectoryEngine = Depends(get_engine),
):
    cap = parse_limit(take if take is not None else limit)
    if cap is None:
        cap = settings.DEFAULT_LIMIT
    return engine.search(
        query=q,
        department=department or None,
        location=location or None,
        limit=cap,
    )


@app.get("/api/contacts/{contact_id}", response_model=Contact, response_model_exclude_none=True)
def get_contact(contact_id: str, engine: DirectoryEngine = Depends(get_engine)):
    return _require_contact(engine, contact_id)


@app.get("/api/contacts/{contact_id}/connections")
def get_connections(contact_id: str, engine: DirectoryEngine = Depends(get_engine)):
    contact = _require_contact(engine, contact_id)
    conn = engine.connections(contact)
    return {
        "manager": conn.manager.to_json() if conn.manager else None,
        "reports": [r.to_json() for r in conn.reports],
    }


# ------------------------------------------------------------
# 🧭 Filter facets
# ------------------------------------------------------------
@app.get("/api/filters", response_model=FiltersPayload)
def list_filters(engine: DirectoryEngine = Depends(get_engine)):
    opts = engine.filter_options()
    return FiltersPayload(departments=opts.departments, locations=opts.locations)


# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz(engine: DirectoryEngine = Depends(get_engine)):
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.APP_NAME,
        "contacts": len(engine),
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": f"{settings.APP_NAME} service running."}
