from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from pattern_catalog.api.serializers import serialize_entry, serialize_summary
from pattern_catalog import config
from pattern_catalog.config import debug
from pattern_catalog.demo import run
from pattern_catalog.errors import NoDemoAvailableError, NotFoundError
from pattern_catalog.registry import get_catalog
from pattern_catalog.renderer import render_entry
from pattern_catalog.schemas import DemoResponse, DiagramResponse, PatternDetail, PatternSummary

router = APIRouter(prefix="/patterns", tags=["patterns"])


def _lookup(name: str):
    try:
        return get_catalog().lookup(name)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


# ============================================================
# PATTERN ENDPOINTS - Catalog browsing
# ============================================================

@router.get("", response_model=List[PatternSummary])
def list_patterns(category: Optional[str] = None):
    """List catalog entries in canonical order, optionally by category"""
    try:
        entries = get_catalog().list(category)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [serialize_summary(entry) for entry in entries]


@router.get("/{name}", response_model=PatternDetail)
def get_pattern(name: str):
    """Get details of a specific pattern"""
    return serialize_entry(_lookup(name))


@router.get("/{name}/diagram", response_model=DiagramResponse)
def get_diagram(name: str, fmt: Optional[str] = Query(None, alias="format")):
    """Render the pattern's structural sketch (PATTERN_CATALOG_FORMAT when no format is given)"""
    entry = _lookup(name)
    fmt = fmt or config.DEFAULT_FORMAT
    try:
        source = render_entry(entry, fmt)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DiagramResponse(type=fmt, source=source)


@router.get("/{name}/demo", response_model=DemoResponse)
def get_demo(name: str):
    """Run the pattern's demo scenario"""
    entry = _lookup(name)
    try:
        result = run(entry)
    except NoDemoAvailableError as e:
        debug("API", str(e))
        raise HTTPException(status_code=404, detail=str(e))
    return DemoResponse(entry_name=result.entry_name, output_lines=list(result.output_lines))
