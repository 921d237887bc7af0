import os
import sys
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


DIAGRAM_FORMATS = ("ascii", "mermaid")


def resolve_format(value: Optional[str]) -> str:
    """A known diagram format, or "ascii" when value is unset or unknown"""
    if not value:
        return "ascii"
    fmt = value.strip().lower()
    if fmt not in DIAGRAM_FORMATS:
        print(f"[CONFIG WARNING] Unknown diagram format '{value}', using ascii", file=sys.stderr)
        return "ascii"
    return fmt


VERBOSE = _env_flag("PATTERN_CATALOG_VERBOSE")
DEFAULT_FORMAT = resolve_format(os.getenv("PATTERN_CATALOG_FORMAT"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("PATTERN_CATALOG_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
HOST = os.getenv("PATTERN_CATALOG_HOST", "127.0.0.1")
PORT = int(os.getenv("PATTERN_CATALOG_PORT", "8000"))


def set_verbose(enabled: bool) -> None:
    global VERBOSE
    VERBOSE = enabled


def debug(tag: str, message: str) -> None:
    """Print a tagged debug line to stderr when verbose mode is on"""
    if VERBOSE:
        print(f"[{tag} DEBUG] {message}", file=sys.stderr)
