"""Configuration and environment for the statement-to-CSV converter."""
import os
from pathlib import Path

from dotenv import load_dotenv
_root = Path(__file__).resolve().parent.parent
load_dotenv(_root / ".env")

def _get(key: str) -> str:
    return (os.getenv(key) or "").strip()


# pdftotext binary (poppler-utils); override when it is not on PATH
PDFTOTEXT_PATH = _get("PDFTOTEXT_PATH") or "pdftotext"

# Seconds before a stuck pdftotext run is killed
PDFTOTEXT_TIMEOUT = float(_get("PDFTOTEXT_TIMEOUT") or 60)

# Refuse extracted text larger than this (bytes)
PDFTOTEXT_MAX_BYTES = int(_get("PDFTOTEXT_MAX_BYTES") or 10 * 1024 * 1024)

# File prefix for --separate when none is given
DEFAULT_OUTPUT_PREFIX = _get("DEFAULT_OUTPUT_PREFIX") or "statement"

LOG_LEVEL = (_get("LOG_LEVEL") or "WARNING").upper()
