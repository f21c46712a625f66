"""Stock plan statement to CSV: releases, sales and ESPP purchases."""
from .models import ESPPPurchase, NormalizedRecord, ParsedData, Release, Sale
from .normalizer import StatementDateError
from .parsers import parse
from .render import render

__all__ = [
    "parse",
    "render",
    "ParsedData",
    "Release",
    "Sale",
    "ESPPPurchase",
    "NormalizedRecord",
    "StatementDateError",
]
