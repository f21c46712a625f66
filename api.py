#!/usr/bin/env python3
"""FastAPI server for the statement converter - parse pasted statement text."""
from typing import Dict, List
import sys
import os

_here = os.path.dirname(os.path.abspath(__file__))
if _here not in sys.path:
    sys.path.insert(0, _here)

from dataclasses import asdict
from pathlib import Path
from dotenv import load_dotenv
load_dotenv(Path(_here) / ".env")

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from stockplan import StatementDateError, parse, render
from stockplan.clients import strip_zero_width
from stockplan.render import COMBINED, MODES
from stockplan.summary import summarize

app = FastAPI(title="Stock Plan Statement Converter", version="1.0.0")


class StatementText(BaseModel):
    text: str


def _parse_body(body: StatementText):
    return parse(strip_zero_width(body.text))


@app.post("/api/parse")
async def parse_statement(body: StatementText):
    """Records found in the statement text, in document order."""
    data = _parse_body(body)
    return {
        "releases": [asdict(r) for r in data.releases],
        "sales": [asdict(s) for s in data.sales],
        "espp_purchases": [asdict(p) for p in data.espp_purchases],
    }


@app.post("/api/csv")
async def statement_csv(
    body: StatementText,
    mode: str = Query(default=COMBINED, description="combined | separate"),
):
    """Combined CSV as text/csv, or the three per-type tables as JSON."""
    if mode not in MODES:
        raise HTTPException(status_code=422, detail=f"mode must be one of: {', '.join(MODES)}")
    data = _parse_body(body)
    try:
        out = render(data, mode)
    except StatementDateError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if mode == COMBINED:
        return PlainTextResponse(out, media_type="text/csv")
    return out


@app.post("/api/summary")
async def statement_summary(body: StatementText):
    """Per-type record counts, share totals and date range."""
    data = _parse_body(body)
    try:
        df = summarize(data)
    except StatementDateError as e:
        raise HTTPException(status_code=422, detail=str(e))
    rows: List[Dict] = []
    for _, row in df.iterrows():
        rows.append({
            "type": str(row["type"]),
            "records": int(row["records"]),
            "total_quantity": int(row["total_quantity"]),
            "first_date": str(row["first_date"]),
            "last_date": str(row["last_date"]),
        })
    return {"summary": rows}


@app.get("/api/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
