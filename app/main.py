from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional

from fastapi import FastAPI, UploadFile, File, HTTPException, Query

from .aggregate import aggregate
from .export import encode_canonical_csv
from .models import (
    AggregateResponse,
    ExportResponse,
    HealthResponse,
    ParseReport,
    ParseResponse,
    ReportItem,
    ReportSummary,
)
from .normalize import decode_upload
from .parser import ParsedDocument, parse_document
from .rules import ACCEPTED_EXTENSION, DATE_SHAPE

logger = logging.getLogger(__name__)

app = FastAPI(
    title="sales-csv-aggregator",
    description="Lenient sales CSV parsing with day, month-to-date and year-to-date aggregates",
    version="0.1.0",
)


def is_reference_date(value: str) -> bool:
    return DATE_SHAPE.fullmatch(value) is not None


def build_report(doc: ParsedDocument, encoding: Dict[str, Any]) -> ParseReport:
    warnings = [
        ReportItem(row=r.row, column=None, issue=r.issue, value=r.value, action="skipped_row")
        for r in doc.rejected
    ]
    empty = doc.lines > 0 and not doc.records
    if empty:
        warnings.append(
            ReportItem(issue="no_valid_rows", value=str(doc.lines), action="returned_empty")
        )

    return ParseReport(
        summary=ReportSummary(
            rows=len(doc.records),
            skipped=len(doc.rejected),
            warnings=len(warnings),
            empty=empty,
        ),
        header={"detected": doc.header_detected, "map": doc.header_map},
        encoding=encoding,
        warnings=warnings,
    )


async def _read_csv(file: UploadFile) -> tuple[ParsedDocument, ParseReport]:
    if not (file.filename or "").lower().endswith(ACCEPTED_EXTENSION):
        logger.warning("Rejected upload %r: not a CSV file", file.filename)
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    text, encoding = decode_upload(raw)
    doc = parse_document(text)
    return doc, build_report(doc, encoding)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/parse", response_model=ParseResponse)
async def parse_csv(file: UploadFile = File(...)):
    doc, report = await _read_csv(file)
    return ParseResponse(records=doc.records, report=report)


@app.post("/aggregate", response_model=AggregateResponse)
async def aggregate_csv(
    file: UploadFile = File(...),
    reference_date: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
):
    if reference_date is None:
        reference_date = date.today().isoformat()
    elif not is_reference_date(reference_date):
        logger.warning("Rejected reference date %r", reference_date)
        raise HTTPException(status_code=422, detail="reference_date must be YYYY-MM-DD")

    doc, report = await _read_csv(file)
    result = aggregate(doc.records, reference_date)
    logger.info(
        "Aggregated %d records for %s (leaderboard=%d)",
        len(doc.records),
        reference_date,
        len(result.leaderboard),
    )
    return AggregateResponse(reference_date=reference_date, result=result, report=report)


@app.post("/export", response_model=ExportResponse)
async def export_csv(file: UploadFile = File(...)):
    doc, report = await _read_csv(file)
    return ExportResponse(canonical_csv=encode_canonical_csv(doc.records), report=report)
