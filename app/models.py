from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class SaleRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str = Field(..., examples=["2024-05-01"])
    salesperson: str = Field(..., min_length=1)
    amount: float


class LeaderboardEntry(BaseModel):
    name: str
    total_day: float = 0.0
    total_month_to_date: float = 0.0


class AggregateResult(BaseModel):
    total_day: float = 0.0
    total_month_to_date: float = 0.0
    total_year_to_date: float = 0.0
    day_records: List[SaleRecord] = Field(default_factory=list)
    leaderboard: List[LeaderboardEntry] = Field(default_factory=list)


class RowRejection(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    issue: str
    value: Optional[str] = None


class CanonicalCsv(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8-sig")
    content_b64: str


class ReportSummary(BaseModel):
    rows: int = 0
    skipped: int = 0
    warnings: int = 0
    empty: bool = False
    deterministic: bool = True


class ReportItem(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class ParseReport(BaseModel):
    summary: ReportSummary
    header: Dict[str, Any] = Field(default_factory=dict)
    encoding: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[ReportItem] = Field(default_factory=list)


class ParseResponse(BaseModel):
    records: List[SaleRecord]
    report: ParseReport


class AggregateResponse(BaseModel):
    reference_date: str
    result: AggregateResult
    report: ParseReport


class ExportResponse(BaseModel):
    canonical_csv: CanonicalCsv
    report: ParseReport


class HealthResponse(BaseModel):
    ok: bool = True
