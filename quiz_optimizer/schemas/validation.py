# quiz_optimizer/schemas/validation.py
"""
Validation report schemas for pre-solver input checks.
Used to describe malformed knapsack input before any DP table is allocated.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


Severity = Literal["error", "warning"]


class ValidationIssue(BaseModel):
    """A single field-level validation issue (error or warning)."""
    model_config = ConfigDict(extra="ignore")

    severity: Severity
    code: str
    message: str

    # Optional fields for structured API feedback / debugging
    field: Optional[str] = None
    item_index: Optional[int] = None
    item_id: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class ValidationReport(BaseModel):
    """
    Structured validation report.
    Used to communicate pre-solver validation results to API/CLI callers.
    """
    model_config = ConfigDict(extra="ignore")

    is_valid: bool
    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[ValidationIssue] = Field(default_factory=list)
    summary: str = ""

    @classmethod
    def from_issues(cls, issues: List[ValidationIssue]) -> "ValidationReport":
        """Build a report from a list of issues, auto-calculating validity."""
        errors = [i for i in issues if i.severity == "error"]
        warnings = [i for i in issues if i.severity == "warning"]
        is_valid = len(errors) == 0
        summary = (
            f"valid ({len(warnings)} warnings)" if is_valid else f"invalid ({len(errors)} errors, {len(warnings)} warnings)"
        )
        return cls(is_valid=is_valid, errors=errors, warnings=warnings, summary=summary)
