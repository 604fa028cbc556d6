"""
schemas.py — Pydantic v2 models for lint results and the rule catalogue.

These are the only shapes that cross module boundaries:
  RuleInfo    — one entry in the rule catalogue (code, name, summary, section)
  Violation   — one reported problem at a 1-based line/column
  FileReport  — every violation found in one file
  LintReport  — the aggregate of a run; serialised as-is by the JSON reporter
"""

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ── Rule catalogue ────────────────────────────────────────────────────────────

class RuleInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    code:    str = Field(..., pattern=r'^[A-Z][0-9]{3}$')
    name:    str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
    section: str = Field(..., min_length=1)


# ── Results ───────────────────────────────────────────────────────────────────

class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    path:    str
    line:    int = Field(..., ge=1)
    column:  int = Field(..., ge=1)
    code:    str
    message: str

    def sort_key(self) -> tuple:
        return (self.path, self.line, self.column, self.code)

    def format(self) -> str:
        return f'{self.path}:{self.line}:{self.column}: {self.code} {self.message}'


class FileReport(BaseModel):
    path:       str
    kind:       str
    violations: list[Violation] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


class LintReport(BaseModel):
    files_checked: int = 0
    violations:    list[Violation] = Field(default_factory=list)

    @computed_field
    @property
    def statistics(self) -> dict[str, int]:
        """Violation count per rule code, sorted by code."""
        counts = Counter(v.code for v in self.violations)
        return dict(sorted(counts.items()))

    @property
    def files_with_violations(self) -> int:
        return len({v.path for v in self.violations})

    def add(self, file_report: FileReport) -> None:
        self.files_checked += 1
        self.violations.extend(file_report.violations)
