from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"


class _Strict(BaseModel):
    # Checker output carries more than we read (version, time, timeInSec, ...)
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class Position(_Strict):
    line: NonNegativeInt
    character: NonNegativeInt

    def is_empty(self) -> bool:
        return self.line == 0 and self.character == 0


class Range(_Strict):
    start: Position
    end: Position

    def is_empty(self) -> bool:
        return self.start.is_empty() and self.end.is_empty()


class Diagnostic(_Strict):
    file: str
    severity: Severity
    message: str
    rule: str | None = None
    range: Range | None = None

    @property
    def location(self) -> Position | None:
        """Start position, or None when the range carries no displayable location."""
        if self.range is None or self.range.is_empty():
            return None
        return self.range.start


class Summary(_Strict):
    error_count: NonNegativeInt = Field(alias="errorCount")
    warning_count: NonNegativeInt = Field(alias="warningCount")
    information_count: NonNegativeInt = Field(alias="informationCount")
    files_analyzed: NonNegativeInt = Field(alias="filesAnalyzed")


class Report(_Strict):
    diagnostics: list[Diagnostic] = Field(alias="generalDiagnostics")
    summary: Summary
