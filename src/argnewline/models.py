from enum import StrEnum

from pydantic import BaseModel, Field


class FileStatus(StrEnum):
    UNCHANGED = "unchanged"
    REWRITTEN = "rewritten"
    READ_ERROR = "read_error"
    PARSE_ERROR = "parse_error"
    FORMAT_ERROR = "format_error"
    WRITE_ERROR = "write_error"


_FAILED_STATUSES = frozenset(
    {FileStatus.READ_ERROR, FileStatus.PARSE_ERROR, FileStatus.FORMAT_ERROR, FileStatus.WRITE_ERROR}
)


class FileReport(BaseModel):
    path: str
    status: FileStatus
    edits: int = 0
    message: str | None = None

    @property
    def failed(self) -> bool:
        return self.status in _FAILED_STATUSES


class RunSummary(BaseModel):
    reports: list[FileReport] = Field(default_factory=list)

    def add(self, report: FileReport) -> None:
        self.reports.append(report)

    def count(self, status: FileStatus) -> int:
        return sum(1 for report in self.reports if report.status == status)

    @property
    def total(self) -> int:
        return len(self.reports)

    @property
    def failed(self) -> int:
        return sum(1 for report in self.reports if report.failed)
