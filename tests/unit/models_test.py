"""Unit tests for per-file report models."""

from argnewline.models import FileReport, FileStatus, RunSummary


def test_failed_statuses() -> None:
    assert not FileReport(path="a.go", status=FileStatus.REWRITTEN, edits=2).failed
    assert not FileReport(path="a.go", status=FileStatus.UNCHANGED).failed
    for status in (FileStatus.READ_ERROR, FileStatus.PARSE_ERROR, FileStatus.FORMAT_ERROR, FileStatus.WRITE_ERROR):
        assert FileReport(path="a.go", status=status, message="boom").failed


def test_summary_counts() -> None:
    summary = RunSummary()
    summary.add(FileReport(path="a.go", status=FileStatus.REWRITTEN, edits=1))
    summary.add(FileReport(path="b.go", status=FileStatus.UNCHANGED))
    summary.add(FileReport(path="c.go", status=FileStatus.PARSE_ERROR, message="syntax error at 3:1"))

    assert summary.total == 3
    assert summary.count(FileStatus.REWRITTEN) == 1
    assert summary.count(FileStatus.WRITE_ERROR) == 0
    assert summary.failed == 1


def test_report_serialises_status_value() -> None:
    report = FileReport(path="a.go", status=FileStatus.FORMAT_ERROR, message="bad")
    assert report.model_dump()["status"] == "format_error"
