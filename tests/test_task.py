"""
Tests for tasks and download destinations.
"""

from pathlib import Path
from typing import get_args

from mooring import (
    DownloadTask,
    RequestTask,
    Task,
    UploadTask,
    suggested_download_destination,
)


class TestTask:
    """Test suite for the Task union."""

    def test_task_has_exactly_three_variants(self) -> None:
        """Test that Task is the closed set request, upload and download."""

        assert set(get_args(Task)) == {RequestTask, UploadTask, DownloadTask}

    def test_request_tasks_are_equal(self) -> None:
        """Test that the payload-less variant compares by value."""

        assert RequestTask() == RequestTask()


class TestSuggestedDownloadDestination:
    """Test suite for suggested_download_destination."""

    def test_uses_content_disposition_filename(self, tmp_path: Path) -> None:
        """Test that the server suggested filename wins."""

        destination = suggested_download_destination(tmp_path)

        path = destination(
            "https://example.com/download?id=1",
            {"Content-Disposition": 'attachment; filename="report.pdf"'},
        )

        assert path == tmp_path / "report.pdf"

    def test_falls_back_to_url_path(self, tmp_path: Path) -> None:
        """Test that the last URL path segment is used without a header."""

        destination = suggested_download_destination(tmp_path)

        path = destination("https://example.com/files/data%20set.csv?x=1", {})

        assert path == tmp_path / "data set.csv"

    def test_falls_back_to_default_name(self, tmp_path: Path) -> None:
        """Test the default name when nothing else is available."""

        destination = suggested_download_destination(tmp_path)

        assert destination("https://example.com/", {}) == tmp_path / "download"

    def test_never_leaves_the_directory(self, tmp_path: Path) -> None:
        """Test that path components in the suggested name are dropped."""

        destination = suggested_download_destination(tmp_path)

        path = destination(
            "https://example.com/x",
            {"content-disposition": 'attachment; filename="../../etc/passwd"'},
        )

        assert path == tmp_path / "passwd"
