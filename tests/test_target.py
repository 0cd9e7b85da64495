"""
Tests for target descriptors.
"""

import dataclasses
import io

import httpx
import pytest

from mooring import (
    DataProvider,
    FileUpload,
    JSONEncoding,
    Method,
    MultipartFormData,
    MultipartUpload,
    RequestTask,
    SingleURLTarget,
    StreamProvider,
    Target,
    TargetType,
    URLEncoding,
    UploadTask,
    supports_multipart,
)


class ApiRoot(TargetType):
    base_url = "https://api.example.com"


class UserProfile(TargetType):
    base_url = "https://api.github.com"

    def __init__(self, name: str):
        self._name = name

    @property
    def path(self) -> str:
        return f"/users/{self._name}"

    @property
    def sample_data(self) -> bytes:
        return b'{"login": "%s"}' % self._name.encode()


class TestTargetTypeDefaults:
    """Test suite for the defaults of TargetType."""

    def test_subclass_with_only_base_url(self) -> None:
        """Test that a subclass supplying only base_url gets every default."""

        target = ApiRoot()

        assert target.base_url == "https://api.example.com"
        assert target.path == ""
        assert target.method == Method.GET
        assert target.parameters is None
        assert target.parameter_encoding == URLEncoding()
        assert target.sample_data == b""
        assert target.task == RequestTask()
        assert target.validate is False

    def test_target_dataclass_defaults(self) -> None:
        """Test that Target falls back to the same defaults."""

        target = Target("https://api.example.com")

        assert target.path == ""
        assert target.method is Method.GET
        assert target.parameters is None
        assert target.parameter_encoding == URLEncoding()
        assert target.sample_data == b""
        assert target.task == RequestTask()
        assert target.validate is False

    def test_properties_override_defaults(self) -> None:
        """Test a target overriding members with read-only properties."""

        target = UserProfile("octocat")

        assert target.path == "/users/octocat"
        assert target.sample_data == b'{"login": "octocat"}'
        assert target.method == Method.GET
        assert target.resolved_url() == ("https://api.github.com", "/users/octocat")


class TestTarget:
    """Test suite for the Target value."""

    def test_round_trip_of_every_field(self) -> None:
        """Test that explicit values are read back unchanged."""

        parameters = {"name": "Alice", "tags": ["a", "b"]}
        encoding = JSONEncoding()
        parts = [
            MultipartFormData(provider=DataProvider(b"1"), name="first"),
            MultipartFormData(
                provider=DataProvider(b"2"),
                name="second",
                file_name="second.txt",
                mime_type="text/plain",
            ),
        ]
        task = UploadTask(MultipartUpload(parts))

        target = Target(
            base_url="https://api.example.com",
            path="/users",
            method=Method.PUT,
            parameters=parameters,
            parameter_encoding=encoding,
            sample_data=b"sample",
            task=task,
            validate=True,
        )

        assert target.base_url == "https://api.example.com"
        assert target.path == "/users"
        assert target.method is Method.PUT
        assert target.parameters is parameters
        assert target.parameter_encoding is encoding
        assert target.sample_data == b"sample"
        assert target.task is task
        assert target.validate is True

    def test_upload_payload_is_exposed_unchanged(self) -> None:
        """Test that upload payloads keep their identity and order."""

        stream = io.BytesIO(b"streamed")
        parts = [
            MultipartFormData(provider=StreamProvider(stream, 8), name="z"),
            MultipartFormData(provider=DataProvider(b"a"), name="a"),
        ]

        multipart = Target(
            "https://api.example.com",
            method=Method.POST,
            task=UploadTask(MultipartUpload(parts)),
        )
        file_upload = Target(
            "https://api.example.com",
            method=Method.POST,
            task=UploadTask(FileUpload("/tmp/report.csv")),
        )

        assert isinstance(multipart.task, UploadTask)
        assert isinstance(multipart.task.upload, MultipartUpload)
        assert multipart.task.upload.parts is parts
        assert [part.name for part in multipart.task.upload.parts] == ["z", "a"]

        assert isinstance(file_upload.task, UploadTask)
        assert file_upload.task.upload == FileUpload("/tmp/report.csv")

    def test_resolved_url_parts(self) -> None:
        """Test the resolved URL example for a POST to /users."""

        target = Target(
            base_url="https://api.example.com",
            path="/users",
            method=Method.POST,
            parameters={"name": "Alice"},
        )

        assert target.resolved_url() == ("https://api.example.com", "/users")
        assert target.resolved_url().base_url == "https://api.example.com"
        assert target.resolved_url().path == "/users"
        assert supports_multipart(target.method) is True

    def test_target_is_immutable(self) -> None:
        """Test that fields cannot be reassigned."""

        target = Target("https://api.example.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            target.path = "/other"  # type: ignore[misc]


class TestSingleURLTarget:
    """Test suite for SingleURLTarget."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "https://example.com/files/report.pdf?version=2",
            "http://localhost:8080/",
            httpx.URL("https://example.org/a/b"),
        ],
    )
    def test_always_a_plain_get(self, url: str | httpx.URL) -> None:
        """Test that any URL yields GET, an empty path and no parameters."""

        target = SingleURLTarget(url)

        assert target.base_url is url
        assert target.method == Method.GET
        assert target.path == ""
        assert target.parameters is None
        assert target.task == RequestTask()
        assert target.validate is False
        assert target.sample_data == b""

    def test_single_url_target_is_immutable(self) -> None:
        """Test that the URL cannot be replaced."""

        target = SingleURLTarget("https://example.com")

        with pytest.raises(AttributeError):
            target.url = "https://other.example.com"  # type: ignore[misc]

        with pytest.raises(AttributeError):
            target.base_url = "https://other.example.com"  # type: ignore[misc]
