from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .backends.base import TargetBackend
    from .backends.httpx import HTTPXTargetBackend
    from .backends.otel import TracedRequestPlugin
    from .config import ProviderConfig
    from .encoding import (
        JSONEncoding,
        ParameterEncoding,
        URLEncoding,
        URLEncodingDestination,
    )
    from .exceptions import (
        DownloadError,
        InvalidTargetURLError,
        MooringError,
        MultipartMethodError,
        ParameterEncodingError,
        RequestNetworkError,
        StatusCodeError,
        TimeoutException,
    )
    from .method import Method, supports_multipart
    from .multipart import (
        DataProvider,
        FileProvider,
        FormDataProvider,
        MultipartFormData,
        StreamProvider,
    )
    from .plugins import (
        ApiKeyAuth,
        AuthenticationPlugin,
        BasicAuth,
        BearerTokenAuth,
        NetworkLoggerPlugin,
        TargetPlugin,
    )
    from .provider import TargetProvider, compose_url
    from .request import PreparedRequest, Response
    from .stub import (
        DelayedStub,
        ImmediateStub,
        NeverStub,
        StubBehavior,
        delayed_stub,
        immediately_stub,
        never_stub,
    )
    from .target import SingleURLTarget, Target, TargetType, URLParts
    from .task import (
        DownloadDestination,
        DownloadRequest,
        DownloadTask,
        DownloadType,
        FileUpload,
        MultipartUpload,
        RequestTask,
        Task,
        UploadTask,
        UploadType,
        suggested_download_destination,
    )

__all__ = [
    "TargetType",
    "Target",
    "SingleURLTarget",
    "URLParts",
    "Method",
    "supports_multipart",
    "ParameterEncoding",
    "URLEncoding",
    "URLEncodingDestination",
    "JSONEncoding",
    "Task",
    "RequestTask",
    "UploadTask",
    "DownloadTask",
    "UploadType",
    "FileUpload",
    "MultipartUpload",
    "DownloadType",
    "DownloadRequest",
    "DownloadDestination",
    "suggested_download_destination",
    "MultipartFormData",
    "FormDataProvider",
    "DataProvider",
    "FileProvider",
    "StreamProvider",
    "StubBehavior",
    "NeverStub",
    "ImmediateStub",
    "DelayedStub",
    "never_stub",
    "immediately_stub",
    "delayed_stub",
    "PreparedRequest",
    "Response",
    "TargetProvider",
    "compose_url",
    "ProviderConfig",
    "TargetBackend",
    "HTTPXTargetBackend",
    "TracedRequestPlugin",
    "TargetPlugin",
    "AuthenticationPlugin",
    "BearerTokenAuth",
    "BasicAuth",
    "ApiKeyAuth",
    "NetworkLoggerPlugin",
    "MooringError",
    "InvalidTargetURLError",
    "MultipartMethodError",
    "ParameterEncodingError",
    "DownloadError",
    "TimeoutException",
    "RequestNetworkError",
    "StatusCodeError",
]

__SPEC_PARENT__: str = __spec__.parent  # type: ignore
# A mapping of {<member name>: (package, <module name>, <real name>)} defining dynamic imports
_dynamic_imports: "dict[str, tuple[str, str, str | None]]" = {
    "TargetType": (__SPEC_PARENT__, "target", None),
    "Target": (__SPEC_PARENT__, "target", None),
    "SingleURLTarget": (__SPEC_PARENT__, "target", None),
    "URLParts": (__SPEC_PARENT__, "target", None),
    "Method": (__SPEC_PARENT__, "method", None),
    "supports_multipart": (__SPEC_PARENT__, "method", None),
    "ParameterEncoding": (__SPEC_PARENT__, "encoding", None),
    "URLEncoding": (__SPEC_PARENT__, "encoding", None),
    "URLEncodingDestination": (__SPEC_PARENT__, "encoding", None),
    "JSONEncoding": (__SPEC_PARENT__, "encoding", None),
    "Task": (__SPEC_PARENT__, "task", None),
    "RequestTask": (__SPEC_PARENT__, "task", None),
    "UploadTask": (__SPEC_PARENT__, "task", None),
    "DownloadTask": (__SPEC_PARENT__, "task", None),
    "UploadType": (__SPEC_PARENT__, "task", None),
    "FileUpload": (__SPEC_PARENT__, "task", None),
    "MultipartUpload": (__SPEC_PARENT__, "task", None),
    "DownloadType": (__SPEC_PARENT__, "task", None),
    "DownloadRequest": (__SPEC_PARENT__, "task", None),
    "DownloadDestination": (__SPEC_PARENT__, "task", None),
    "suggested_download_destination": (__SPEC_PARENT__, "task", None),
    "MultipartFormData": (__SPEC_PARENT__, "multipart", None),
    "FormDataProvider": (__SPEC_PARENT__, "multipart", None),
    "DataProvider": (__SPEC_PARENT__, "multipart", None),
    "FileProvider": (__SPEC_PARENT__, "multipart", None),
    "StreamProvider": (__SPEC_PARENT__, "multipart", None),
    "StubBehavior": (__SPEC_PARENT__, "stub", None),
    "NeverStub": (__SPEC_PARENT__, "stub", None),
    "ImmediateStub": (__SPEC_PARENT__, "stub", None),
    "DelayedStub": (__SPEC_PARENT__, "stub", None),
    "never_stub": (__SPEC_PARENT__, "stub", None),
    "immediately_stub": (__SPEC_PARENT__, "stub", None),
    "delayed_stub": (__SPEC_PARENT__, "stub", None),
    "PreparedRequest": (__SPEC_PARENT__, "request", None),
    "Response": (__SPEC_PARENT__, "request", None),
    "TargetProvider": (__SPEC_PARENT__, "provider", None),
    "compose_url": (__SPEC_PARENT__, "provider", None),
    "ProviderConfig": (__SPEC_PARENT__, "config", None),
    "TargetBackend": (__SPEC_PARENT__, "backends.base", None),
    "HTTPXTargetBackend": (__SPEC_PARENT__, "backends.httpx", None),
    "TracedRequestPlugin": (__SPEC_PARENT__, "backends.otel", None),
    "TargetPlugin": (__SPEC_PARENT__, "plugins", None),
    "AuthenticationPlugin": (__SPEC_PARENT__, "plugins", None),
    "BearerTokenAuth": (__SPEC_PARENT__, "plugins", None),
    "BasicAuth": (__SPEC_PARENT__, "plugins", None),
    "ApiKeyAuth": (__SPEC_PARENT__, "plugins", None),
    "NetworkLoggerPlugin": (__SPEC_PARENT__, "plugins", None),
    "MooringError": (__SPEC_PARENT__, "exceptions", None),
    "InvalidTargetURLError": (__SPEC_PARENT__, "exceptions", None),
    "MultipartMethodError": (__SPEC_PARENT__, "exceptions", None),
    "ParameterEncodingError": (__SPEC_PARENT__, "exceptions", None),
    "DownloadError": (__SPEC_PARENT__, "exceptions", None),
    "TimeoutException": (__SPEC_PARENT__, "exceptions", None),
    "RequestNetworkError": (__SPEC_PARENT__, "exceptions", None),
    "StatusCodeError": (__SPEC_PARENT__, "exceptions", None),
}


def __getattr__(attr_name: str) -> object:

    dynamic_attr = _dynamic_imports.get(attr_name)
    if dynamic_attr is None:
        raise AttributeError(f"module {__name__!r} has no attribute {attr_name!r}")

    package, module_name, realname = dynamic_attr

    module = import_module(f"{package}.{module_name}", package=package)
    result = getattr(module, attr_name if realname is None else realname)
    globals()[attr_name] = result
    return result


def __dir__() -> "list[str]":
    return list(__all__)
