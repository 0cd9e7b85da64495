# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mooring.request import PreparedRequest, Response


class MooringError(Exception):
    """Base class for every error raised while executing a target"""


class InvalidTargetURLError(MooringError, ValueError):

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Target URL is not absolute: {url!r}")


class MultipartMethodError(MooringError, ValueError):

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"{method} requests cannot carry a multipart body")


class ParameterEncodingError(MooringError, ValueError):
    """Raised when parameters cannot be serialized by the chosen encoding"""


class DownloadError(MooringError):
    """Raised when a download destination cannot be written"""


class TimeoutException(MooringError):
    """Exception raised when a request times out"""


class RequestNetworkError(MooringError):

    def __init__(
        self,
        request: "PreparedRequest",
        backend_request: Any,
        message: str = "Network error",
    ):
        self.request = request
        self.backend_request = backend_request
        super().__init__(message)


class StatusCodeError(MooringError):

    def __init__(self, response: "Response"):
        self.response = response
        super().__init__(f"Unacceptable status code {response.status_code}")


__all__ = [
    "MooringError",
    "InvalidTargetURLError",
    "MultipartMethodError",
    "ParameterEncodingError",
    "DownloadError",
    "TimeoutException",
    "RequestNetworkError",
    "StatusCodeError",
]
