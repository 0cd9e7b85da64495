# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from enum import Enum


class Method(str, Enum):
    """Represents an HTTP method."""

    OPTIONS = "OPTIONS"
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    @property
    def supports_multipart(self) -> bool:
        return self in _MULTIPART_METHODS

    def __str__(self) -> str:
        return self.value


_MULTIPART_METHODS = frozenset(
    {
        Method.POST,
        Method.PUT,
        Method.PATCH,
        Method.CONNECT,
    }
)


def supports_multipart(method: Method | str) -> bool:
    """Whether requests with this verb conventionally carry a body."""
    if isinstance(method, Method):
        return method.supports_multipart
    try:
        return Method(method.upper()).supports_multipart
    except ValueError:
        return False


__all__ = ["Method", "supports_multipart"]
