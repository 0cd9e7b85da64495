# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import base64
import logging
from typing import Protocol

from mooring.request import PreparedRequest, Response
from mooring.target import TargetType

logger = logging.getLogger(__name__)


class TargetPlugin(Protocol):
    """
    Protocol for provider plugins. Every hook is optional; the provider only
    calls the ones a plugin defines.
    """

    def prepare(self, request: PreparedRequest, target: TargetType) -> PreparedRequest:
        """Modify the request before it is sent"""
        ...

    def will_send(self, request: PreparedRequest, target: TargetType) -> None:
        """Called right before the request is sent or stubbed"""
        ...

    def did_receive(self, result: Response | Exception, target: TargetType) -> None:
        """Called with the response, or the error, once the exchange finishes"""
        ...

    def process(self, response: Response, target: TargetType) -> Response:
        """Modify the response before it is returned to the caller"""
        ...


class AuthenticationPlugin:
    """Base class for authentication plugins"""

    def prepare(self, request: PreparedRequest, target: TargetType) -> PreparedRequest:
        return self.add_auth(request)

    def add_auth(self, request: PreparedRequest) -> PreparedRequest:
        raise NotImplementedError


class BearerTokenAuth(AuthenticationPlugin):
    """Bearer token authentication plugin"""

    def __init__(self, token: str):
        self.token = token

    def add_auth(self, request: PreparedRequest) -> PreparedRequest:
        request.set_header("Authorization", f"Bearer {self.token}")
        return request


class BasicAuth(AuthenticationPlugin):
    """Basic authentication plugin"""

    def __init__(self, username: str, password: str):
        credentials = base64.b64encode(f"{username}:{password}".encode()).decode()
        self.credentials = credentials

    def add_auth(self, request: PreparedRequest) -> PreparedRequest:
        request.set_header("Authorization", f"Basic {self.credentials}")
        return request


class ApiKeyAuth(AuthenticationPlugin):
    """API key authentication plugin"""

    def __init__(self, api_key: str, header_name: str = "X-API-Key"):
        self.api_key = api_key
        self.header_name = header_name

    def add_auth(self, request: PreparedRequest) -> PreparedRequest:
        request.set_header(self.header_name, self.api_key)
        return request


class NetworkLoggerPlugin:
    """Logs every request and its outcome"""

    def __init__(self, level: int = logging.INFO, log_body: bool = False):
        self.level = level
        self.log_body = log_body

    def will_send(self, request: PreparedRequest, target: TargetType) -> None:
        logger.log(self.level, "Request: %s %s", request.method, request.url)
        if self.log_body and request.body is not None:
            logger.log(self.level, "Request body: %s", request.body)

    def did_receive(self, result: Response | Exception, target: TargetType) -> None:
        if isinstance(result, Exception):
            logger.log(self.level, "Request failed: %s", result)
            return

        logger.log(
            self.level,
            "Response: %s (%s bytes, %.3fs)",
            result.status_code,
            len(result.data),
            result.elapsed_time or 0.0,
        )
        if self.log_body:
            logger.log(self.level, "Response body: %s", result.data)


__all__ = [
    "TargetPlugin",
    "AuthenticationPlugin",
    "BearerTokenAuth",
    "BasicAuth",
    "ApiKeyAuth",
    "NetworkLoggerPlugin",
]
