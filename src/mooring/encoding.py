# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Protocol, runtime_checkable
from urllib.parse import urlencode

from mooring.exceptions import ParameterEncodingError
from mooring.method import Method
from mooring.request import PreparedRequest

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"
JSON_CONTENT_TYPE = "application/json"


@runtime_checkable
class ParameterEncoding(Protocol):
    """Protocol for strategies that place target parameters on a request"""

    def encode(
        self, request: PreparedRequest, parameters: Mapping[str, Any]
    ) -> PreparedRequest: ...


class URLEncodingDestination(str, Enum):
    METHOD_DEPENDENT = "method_dependent"
    QUERY_STRING = "query_string"
    HTTP_BODY = "http_body"


_QUERY_STRING_METHODS = frozenset(
    {Method.GET.value, Method.HEAD.value, Method.DELETE.value}
)


@dataclass(frozen=True)
class URLEncoding:
    """
    Encodes parameters as a query string or a form-urlencoded body.

    With the method dependent destination GET, HEAD and DELETE requests get a
    query string and every other verb gets a body. Nested mappings are written
    as ``key[sub]=value`` and sequences as ``key[]=value`` (or a repeated
    ``key`` when `array_brackets` is off). Booleans become ``1``/``0`` unless
    `bool_as_numeric` is off.
    """

    destination: URLEncodingDestination = URLEncodingDestination.METHOD_DEPENDENT
    array_brackets: bool = True
    bool_as_numeric: bool = True

    def encode(
        self, request: PreparedRequest, parameters: Mapping[str, Any]
    ) -> PreparedRequest:
        components = self.query_components(parameters)

        if self._encodes_in_url(request.method):
            request.query_params.extend(components)
            return request

        if request.get_header("Content-Type") is None:
            request.set_header("Content-Type", FORM_CONTENT_TYPE)
        request.body = urlencode(components).encode()
        return request

    def query_components(self, parameters: Mapping[str, Any]) -> list[tuple[str, str]]:
        components: list[tuple[str, str]] = []
        for key in sorted(parameters):
            components.extend(self._components(str(key), parameters[key]))
        return components

    def _encodes_in_url(self, method: str) -> bool:
        if self.destination is URLEncodingDestination.QUERY_STRING:
            return True
        if self.destination is URLEncodingDestination.HTTP_BODY:
            return False
        return method.upper() in _QUERY_STRING_METHODS

    def _components(self, key: str, value: Any) -> list[tuple[str, str]]:
        if isinstance(value, Mapping):
            components: list[tuple[str, str]] = []
            for nested_key in sorted(value, key=str):
                components.extend(
                    self._components(f"{key}[{nested_key}]", value[nested_key])
                )
            return components

        if isinstance(value, (list, tuple)):
            array_key = f"{key}[]" if self.array_brackets else key
            return [
                component
                for item in value
                for component in self._components(array_key, item)
            ]

        return [(key, self._stringify(value))]

    def _stringify(self, value: Any) -> str:
        if isinstance(value, bool):
            if self.bool_as_numeric:
                return "1" if value else "0"
            return "true" if value else "false"
        if value is None:
            return ""
        if isinstance(value, bytes):
            try:
                return value.decode()
            except UnicodeDecodeError as err:
                raise ParameterEncodingError(
                    "Binary parameter values must be valid UTF-8"
                ) from err
        return str(value)


@dataclass(frozen=True)
class JSONEncoding:
    """Encodes parameters as a JSON request body"""

    sort_keys: bool = False

    def encode(
        self, request: PreparedRequest, parameters: Mapping[str, Any]
    ) -> PreparedRequest:
        try:
            body = json.dumps(dict(parameters), sort_keys=self.sort_keys)
        except (TypeError, ValueError) as err:
            logger.debug("Failed to JSON encode parameters: %s", err)
            raise ParameterEncodingError(
                f"Parameters are not JSON serializable: {err}"
            ) from err

        if request.get_header("Content-Type") is None:
            request.set_header("Content-Type", JSON_CONTENT_TYPE)
        request.body = body.encode()
        return request


__all__ = [
    "ParameterEncoding",
    "URLEncodingDestination",
    "URLEncoding",
    "JSONEncoding",
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
]
