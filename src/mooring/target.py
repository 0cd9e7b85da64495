# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple, Optional, Union

import httpx

from mooring.encoding import ParameterEncoding, URLEncoding
from mooring.method import Method
from mooring.task import RequestTask, Task

URLTypes = Union[str, httpx.URL]


class URLParts(NamedTuple):
    base_url: URLTypes
    path: str


class TargetType:
    """
    Describes one HTTP endpoint call: base URL, path, method, parameters and
    sample data, plus the shape of the task to run.

    Subclasses must supply `base_url`; everything else has a default and can be
    overridden with a class attribute, a read-only property or a dataclass
    field. A target is a value: nothing here performs I/O.
    """

    base_url: URLTypes
    """The base URL for the target"""

    path: str = ""
    """The path to be appended to the base URL"""

    method: Method = Method.GET

    parameters: Optional[Mapping[str, Any]] = None
    """The parameters to be sent in the request"""

    parameter_encoding: ParameterEncoding = URLEncoding()

    sample_data: bytes = b""
    """Sample data to be used in testing"""

    task: Task = RequestTask()

    validate: bool = False
    """Whether the provider should reject non 2xx responses"""

    def resolved_url(self) -> URLParts:
        """
        The raw base URL and path. Joining them is left to the provider that
        executes the target.
        """
        return URLParts(self.base_url, self.path)


@dataclass(frozen=True)
class Target(TargetType):
    """A target whose every member is given at construction"""

    base_url: URLTypes
    path: str = ""
    method: Method = Method.GET
    parameters: Optional[Mapping[str, Any]] = None
    parameter_encoding: ParameterEncoding = field(default_factory=URLEncoding)
    sample_data: bytes = b""
    task: Task = field(default_factory=RequestTask)
    validate: bool = False


@dataclass(frozen=True)
class SingleURLTarget(TargetType):
    """A target that represents a GET request to a single URL with no parameters."""

    url: URLTypes

    @property
    def base_url(self) -> URLTypes:  # type: ignore[override]
        return self.url


__all__ = ["URLTypes", "URLParts", "TargetType", "Target", "SingleURLTarget"]
