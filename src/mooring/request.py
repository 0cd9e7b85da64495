# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from mooring.exceptions import StatusCodeError
from mooring.multipart import MultipartFormData
from mooring.task import DownloadRequest

T_MODEL = TypeVar("T_MODEL", bound=BaseModel)


@dataclass
class PreparedRequest:
    """
    Request built from a target, handed to plugins and then to the backend.
    Plugins may mutate it in place.
    """

    url: str
    method: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    query_params: list[tuple[str, str]] = field(default_factory=list)
    body: bytes | None = None
    timeout: Optional[float] = None
    parts: Optional[list[MultipartFormData]] = None
    upload_file: Union[str, "os.PathLike[str]", None] = None
    download: Optional[DownloadRequest] = None
    validate: bool = False

    def get_header(self, name: str) -> str | None:
        name = name.lower()
        for key, value in self.headers:
            if key.lower() == name:
                return value
        return None

    def set_header(self, name: str, value: str) -> None:
        self.headers = [(k, v) for k, v in self.headers if k.lower() != name.lower()]
        self.headers.append((name, value))


@dataclass
class Response:
    status_code: int
    data: bytes
    request: Optional[PreparedRequest] = None
    headers: Optional[Dict[str, str]] = None
    elapsed_time: Optional[float] = None
    destination: Optional[Path] = None

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300

    def text(self, encoding: str = "utf-8") -> str:
        return self.data.decode(encoding)

    def json(self) -> Any:
        return json.loads(self.data)

    def as_model(self, model: Type[T_MODEL]) -> T_MODEL:
        return model.model_validate_json(self.data)

    def filter_status_codes(self, status_codes: Iterable[int]) -> "Response":
        if self.status_code not in status_codes:
            raise StatusCodeError(self)
        return self

    def filter_successful_status_codes(self) -> "Response":
        return self.filter_status_codes(range(200, 300))


__all__ = ["PreparedRequest", "Response"]
