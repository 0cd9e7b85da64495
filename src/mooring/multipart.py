# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from dataclasses import dataclass
from typing import BinaryIO, Union


@dataclass(frozen=True)
class DataProvider:
    """In-memory bytes for a form part"""

    data: bytes


@dataclass(frozen=True)
class FileProvider:
    """File on disk whose contents become the form part"""

    file: Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class StreamProvider:
    """Readable binary stream paired with its declared length"""

    stream: BinaryIO
    length: int


FormDataProvider = DataProvider | FileProvider | StreamProvider


@dataclass(frozen=True)
class MultipartFormData:
    """One named field of a multipart/form-data body."""

    provider: FormDataProvider
    name: str
    file_name: str | None = None
    mime_type: str | None = None


__all__ = [
    "DataProvider",
    "FileProvider",
    "StreamProvider",
    "FormDataProvider",
    "MultipartFormData",
]
