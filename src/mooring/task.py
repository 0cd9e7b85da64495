# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from dataclasses import dataclass
from email.message import Message
from pathlib import Path, PurePosixPath
from typing import Callable, Mapping, Sequence, Union
from urllib.parse import unquote, urlparse

from mooring.multipart import MultipartFormData

DownloadDestination = Callable[[str, Mapping[str, str]], Path]
"""Resolves where downloaded bytes are saved from the final URL and response headers"""


@dataclass(frozen=True)
class FileUpload:

    file: Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class MultipartUpload:

    parts: Sequence[MultipartFormData]


UploadType = FileUpload | MultipartUpload


@dataclass(frozen=True)
class DownloadRequest:

    destination: DownloadDestination
    create_intermediate_directories: bool = True
    remove_previous_file: bool = False


DownloadType = DownloadRequest


@dataclass(frozen=True)
class RequestTask:
    """A plain request, no payload beyond the parameters"""


@dataclass(frozen=True)
class UploadTask:

    upload: UploadType


@dataclass(frozen=True)
class DownloadTask:

    download: DownloadType


Task = RequestTask | UploadTask | DownloadTask


def suggested_download_destination(
    directory: Union[str, "os.PathLike[str]"],
) -> DownloadDestination:
    """
    Build a destination that saves into `directory`, naming the file after the
    Content-Disposition filename, the last URL path segment, or "download".
    """

    base = Path(directory)

    def destination(url: str, headers: Mapping[str, str]) -> Path:
        file_name: str | None = None

        disposition = _get_header(headers, "content-disposition")
        if disposition:
            message = Message()
            message["content-disposition"] = disposition
            file_name = message.get_filename()

        if not file_name:
            file_name = PurePosixPath(unquote(urlparse(url).path)).name

        # never escape the target directory
        file_name = PurePosixPath(file_name or "").name
        return base / (file_name or "download")

    return destination


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


__all__ = [
    "DownloadDestination",
    "FileUpload",
    "MultipartUpload",
    "UploadType",
    "DownloadRequest",
    "DownloadType",
    "RequestTask",
    "UploadTask",
    "DownloadTask",
    "Task",
    "suggested_download_destination",
]
