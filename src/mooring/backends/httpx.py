# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import asyncio
import logging
import os
import tempfile
import time
from contextlib import ExitStack, asynccontextmanager
from pathlib import Path
from typing import IO, Any, AsyncIterator, BinaryIO, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

import httpx

from mooring.config import ProviderConfig
from mooring.exceptions import DownloadError, RequestNetworkError, TimeoutException
from mooring.multipart import (
    DataProvider,
    FileProvider,
    MultipartFormData,
    StreamProvider,
)
from mooring.request import PreparedRequest, Response
from mooring.task import DownloadRequest

logger = logging.getLogger(__name__)

UPLOAD_CHUNK_SIZE = 64 * 1024


def merge_query(url: str, query_params: list[tuple[str, str]]) -> str:
    """Append encoded parameters after any query string already in `url`"""
    if not query_params:
        return url

    scheme, netloc, path, query, fragment = urlsplit(url)
    encoded = urlencode(query_params)
    query = f"{query}&{encoded}" if query else encoded
    return urlunsplit((scheme, netloc, path, query, fragment))


class HTTPXTargetBackend:
    """
    Sends prepared requests with httpx.

    When no client is given a new `httpx.AsyncClient` is opened for each
    request and closed afterwards. A given client is reused and left open.
    File reads and writes run in worker threads.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        config: Optional[ProviderConfig] = None,
    ):
        self.client = client
        self.config = config or ProviderConfig()

    @asynccontextmanager
    async def _open_client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self.client is not None:
            yield self.client
            return

        async with httpx.AsyncClient(
            follow_redirects=self.config.follow_redirects,
            verify=self.config.verify,
        ) as client:
            yield client

    async def send(
        self,
        request: PreparedRequest,
    ) -> Response:

        start_time = time.time()

        timeout = (
            request.timeout
            if request.timeout is not None
            else self.config.default_timeout
        )

        # httpx replaces the URL query when `params` is given, so merge it here
        request_kwargs: dict[str, Any] = {
            "method": request.method,
            "url": merge_query(request.url, request.query_params),
            "headers": request.headers,
            "timeout": timeout,
        }

        with ExitStack() as open_files:
            if request.parts:
                request_kwargs["files"] = [
                    _multipart_field(part, open_files) for part in request.parts
                ]
            elif request.upload_file is not None:
                request_kwargs["content"] = _iter_file(Path(request.upload_file))
            elif request.body is not None:
                request_kwargs["content"] = request.body

            async with self._open_client() as client:
                try:
                    if request.download is not None:
                        return await self._download(
                            client, request, request_kwargs, start_time
                        )

                    response = await client.request(**request_kwargs)

                    return Response(
                        status_code=response.status_code,
                        data=response.content,
                        request=request,
                        headers=dict(response.headers),
                        elapsed_time=time.time() - start_time,
                    )
                except httpx.TimeoutException as err:
                    raise TimeoutException(f"Request timed out: {err}") from err
                except httpx.HTTPError as err:
                    logger.error(
                        "Request error on %s %s: %s", request.method, request.url, err
                    )
                    raise RequestNetworkError(
                        request=request,
                        backend_request=_backend_request(err),
                        message=f"{type(err).__name__}: {err}",
                    ) from err

    async def _download(
        self,
        client: httpx.AsyncClient,
        request: PreparedRequest,
        request_kwargs: dict[str, Any],
        start_time: float,
    ) -> Response:
        download = request.download
        assert download is not None

        async with client.stream(**request_kwargs) as response:
            if request.validate and not response.is_success:
                # rejected by the provider, keep the body off disk
                return Response(
                    status_code=response.status_code,
                    data=await response.aread(),
                    request=request,
                    headers=dict(response.headers),
                    elapsed_time=time.time() - start_time,
                )

            destination = download.destination(
                str(response.url), dict(response.headers)
            )
            logger.debug("Saving %s to %s", response.url, destination)

            try:
                await asyncio.to_thread(_prepare_destination, destination, download)
                output = await asyncio.to_thread(_open_temporary, destination)
            except OSError as err:
                raise DownloadError(
                    f"Could not write download to {destination}: {err}"
                ) from err

            completed = False
            try:
                async for chunk in response.aiter_bytes():
                    await asyncio.to_thread(output.write, chunk)
                await asyncio.to_thread(output.close)
                await asyncio.to_thread(os.replace, output.name, destination)
                completed = True
            except OSError as err:
                raise DownloadError(
                    f"Could not write download to {destination}: {err}"
                ) from err
            finally:
                if not completed:
                    output.close()
                    Path(output.name).unlink(missing_ok=True)

            return Response(
                status_code=response.status_code,
                data=b"",
                request=request,
                headers=dict(response.headers),
                elapsed_time=time.time() - start_time,
                destination=destination,
            )


def _backend_request(err: httpx.HTTPError) -> Optional[httpx.Request]:
    try:
        return err.request
    except RuntimeError:
        return None


def _prepare_destination(destination: Path, download: DownloadRequest) -> None:
    if destination.exists() and not download.remove_previous_file:
        raise DownloadError(f"Download destination already exists: {destination}")

    if download.create_intermediate_directories:
        destination.parent.mkdir(parents=True, exist_ok=True)


def _open_temporary(destination: Path) -> IO[bytes]:
    return tempfile.NamedTemporaryFile(
        mode="wb",
        dir=destination.parent,
        prefix=f".{destination.name}.",
        suffix=".part",
        delete=False,
    )


def _multipart_field(
    part: MultipartFormData, open_files: ExitStack
) -> tuple[str, tuple[str | None, bytes | BinaryIO, str | None]]:
    provider = part.provider
    content: bytes | BinaryIO

    if isinstance(provider, DataProvider):
        content = provider.data
    elif isinstance(provider, FileProvider):
        content = open_files.enter_context(open(provider.file, "rb"))
    elif isinstance(provider, StreamProvider):
        content = provider.stream.read(provider.length)
    else:
        raise TypeError(f"Unknown form data provider: {type(provider)}")

    return (part.name, (part.file_name, content, part.mime_type))


async def _iter_file(path: Path) -> AsyncIterator[bytes]:
    upload = await asyncio.to_thread(open, path, "rb")
    try:
        while chunk := await asyncio.to_thread(upload.read, UPLOAD_CHUNK_SIZE):
            yield chunk
    finally:
        upload.close()


__all__ = ["HTTPXTargetBackend", "merge_query"]
