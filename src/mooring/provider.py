# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import asyncio
import logging
from typing import Any, Optional, Sequence

import httpx

from mooring.backends.base import TargetBackend
from mooring.backends.httpx import HTTPXTargetBackend
from mooring.config import ProviderConfig
from mooring.encoding import URLEncoding, URLEncodingDestination
from mooring.exceptions import (
    InvalidTargetURLError,
    MooringError,
    MultipartMethodError,
    StatusCodeError,
)
from mooring.method import supports_multipart
from mooring.multipart import DataProvider, MultipartFormData
from mooring.request import PreparedRequest, Response
from mooring.stub import DelayedStub, ImmediateStub, StubClosure, never_stub
from mooring.target import TargetType, URLParts
from mooring.task import DownloadTask, FileUpload, MultipartUpload, UploadTask

logger = logging.getLogger(__name__)

_QUERY_STRING_ENCODING = URLEncoding(destination=URLEncodingDestination.QUERY_STRING)


def compose_url(parts: URLParts) -> str:
    """
    Join a target base URL and path as path components. An empty path leaves
    the base URL untouched.
    """
    base_url, path = str(parts.base_url), parts.path
    url = base_url if not path else base_url.rstrip("/") + "/" + path.lstrip("/")

    try:
        is_relative = httpx.URL(url).is_relative_url
    except httpx.InvalidURL as err:
        raise InvalidTargetURLError(url) from err

    if is_relative:
        raise InvalidTargetURLError(url)
    return url


class TargetProvider:
    """
    Executes targets.

    The provider turns a target into a `PreparedRequest`, runs it through the
    plugins and then either sends it with the backend or answers with the
    target sample data, depending on the stub behavior returned for it.
    """

    def __init__(
        self,
        backend: Optional[TargetBackend] = None,
        plugins: Sequence[Any] = (),
        stub_behavior: StubClosure = never_stub,
        config: Optional[ProviderConfig] = None,
    ):
        self.config = config or ProviderConfig()
        self.backend = backend or HTTPXTargetBackend(config=self.config)
        self.plugins = list(plugins)
        self.stub_behavior = stub_behavior

    def prepare_request(self, target: TargetType) -> PreparedRequest:
        method = str(target.method).upper()

        request = PreparedRequest(
            url=compose_url(target.resolved_url()),
            method=method,
            headers=list(self.config.headers.items()),
            validate=target.validate,
        )

        task = target.task
        parameters = target.parameters

        if isinstance(task, UploadTask) and isinstance(task.upload, MultipartUpload):
            if not supports_multipart(method):
                raise MultipartMethodError(method)
            request.parts = list(task.upload.parts)
            if parameters is not None:
                request.parts.extend(
                    MultipartFormData(provider=DataProvider(value.encode()), name=key)
                    for key, value in _QUERY_STRING_ENCODING.query_components(
                        parameters
                    )
                )
        elif isinstance(task, UploadTask) and isinstance(task.upload, FileUpload):
            request.upload_file = task.upload.file
            if parameters is not None:
                _QUERY_STRING_ENCODING.encode(request, parameters)
        else:
            if isinstance(task, DownloadTask):
                request.download = task.download
            if parameters is not None:
                request = target.parameter_encoding.encode(request, parameters)

        logger.debug(
            "Prepared request: %s %s\nHeaders: %s\nQuery Params: %s\nBody: %s",
            request.method,
            request.url,
            request.headers,
            request.query_params,
            request.body,
        )
        return request

    async def request(self, target: TargetType) -> Response:
        request = self.prepare_request(target)

        for plugin in self.plugins:
            if hasattr(plugin, "prepare"):
                request = plugin.prepare(request, target)

        for plugin in self.plugins:
            if hasattr(plugin, "will_send"):
                plugin.will_send(request, target)

        try:
            response = await self._perform(request, target)
        except MooringError as err:
            for plugin in self.plugins:
                if hasattr(plugin, "did_receive"):
                    plugin.did_receive(err, target)
            raise

        for plugin in self.plugins:
            if hasattr(plugin, "did_receive"):
                plugin.did_receive(response, target)

        for plugin in self.plugins:
            if hasattr(plugin, "process"):
                response = plugin.process(response, target)

        if target.validate and not response.is_successful:
            logger.warning(
                "Response status %s rejected for %s %s",
                response.status_code,
                request.method,
                request.url,
            )
            raise StatusCodeError(response)

        return response

    async def _perform(self, request: PreparedRequest, target: TargetType) -> Response:
        behavior = self.stub_behavior(target)

        if isinstance(behavior, DelayedStub):
            logger.debug("Stubbing %s after %ss", request.url, behavior.seconds)
            await asyncio.sleep(behavior.seconds)
            return self._stub_response(request, target)

        if isinstance(behavior, ImmediateStub):
            logger.debug("Stubbing %s", request.url)
            return self._stub_response(request, target)

        logger.debug("Executing request...")
        response = await self.backend.send(request)
        logger.debug("Received response: status=%s", response.status_code)
        return response

    def _stub_response(self, request: PreparedRequest, target: TargetType) -> Response:
        return Response(
            status_code=200,
            data=target.sample_data,
            request=request,
            headers={},
            elapsed_time=0.0,
        )


__all__ = ["TargetProvider", "compose_url"]
