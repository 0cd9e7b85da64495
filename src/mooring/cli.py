# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import asyncio
import logging
from typing import Any, Callable, Optional, Sequence

import click

from mooring.backends.httpx import HTTPXTargetBackend
from mooring.config import ProviderConfig
from mooring.encoding import JSONEncoding, URLEncoding
from mooring.exceptions import MooringError
from mooring.method import Method
from mooring.plugins import NetworkLoggerPlugin
from mooring.provider import TargetProvider
from mooring.target import SingleURLTarget, Target, TargetType
from mooring.task import (
    DownloadRequest,
    DownloadTask,
    RequestTask,
    Task,
    suggested_download_destination,
)


def parse_key_values(
    values: Sequence[str], separator: str, option_name: str
) -> dict[str, str]:
    result: dict[str, str] = {}
    for item in values:
        if separator not in item:
            raise click.BadParameter(
                f"{item!r} is not in the form KEY{separator}VALUE",
                param_hint=option_name,
            )
        key, value = item.split(separator, 1)
        result[key.strip()] = value.strip()
    return result


def build_target(
    url: str,
    method: str,
    path: str,
    params: dict[str, str],
    as_json: bool,
    validate: bool,
    download_dir: Optional[str],
) -> TargetType:
    task: Task = RequestTask()
    if download_dir is not None:
        task = DownloadTask(
            DownloadRequest(destination=suggested_download_destination(download_dir))
        )

    if (
        method == Method.GET
        and not path
        and not params
        and not validate
        and isinstance(task, RequestTask)
    ):
        return SingleURLTarget(url)

    return Target(
        base_url=url,
        path=path,
        method=Method(method),
        parameters=params or None,
        parameter_encoding=JSONEncoding() if as_json else URLEncoding(),
        task=task,
        validate=validate,
    )


def common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    options = [
        click.argument("url", type=str),
        click.option(
            "--path",
            type=str,
            default="",
            help="Path appended to the URL",
        ),
        click.option(
            "--param",
            "-p",
            "params",
            multiple=True,
            help="Request parameter as KEY=VALUE, can be repeated",
        ),
        click.option(
            "--header",
            "-H",
            "headers",
            multiple=True,
            help="Request header as 'Name: value', can be repeated",
        ),
        click.option(
            "--json",
            "as_json",
            is_flag=True,
            help="Send the parameters as a JSON body",
        ),
        click.option(
            "--validate",
            is_flag=True,
            help="Fail when the response status is not 2xx",
        ),
        click.option(
            "--download",
            "download_dir",
            type=click.Path(file_okay=False, dir_okay=True),
            default=None,
            help="Save the response body into this directory",
        ),
        click.option(
            "--timeout",
            type=click.FloatRange(min=0, min_open=True),
            default=None,
            help="Request timeout in seconds",
        ),
        click.option(
            "--verbose",
            "-v",
            is_flag=True,
            help="Log requests and responses",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def run_target(
    url: str,
    method: str,
    path: str,
    params: Sequence[str],
    headers: Sequence[str],
    as_json: bool,
    validate: bool,
    download_dir: Optional[str],
    timeout: Optional[float],
    verbose: bool,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s"
        )

    try:
        config = ProviderConfig.from_env()
    except ValueError as err:
        raise click.ClickException(str(err)) from err

    config.headers.update(parse_key_values(headers, ":", "--header"))
    if timeout is not None:
        config.default_timeout = timeout

    target = build_target(
        url=url,
        method=method.upper(),
        path=path,
        params=parse_key_values(params, "=", "--param"),
        as_json=as_json,
        validate=validate,
        download_dir=download_dir,
    )

    provider = TargetProvider(
        backend=HTTPXTargetBackend(config=config),
        plugins=[NetworkLoggerPlugin(level=logging.DEBUG)] if verbose else [],
        config=config,
    )

    try:
        response = asyncio.run(provider.request(target))
    except MooringError as err:
        raise click.ClickException(str(err)) from err

    if response.destination is not None:
        click.echo(str(response.destination))
    else:
        click.echo(response.data, nl=False)


@click.group()
def cli() -> None:
    pass


@cli.command()
@common_options
def get(**kwargs: Any) -> None:
    """Send a GET request to URL and print the response body."""
    run_target(method=Method.GET.value, **kwargs)


@cli.command()
@click.option(
    "--method",
    "-X",
    type=click.Choice([method.value for method in Method], case_sensitive=False),
    default=Method.GET.value,
    help="HTTP method",
)
@common_options
def request(method: str, **kwargs: Any) -> None:
    """Send a request to URL with any method and print the response body."""
    run_target(method=method, **kwargs)


if __name__ == "__main__":
    cli()
