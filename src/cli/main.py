"""Main CLI entry point for httpie-lite.

Commands:
- get: send a GET request and print the response
- post: send key=value fields as a JSON object and print the response
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated, Optional

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cli.ui_components import print_error, print_response
from core.config import AppSettings
from core.domain.errors import HttpieLiteError
from core.domain.models import KeyValuePair, Method, RequestDescriptor
from core.domain.result import Err, Ok
from core.parsing import parse_key_value, validate_url
from core.services.dispatch import build_descriptor
from core.services.request_pipeline import perform

_LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name="httpie-lite",
    help="A small command-line HTTP client.",
    no_args_is_help=True,
)


def _settings(ctx: typer.Context) -> AppSettings:
    settings = ctx.find_root().obj
    if isinstance(settings, AppSettings):
        return settings
    return AppSettings()


def _url_callback(ctx: typer.Context, value: str) -> str:
    if ctx.resilient_parsing:
        return value
    match validate_url(value):
        case Ok(value=url):
            return url
        case Err(error=error):
            raise typer.BadParameter(str(error))


class KeyValueParamType(click.ParamType):
    """Turns a `key=value` token into a `KeyValuePair` while arguments are parsed."""

    name = "key=value"

    def convert(
        self,
        value: object,
        param: Optional[click.Parameter],
        ctx: Optional[click.Context],
    ) -> KeyValuePair:
        if isinstance(value, KeyValuePair):
            return value
        mode = (_settings(ctx) if ctx is not None else AppSettings()).kv_split
        match parse_key_value(str(value), mode):
            case Ok(value=pair):
                return pair
            case Err(error=error):
                self.fail(str(error), param, ctx)


def _send_and_print(ctx: typer.Context, descriptor: RequestDescriptor) -> None:
    settings = _settings(ctx)
    try:
        view = asyncio.run(perform(descriptor, settings))
        print_response(Console(), view, indent=settings.json_indent)
    except HttpieLiteError as exc:
        _LOGGER.debug("%s %s failed: %s", descriptor.method.value, descriptor.url, type(exc).__name__)
        print_error(Console(stderr=True), exc)
        raise typer.Exit(1) from exc


@app.command()
def get(
    ctx: typer.Context,
    url: Annotated[
        str,
        typer.Argument(help="Absolute URL, e.g. https://httpbin.org/get", callback=_url_callback),
    ],
) -> None:
    """Send a GET request.

    Example:
        httpie-lite get https://httpbin.org/get
    """
    _send_and_print(ctx, build_descriptor(Method.GET, url))


@app.command()
def post(
    ctx: typer.Context,
    url: Annotated[
        str,
        typer.Argument(help="Absolute URL, e.g. https://httpbin.org/post", callback=_url_callback),
    ],
    fields: Annotated[
        Optional[list[KeyValuePair]],
        typer.Argument(
            help="Body fields as key=value; sent as a JSON object",
            metavar="KEY=VALUE...",
            click_type=KeyValueParamType(),
        ),
    ] = None,
) -> None:
    """Send a POST request with a JSON body.

    Example:
        httpie-lite post https://httpbin.org/post a=1 b=2
    """
    _send_and_print(ctx, build_descriptor(Method.POST, url, fields or []))


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from cli import __version__

        typer.echo(f"httpie-lite {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log request details to stderr."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    r"""A small command-line HTTP client.

    \b
    Examples:
        httpie-lite get https://httpbin.org/get
        httpie-lite post https://httpbin.org/post name=alice role=admin
    """
    configure_logging(verbose)
    try:
        ctx.obj = AppSettings()
    except ValidationError as exc:
        print_error(Console(stderr=True), exc)
        raise typer.Exit(1) from exc
    _LOGGER.debug("Settings loaded: %s", ctx.obj.model_dump())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
