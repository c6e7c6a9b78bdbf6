"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Rendering yields lines lazily, so the status line and headers reach the
  terminal before a body formatting failure is raised.
"""

from __future__ import annotations

import json
from typing import Iterator, NoReturn

from rich.console import Console
from rich.text import Text

from core.domain.errors import BodyFormatError
from core.domain.models import ResponseView

JSON_MEDIA_TYPE = "application/json"

STATUS_STYLE = "blue"
HEADER_NAME_STYLE = "green"
JSON_BODY_STYLE = "cyan"


class _RawNumber(str):
    """Number literal kept exactly as received."""


class _Members(list):
    """Object members in received order, repeated names included."""


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not a valid JSON value")


def _encode(value: object, indent: int, level: int) -> str:
    pad = " " * (indent * (level + 1))
    closing = " " * (indent * level)
    if isinstance(value, _RawNumber):
        return str(value)
    if isinstance(value, _Members):
        if not value:
            return "{}"
        items = [
            f"{pad}{json.dumps(name, ensure_ascii=False)}: {_encode(item, indent, level + 1)}"
            for name, item in value
        ]
        return "{\n" + ",\n".join(items) + "\n" + closing + "}"
    if isinstance(value, list):
        if not value:
            return "[]"
        items = [f"{pad}{_encode(item, indent, level + 1)}" for item in value]
        return "[\n" + ",\n".join(items) + "\n" + closing + "]"
    return json.dumps(value, ensure_ascii=False)


def pretty_json(body: str, *, indent: int = 2) -> str:
    """Re-indent JSON text without changing its values.

    Key order, repeated keys, number literals and non-ASCII characters are
    printed as received. `NaN` and `Infinity` are rejected.
    """

    try:
        data = json.loads(
            body,
            object_pairs_hook=_Members,
            parse_float=_RawNumber,
            parse_int=_RawNumber,
            parse_constant=_reject_constant,
        )
    except ValueError as exc:
        raise BodyFormatError(f"Response declared {JSON_MEDIA_TYPE} but the body is not valid JSON: {exc}") from exc
    return _encode(data, indent, 0)


def render_body(view: ResponseView, *, indent: int = 2) -> Text:
    """Content-negotiated body: indented JSON for `application/json`, raw otherwise."""

    if not view.body:
        return Text("")
    if view.content_type is not None and view.content_type.essence == JSON_MEDIA_TYPE:
        return Text(pretty_json(view.body, indent=indent), style=JSON_BODY_STYLE)
    return Text(view.body)


def render_response(view: ResponseView, *, indent: int = 2) -> Iterator[Text]:
    """Yield display lines: status, blank, headers, blank, body."""

    yield Text(view.status_line, style=STATUS_STYLE)
    yield Text("")
    for name, value in view.headers:
        yield Text.assemble((name, HEADER_NAME_STYLE), ": ", value)
    yield Text("")
    yield render_body(view, indent=indent)


def print_response(console: Console, view: ResponseView, *, indent: int = 2) -> None:
    for line in render_response(view, indent=indent):
        console.print(line, soft_wrap=True)


def print_error(console: Console, exc: BaseException) -> None:
    console.print(Text.assemble(("Error: ", "bold red"), str(exc)), soft_wrap=True)
