"""Pure parsers for command-line arguments and header values.

They never raise on bad input: `Ok`/`Err` values are returned and the caller
decides how to surface the failure.
"""

from __future__ import annotations

import re

from pydantic import AnyUrl, TypeAdapter, ValidationError

from core.config import KeyValueSplit
from core.domain.errors import InvalidUrl, MalformedPair
from core.domain.models import KeyValuePair, MediaType
from core.domain.result import Err, Ok, Result

_URL_ADAPTER = TypeAdapter(AnyUrl)

_PARAM_RE = re.compile(
    r';\s*(?P<name>[^\s;=]+)\s*=\s*(?:"(?P<quoted>(?:[^"\\]|\\.)*)"|(?P<token>[^;]*))'
)
_QUOTED_PAIR_RE = re.compile(r"\\(.)")


def parse_key_value(
    token: str,
    mode: KeyValueSplit = KeyValueSplit.REST,
) -> Result[KeyValuePair, MalformedPair]:
    """Parse a `key=value` token; only the first `=` delimits the key."""

    key, sep, rest = token.partition("=")
    if not sep:
        return Err(MalformedPair(token))

    if mode is KeyValueSplit.SEGMENT:
        value = rest.split("=", 1)[0]
    else:
        value = rest
    return Ok(KeyValuePair(key=key, value=value))


def validate_url(raw: str) -> Result[str, InvalidUrl]:
    """Check that `raw` is an absolute URL with scheme and host.

    The input is returned untouched on success; this is a gate, not a
    normalization step.
    """

    try:
        url = _URL_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        errors = exc.errors()
        reason = errors[0]["msg"] if errors else None
        return Err(InvalidUrl(raw, reason))

    if not url.host:
        return Err(InvalidUrl(raw, "missing host"))
    return Ok(raw)


def parse_media_type(raw: str | None) -> MediaType | None:
    """Parse a `Content-Type` header value, `None` when absent or malformed.

    Quoted parameter values may contain `;` and backslash escapes.
    """

    if not raw:
        return None

    essence, _, rest = raw.partition(";")
    kind, sep, subtype = essence.strip().partition("/")
    kind = kind.strip().lower()
    subtype = subtype.strip().lower()
    if not sep or not kind or not subtype or " " in kind or " " in subtype:
        return None

    parameters: dict[str, str] = {}
    for match in _PARAM_RE.finditer(";" + rest):
        name, quoted, token = match.group("name", "quoted", "token")
        if quoted is not None:
            value = _QUOTED_PAIR_RE.sub(r"\1", quoted)
        else:
            value = token.strip()
        parameters[name.lower()] = value

    return MediaType(type=kind, subtype=subtype, parameters=parameters)
