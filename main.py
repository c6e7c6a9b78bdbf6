"""Run httpie-lite straight from a checkout.

    python -m main get https://httpbin.org/get
    python -m main post https://httpbin.org/post name=alice

Puts `src/` on the import path so `cli`, `core` and `adapters` resolve
without an editable install, then hands over to the Typer app.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    # Pretty-printed JSON keeps non-ASCII text; cp1252 consoles cannot encode it.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
