"""``jsonld-decode`` CLI: decode a recipe from a JSON file, an HTML page or a URL."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from typing import IO, Any

import requests

from .coerce import number_to_text
from .config import configure_logging, load_settings
from .document import RecipeJSONLDDecoder
from .errors import JSONLDDecoderError
from .html import fetch_html

_HTML_SUFFIXES = (".html", ".htm")


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _fmt_inline(value: Any) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return number_to_text(value)
    if isinstance(value, list):
        return "[" + ", ".join(_fmt_inline(v) for v in value) + "]"
    if dataclasses.is_dataclass(value):
        parts = [f"{k}={_fmt_inline(v)}" for k, v in _present_fields(value).items()]
        return f"{type(value).__name__}({', '.join(parts)})"
    return repr(value)


def _fmt_inspect(record: Any) -> str:
    """Pretty-print a decoded record, one field per line; unset fields are left out."""
    fields = _present_fields(record)
    name = type(record).__name__
    if not fields:
        return f"{name} {{}}"
    width = max(len(k) for k in fields)
    lines = [f"{name} {{"]
    for k, v in fields.items():
        lines.append(f"  {k:<{width}} : {_fmt_inline(v)}")
    lines.append("}")
    return "\n".join(lines)


def _present_fields(record: Any) -> dict[str, Any]:
    return {
        f.name: getattr(record, f.name)
        for f in dataclasses.fields(record)
        if getattr(record, f.name) is not None
    }


# ---------------------------------------------------------------------------
# Source loading
# ---------------------------------------------------------------------------

def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _decode_source(source: str, decoder: RecipeJSONLDDecoder) -> Any:
    if _is_url(source):
        return decoder.decode_html(fetch_html(source, load_settings()))
    with open(source, "rb") as fh:
        data = fh.read()
    if source.lower().endswith(_HTML_SUFFIXES):
        return decoder.decode_html(data)
    return decoder.decode(data)


def _print_record(record: Any, as_json: bool, dest: IO[str]) -> None:
    if as_json:
        print(json.dumps(dataclasses.asdict(record), indent=2, ensure_ascii=False), file=dest)
    else:
        print(_fmt_inspect(record), file=dest)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonld-decode",
        description="Decode schema.org Recipe markup into a normalized record.",
    )
    parser.add_argument("source", help="path to a .json or .html file, or an http(s) URL")
    parser.add_argument("--json", action="store_true", help="print the record as JSON")
    parser.add_argument("--log-level", default=None, help="logging level (default: JSONLD_LOG_LEVEL or WARNING)")
    return parser


def main(argv: list[str] | None = None, dest: IO[str] | None = None) -> int:
    """Run the CLI; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    dest = dest or sys.stdout

    try:
        configure_logging(args.log_level or load_settings().log_level)
        record = _decode_source(args.source, RecipeJSONLDDecoder())
    except (JSONLDDecoderError, OSError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_record(record, args.json, dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
