"""Command line entry point that converts the ca65 manual to indexed JSON."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ca65docs.parser import parse_ca65_html

_SHARED_DOC_KEYS = {
    "mac": "macro",
    "endmac": "endmacro",
    "delmac": "delmacro",
    "exitmac": "exitmacro",
    "ismnem": "ismnemonic",
    "ref": "referenced",
    "def": "defined",
    "byt": "byte",
    "refto": "referto",
    "pagelen": "pagelength",
    "undef": "undefine",
    "fileopt": "fopt",
    "endrep": "endrepeat",
}


def build_documentation(
    html: str, snippet_types: Mapping[str, Iterable[str]]
) -> dict[str, Any]:
    """Parse the manual and bundle it with the table of alias keywords."""
    docs = parse_ca65_html(html, snippet_types)
    return {
        "keys_to_doc": {key: info.to_dict() for key, info in docs.items()},
        "keys_with_shared_doc": dict(_SHARED_DOC_KEYS),
    }


def load_snippet_types(path: str | Path) -> dict[str, list[str]]:
    """Read a JSON object mapping snippet types to lists of keywords."""
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def write_documentation(documentation: Mapping[str, Any], path: str | Path) -> None:
    """Write the documentation as pretty-printed JSON."""
    text = json.dumps(documentation, indent=2, ensure_ascii=False)
    Path(path).write_text(text, encoding="utf-8")


def _error(message: str) -> int:
    print(f"\x1b[31mERROR\x1b[0m {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert the ca65 HTML manual into indexed Markdown JSON."
    )
    parser.add_argument("html", help="path of ca65.html")
    parser.add_argument("snippets", help="JSON file mapping snippet types to keywords")
    parser.add_argument("output", help="path of the JSON file to write")
    args = parser.parse_args(argv)

    try:
        html = Path(args.html).read_text(encoding="utf-8")
    except OSError:
        return _error(f"could not read {args.html}")
    try:
        snippet_types = load_snippet_types(args.snippets)
    except (OSError, ValueError):
        return _error(f"could not load snippet types from {args.snippets}")
    try:
        documentation = build_documentation(html, snippet_types)
    except (KeyError, ValueError) as exc:
        return _error(f"could not parse {args.html}: {exc}")
    try:
        write_documentation(documentation, args.output)
    except OSError:
        return _error(f"could not write to JSON file at {args.output}")

    print(f"\x1b[32mSuccessfully wrote JSON to \x1b[0m{args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())