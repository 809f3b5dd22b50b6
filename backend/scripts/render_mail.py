"""Render a mail from a JSON description to HTML."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
from typing import Any, Optional, Sequence

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from mailbuilder.components.factory import build_document  # noqa: E402
from mailbuilder.config import get_template_source  # noqa: E402
from mailbuilder.exceptions import MailBuilderError  # noqa: E402
from mailbuilder.utils.logging import configure_logging, get_logger  # noqa: E402

logger = get_logger(__name__)


def _load_description(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def _write_output(html: str, output: Optional[str]) -> None:
    if output is None:
        sys.stdout.write(html)
        return
    Path(output).write_text(html, encoding="utf-8")
    logger.info(f"Wrote {len(html)} characters to {output}")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "description",
        help="Path to the JSON mail description, or '-' for stdin.",
    )
    parser.add_argument(
        "--templates-dir",
        default=None,
        help="Directory of <id>.html fragments overriding the built-ins.",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the HTML to this file instead of stdout.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING", stream=sys.stderr)

    try:
        payload = _load_description(args.description)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"error: cannot read {args.description}: {exc}", file=sys.stderr)
        return 1

    if not isinstance(payload, dict):
        print("error: description must be a JSON object", file=sys.stderr)
        return 1

    try:
        document = build_document(payload)
        html = document.render(get_template_source(args.templates_dir))
    except MailBuilderError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1

    _write_output(html, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
