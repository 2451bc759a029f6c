"""Command-line entrypoint: scan files and print the components found."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from react_svg_preview.config import PreviewConfig
from react_svg_preview.preview import Document, PreviewService
from react_svg_preview.scan.component import find_component_at_line


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="react-svg-preview",
        description="Find SVG icon components in JS/TS sources (or .svg files) and print them as SVG.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="source or .svg files to scan")
    parser.add_argument("--fill", help="color substituted for currentColor (overrides config)")
    parser.add_argument("--line", type=int, help="only print the component covering this 0-based line")
    parser.add_argument("--config", type=Path, help="path to a config.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    log = logging.getLogger("react_svg_preview")

    config = PreviewConfig.load(args.config)
    if args.fill:
        config.default_fill_color = args.fill
    service = PreviewService(config)

    status = 0
    for path in args.files:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            log.error("read_failed path=%s error=%s", path, e)
            status = 1
            continue

        components = service.components(Document(uri=path.resolve().as_uri(), file_name=path.name, text=text))
        if args.line is not None:
            found = find_component_at_line(components, args.line)
            payload = found.to_dict() if found is not None else None
        else:
            payload = [c.to_dict() for c in components]
        print(json.dumps({"file": str(path), "components": payload}, indent=2))
    return status


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
