from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from . import detect, exceptions
from .config import get_settings


def _convert(args: argparse.Namespace) -> int:
    content = Path(args.input_file).read_bytes()
    try:
        nem12 = detect.detect_adapter_and_convert(content)
    except exceptions.Nem12Error as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    text = str(nem12)
    if args.output_file:
        Path(args.output_file).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text + "\n")
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "nem12convert.api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nem12convert",
        description="Convert retailer/monitor usage exports to NEM12.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    conv = sub.add_parser("convert", help="Convert a single file.")
    conv.add_argument("input_file", help="Path to the source CSV export.")
    conv.add_argument(
        "-o", "--output", dest="output_file", help="Write NEM12 here instead of stdout."
    )
    conv.set_defaults(func=_convert)

    serve = sub.add_parser("serve", help="Run the HTTP upload service.")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(func=_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
