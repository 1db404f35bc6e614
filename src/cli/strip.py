#!/usr/bin/env python3
"""jsonc-strip - convert JSON5-lite files to strict JSON.

TIER 2: Entry point, may import from all layers.

Usage:
    jsonc-strip settings.json5            # print stripped text
    jsonc-strip --check a.json5 b.json5   # also verify it decodes
    jsonc-strip --cached --indent 2 settings.json5
    cat settings.json5 | jsonc-strip
"""

import argparse
import json
import sys

from core.errors import ConfigError, JsoncError
from core.jsonc import strip
from lib.cache import CachedDecoder
from lib.logger import get_logger, reload_log_level

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="jsonc-strip",
        description="Convert JSON5-lite (comments, trailing commas, bare keys) to strict JSON.",
    )
    parser.add_argument("files", nargs="*", default=["-"], help="input files ('-' for stdin)")
    parser.add_argument("--check", action="store_true", help="fail if the output is not valid JSON")
    parser.add_argument("--cached", action="store_true", help="decode through the side cache")
    parser.add_argument("--suffix", help="cache file suffix (default: cache.suffix setting)")
    parser.add_argument("--indent", type=int, help="re-encode the decoded value with this indent")
    return parser


def read_input(name: str) -> bytes:
    """Read a file, or stdin for '-'."""
    if name == "-":
        return sys.stdin.buffer.read()
    with open(name, "rb") as f:
        return f.read()


def render(name: str, args: argparse.Namespace) -> str:
    """Produce the output text for one input.

    Raises:
        OSError: If the input cannot be read.
        json.JSONDecodeError: If decoding was requested and failed.
        UnicodeDecodeError: If a cached document is not valid UTF-8.
        JsoncError: If the side cache cannot be written.
    """
    if args.cached and name != "-":
        value = CachedDecoder(args.suffix).decode(name)
        return json.dumps(value, indent=args.indent, ensure_ascii=False)

    text = strip(read_input(name)).decode("utf-8", errors="replace")
    if args.check or args.indent is not None:
        value = json.loads(text)
        if args.indent is not None:
            return json.dumps(value, indent=args.indent, ensure_ascii=False)
    return text


def main(argv: list[str] | None = None) -> int:
    """Strip every input and print the result.

    Returns:
        0 on success, 1 if any input failed.
    """
    args = build_parser().parse_args(argv)

    try:
        reload_log_level()
    except ConfigError as e:
        print(f"jsonc-strip: {e}", file=sys.stderr)
        return 1

    status = 0
    for name in args.files:
        try:
            print(render(name, args))
        except json.JSONDecodeError as e:
            print(f"{name}: invalid JSON after stripping: {e}", file=sys.stderr)
            status = 1
        except UnicodeDecodeError as e:
            print(f"{name}: not valid UTF-8: {e}", file=sys.stderr)
            status = 1
        except (OSError, JsoncError) as e:
            print(f"{name}: {e}", file=sys.stderr)
            status = 1
        else:
            logger.debug("Stripped %s", name)

    return status


if __name__ == "__main__":
    sys.exit(main())
