"""Command-line entry point: ``tpc {compress,decompress,table} FILE``."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from ._config import from_env
from .compressor import compress
from .decompressor import decompress
from .errors import TpcError
from .table import build_code_table
from .vocab import load_words

log = logging.getLogger(__name__)

DEFAULT_OUT = {"compress": "out.tpc", "decompress": "out.txt", "table": "codes.txt"}


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``tpc`` command."""
    parser = argparse.ArgumentParser(
        prog="tpc",
        description="Compress text by replacing toki pona words with single-byte codes.",
    )
    parser.add_argument(
        "mode",
        choices=["compress", "decompress", "table"],
        help="compress text, decompress a stream, or list the code table.",
    )
    parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="Input file (not used by 'table').",
    )
    parser.add_argument(
        "-o",
        "--out",
        type=Path,
        default=None,
        help="Output file (default: out.tpc, out.txt or codes.txt by mode).",
    )
    parser.add_argument(
        "--words-url",
        default=None,
        help="Word list URL (default: $TPC_WORDS_URL or the linku API).",
    )
    parser.add_argument(
        "--cache",
        type=Path,
        default=None,
        help="Word list cache file (default: $TPC_WORDS_CACHE or words.json).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: $TPC_HTTP_TIMEOUT or 30).",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Fetch the word list again even if a cache exists.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Turn debugging information on.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _ratio(num: int, den: int) -> int:
    """Size ratio as a whole percentage."""
    if den == 0:
        return 0
    return int(num / den * 100)


def run(args: argparse.Namespace) -> int:
    """Execute one invocation; raises on failure."""
    settings = from_env()
    words = load_words(
        args.cache or settings.cache_path,
        url=args.words_url or settings.words_url,
        timeout=args.timeout if args.timeout is not None else settings.timeout,
        refresh=args.refresh,
    )
    table = build_code_table(words)
    out_path: Path = args.out or Path(DEFAULT_OUT[args.mode])

    log.debug(f"args: {args}")

    match args.mode:
        case "compress":
            text = args.file.read_text(encoding="utf-8")
            data = compress(table, text)
            out_path.write_bytes(data)
            print(f"Deflated {_ratio(len(text.encode('utf-8')), len(data))}%")
        case "decompress":
            data = args.file.read_bytes()
            text = decompress(table, data)
            encoded = text.encode("utf-8")
            out_path.write_bytes(encoded)
            print(f"Inflated {_ratio(len(data), len(encoded))}%")
        case "table":
            table.save_listing(out_path)
            print(f"Wrote {len(table)} codes to {out_path}")

    print("Done!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure logging and run; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.mode != "table" and args.file is None:
        parser.error(f"{args.mode} requires an input file")

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        return run(args)
    except (TpcError, OSError, ValueError) as e:
        log.debug("run failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
