"""Benchmark compress() and decompress() on a local text file.

Outputs a row with the columns:
  Input Size | Vocab Size | Compress Throughput | Decompress Throughput |
  Compression Ratio | Size Reduction
"""

import argparse
import time
from pathlib import Path

from tpcompress import build_code_table, compress, decompress, load_words

DEFAULT_CACHE = "words.json"


def main() -> None:
    """Run the compress/decompress benchmark and print a table row."""
    parser = argparse.ArgumentParser(
        description="Benchmark tpcompress compress() and decompress()."
    )
    parser.add_argument("file", type=Path, help="UTF-8 text file to compress.")
    parser.add_argument(
        "--repeat",
        type=int,
        default=20,
        help="Number of compress/decompress passes (default: 20).",
    )
    parser.add_argument(
        "--cache",
        type=Path,
        default=Path(DEFAULT_CACHE),
        help="Word list cache; fetched when missing (default: words.json).",
    )
    args = parser.parse_args()

    text = args.file.read_text(encoding="utf-8")
    if not text:
        raise RuntimeError(f"{args.file} is empty.")
    total_bytes = len(text.encode("utf-8"))

    table = build_code_table(load_words(args.cache))

    # --- Compression ---
    t0 = time.perf_counter()
    for _ in range(args.repeat):
        data = compress(table, text)
    compress_elapsed = time.perf_counter() - t0
    compress_mbps = total_bytes * args.repeat / compress_elapsed / (1024 * 1024)

    # --- Decompression ---
    t0 = time.perf_counter()
    for _ in range(args.repeat):
        decompress(table, data)
    decompress_elapsed = time.perf_counter() - t0
    decompress_mbps = len(data) * args.repeat / decompress_elapsed / (1024 * 1024)

    # --- Compression stats ---
    compression_ratio = total_bytes / len(data)
    size_reduction = (1 - len(data) / total_bytes) * 100

    # --- Output ---
    print()
    header = (
        f"| {'Input Size':12} | {'Vocab Size':10} | {'Compress Throughput':19} "
        f"| {'Decompress Throughput':21} | {'Compression Ratio':17} | {'Size Reduction':14} |"
    )
    sep = (
        f"| {'-' * 12} | {'-' * 10} | {'-' * 19} "
        f"| {'-' * 21} | {'-' * 17} | {'-' * 14} |"
    )
    row = (
        f"| {f'{total_bytes:,} B':12} | {table.vocab_size():10,} | {f'{compress_mbps:.2f} MB/sec':19} "
        f"| {f'{decompress_mbps:.2f} MB/sec':21} | {f'{compression_ratio:.2f}x':17} | {f'{size_reduction:.1f}%':14} |"
    )
    print(header)
    print(sep)
    print(row)
    print()


if __name__ == "__main__":
    main()
