#!/usr/bin/env python3
"""
Synthetic dataset generator for line splitter benchmarks.

Generates a large newline-delimited file whose line lengths vary between
--min-length and --max-length bytes (terminator included), so chunk
boundaries land at irregular offsets.
"""

import argparse
import random
import string
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

ALPHABET = (string.ascii_letters + string.digits).encode("ascii")


def generate_line(line_no: int, length: int, rng: random.Random) -> bytes:
    """
    Build one line of exactly ``length`` bytes, ending in a newline.

    Lines start with their zero-padded number so ordering can be checked by
    eye after reassembly.
    """
    prefix = f"{line_no:010d} ".encode("ascii")
    body_len = max(length - len(prefix) - 1, 0)
    body = bytes(rng.choice(ALPHABET) for _ in range(body_len))
    return (prefix + body)[: length - 1] + b"\n"


def generate_synthetic_dataset(
    output_path: str,
    num_lines: int,
    min_length: int,
    max_length: int,
    seed: int,
    final_newline: bool = True,
) -> int:
    """
    Generate a synthetic line file.

    Streams output line-by-line to avoid memory issues.

    Returns:
        Total number of bytes written.
    """
    rng = random.Random(seed)
    total_bytes = 0

    with open(output_path, "wb", buffering=BUFFER_SIZE) as f:
        for i in range(num_lines):
            line = generate_line(i, rng.randint(min_length, max_length), rng)
            if not final_newline and i == num_lines - 1:
                line = line[:-1]
            f.write(line)
            total_bytes += len(line)

            # Progress indicator every million lines
            if (i + 1) % 1_000_000 == 0:
                print(f"  Generated {i + 1}/{num_lines} lines...", file=sys.stderr)

    return total_bytes


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate synthetic line-delimited dataset.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # ~1GB of 40-200 byte lines
  python generate_synthetic_lines.py --out data/synthetic.txt --lines 8000000

  # Few very long lines, no trailing newline
  python generate_synthetic_lines.py --out data/long.txt --lines 100 \\
      --min-length 50000 --max-length 200000 --no-final-newline
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--lines",
        type=int,
        default=1_000_000,
        help="Number of lines (default: 1000000)",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=40,
        help="Minimum line length in bytes, newline included (default: 40)",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=200,
        help="Maximum line length in bytes, newline included (default: 200)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )
    parser.add_argument(
        "--no-final-newline",
        action="store_true",
        help="Leave the last line without a terminator",
    )

    args = parser.parse_args()

    if args.min_length < 12:
        parser.error("--min-length must be at least 12")
    if args.max_length < args.min_length:
        parser.error("--max-length must be at least --min-length")

    approx_size_mb = args.lines * (args.min_length + args.max_length) / 2 / (1024 * 1024)
    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Lines: {args.lines:,}", file=sys.stderr)
    print(f"Estimated size: ~{approx_size_mb:.1f} MB", file=sys.stderr)

    total_bytes = generate_synthetic_dataset(
        output_path=args.out,
        num_lines=args.lines,
        min_length=args.min_length,
        max_length=args.max_length,
        seed=args.seed,
        final_newline=not args.no_final_newline,
    )

    print(f"Done! Wrote {total_bytes:,} bytes to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
