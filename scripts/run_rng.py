"""Command line harness for seeded rnglib draw sessions."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "rng_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from rnglib import ALGORITHM_MAPPING_NAMES, DrawConfig, run_draws


def _parse_seed(value: str):
    """Parse ``10``, ``0xA2B94D10`` or a ``first,second`` pair for two-register seeds."""

    if not value:
        raise argparse.ArgumentTypeError("Seed cannot be empty.")
    if value.strip().lower() in {"clock", "none"}:
        return None

    parts = [part.strip() for part in value.split(",")]
    try:
        numbers = tuple(int(part, 0) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be an integer (decimal or 0x-prefixed hex), received '{value}'."
        ) from exc

    if any(number < 0 for number in numbers):
        raise argparse.ArgumentTypeError("Seeds must be non-negative.")
    if len(numbers) == 1:
        return numbers[0]
    if len(numbers) == 2:
        return numbers
    raise argparse.ArgumentTypeError("Expected one seed or a 'first,second' pair.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a reproducible rnglib draw session")
    parser.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHM_MAPPING_NAMES),
        default="mt",
        help="Generator algorithm backing the session",
    )
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=10,
        help="Seed (decimal or 0x hex; 'a,b' for xorshift128plus; 'clock' for a time seed)",
    )
    parser.add_argument("--draws", type=int, default=8, help="Number of ranged integer draws")
    parser.add_argument("--low", type=int, default=0, help="Lower bound of the draw range")
    parser.add_argument("--high", type=int, default=10, help="Upper bound of the draw range")
    parser.add_argument(
        "--inclusive",
        action="store_true",
        help="Treat --high as part of the range",
    )
    parser.add_argument("--floats", type=int, default=4, help="Number of unit-interval floats")
    parser.add_argument("--bytes", dest="byte_count", type=int, default=8, help="Random bytes to emit")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "rng_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if isinstance(args.seed, tuple) and args.algorithm != "xorshift128plus":
        parser.error("A 'first,second' seed pair is only valid for xorshift128plus.")
    if isinstance(args.seed, int) and args.algorithm == "xorshift128plus":
        args.seed = (args.seed >> 64, args.seed & ((1 << 64) - 1))

    cfg = DrawConfig(
        algorithm=args.algorithm,
        seed=args.seed,
        draws=args.draws,
        low=args.low,
        high=args.high,
        inclusive=args.inclusive,
        floats=args.floats,
        byte_count=args.byte_count,
    )
    try:
        result = run_draws(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
