"""Print a random 24-bit color swatch with its hex code."""

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from rnglib import random


def swatch(r: int, g: int, b: int) -> str:
    """Four spaces on an ANSI true-color background, then ``#rrggbb``."""
    return f"\x1b[48;2;{r};{g};{b}m    \x1b[0m #{r:02x}{g:02x}{b:02x}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a random color swatch")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=None,
        help="Mersenne Twister seed (decimal or 0x hex); the clock is used when omitted",
    )
    args = parser.parse_args()

    rng = random(args.seed)
    r = rng.randrange(range(0, 256))
    g = rng.randrange(range(0, 256))
    b = rng.randrange(range(0, 256))
    print(swatch(r, g, b))


if __name__ == "__main__":
    main()
