"""
Command line entry point: evaluate one algebra operation.

    python -m hypernum hamilton mul 0,1,0,0 0,0,1,0
    python -m hypernum perplex inv 2,2
    python -m hypernum complex neg -- -1,2     (use -- before negative values)
    python -m hypernum cockle random --seed 7   (sampled value, HYPERNUM_SEED)
"""

import argparse
import sys

from hypernum.core import ALGEBRAS, DomainError, Rank1Number, Rank2Number, working_precision
from hypernum.transforms import (
    commutator,
    cross_ratio,
    cross_ratio_left,
    cross_ratio_right,
    is_nilpotent,
    mobius,
    mobius_left,
    mobius_right,
)
from hypernum.utils.config import get_settings, load_dotenv
from hypernum.utils.sampling import make_rng, random_value

# name -> (number of operands, function)
OPERATIONS = {
    "add": (2, lambda x, y: x + y),
    "sub": (2, lambda x, y: x - y),
    "mul": (2, lambda x, y: x * y),
    "neg": (1, lambda x: -x),
    "conj": (1, lambda x: x.conj()),
    "quad": (1, lambda x: x.quad()),
    "inv": (1, lambda x: x.inv()),
    "quo": (2, lambda x, y: x.quo(y)),
    "quo-left": (2, lambda x, y: x.quo_left(y)),
    "quo-right": (2, lambda x, y: x.quo_right(y)),
    "commutator": (2, commutator),
    "is-zero-div": (1, lambda x: x.is_zero_divisor()),
    "cross-ratio": (4, cross_ratio),
    "cross-ratio-left": (4, cross_ratio_left),
    "cross-ratio-right": (4, cross_ratio_right),
    "mobius": (5, mobius),
    "mobius-left": (5, mobius_left),
    "mobius-right": (5, mobius_right),
}
RANK1_ONLY = {"quo"}
RANK2_ONLY = {"quo-left", "quo-right"}


def build_parser(settings):
    parser = argparse.ArgumentParser(prog="hypernum", description="Hypercomplex number calculator")
    parser.add_argument("algebra", choices=sorted(ALGEBRAS))
    parser.add_argument("operation", choices=sorted(list(OPERATIONS) + ["is-nilpotent", "random"]))
    parser.add_argument("values", nargs="*", help="Comma-separated components, e.g. 3,4 or 0,1,0,0")
    parser.add_argument("--precision", type=int, default=settings.precision, help="Mantissa bits (HYPERNUM_PRECISION)")
    parser.add_argument("--steps", type=int, default=settings.nilpotent_steps, help="Power limit for is-nilpotent (HYPERNUM_NILPOTENT_STEPS)")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Seed for the random operation (HYPERNUM_SEED)")
    parser.add_argument("--verbose", action="store_true", help="Print effective config before the result")
    parser.add_argument("--dry-run", action="store_true", help="Print effective config and exit")
    return parser


def parse_value(cls, text):
    """Parse 'a,b[,c,d]' into a cls value."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != cls.DIMENSION:
        raise ValueError(f"{cls.__name__} needs {cls.DIMENSION} components, got {len(parts)} in {text!r}")
    return cls(*parts)


def main(argv=None):
    """Run one operation and print its result; returns the exit status."""
    load_dotenv()
    settings = get_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    cls = ALGEBRAS[args.algebra]

    if args.precision <= 0:
        parser.error(f"--precision must be positive, got {args.precision}")
    if args.steps < 0:
        parser.error(f"--steps must be non-negative, got {args.steps}")
    if args.seed < 0:
        parser.error(f"--seed must be non-negative, got {args.seed}")
    if args.operation in RANK1_ONLY and not issubclass(cls, Rank1Number):
        parser.error(f"{args.operation} is only defined for rank 1 algebras; use quo-left or quo-right")
    if args.operation in RANK2_ONLY and not issubclass(cls, Rank2Number):
        parser.error(f"{args.operation} is only defined for rank 2 algebras; use quo")

    if args.operation == "is-nilpotent":
        arity, func = 1, lambda x: is_nilpotent(x, args.steps)
    elif args.operation == "random":
        arity, func = 0, lambda: random_value(cls, make_rng(args.seed))
    else:
        arity, func = OPERATIONS[args.operation]

    if args.verbose or args.dry_run:
        print("Config:")
        print(f"  algebra={cls.__name__} operation={args.operation}")
        print(f"  precision={args.precision} steps={args.steps} seed={args.seed}")
    if args.dry_run:
        return 0

    if len(args.values) != arity:
        parser.error(f"{args.operation} takes {arity} value(s), got {len(args.values)}")

    with working_precision(args.precision):
        try:
            operands = [parse_value(cls, text) for text in args.values]
        except ValueError as e:
            parser.error(str(e))
        try:
            result = func(*operands)
        except DomainError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
