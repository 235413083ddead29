"""Command line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import is_sorted, sort_stacks
from pushswap.stacks import Stacks

ERROR_STATUS = 6


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line that sorts the arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return ERROR_STATUS
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        sort_stacks(stacks, len(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())