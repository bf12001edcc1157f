"""Entry point for playing Tank Assault."""

import argparse
from typing import Optional, Sequence

from tank_assault import run_pygame
from tank_assault.core.levels import DEFAULT_LEVELS, load_catalog


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Tank Assault top-down arcade battle")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print additional debug information to the console",
    )
    parser.add_argument("--level", type=int, default=1, help="level to start on")
    parser.add_argument("--levels", metavar="PATH", help="load a custom level catalog (JSON)")
    parser.add_argument("--mute", action="store_true", help="disable audio")
    args = parser.parse_args(argv)

    catalog = None
    if args.levels:
        try:
            catalog = load_catalog(args.levels)
        except (OSError, ValueError) as exc:
            parser.error(f"--levels: {exc}")
    total = len(catalog if catalog is not None else DEFAULT_LEVELS)
    if not 1 <= args.level <= total:
        parser.error(f"--level must be between 1 and {total}")
    run_pygame(catalog=catalog, start_level=args.level, debug=args.debug, muted=args.mute)


if __name__ == "__main__":
    main()
