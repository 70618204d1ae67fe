"""
Command-line entrypoint for the feed viewer.

- Parses CLI args and config
- Loads the cats and dogs feeds (HTTP, or local files when given)
- Prints the two-section list

Feed failures never abort the run; they only leave a section empty.
"""
from __future__ import annotations
import asyncio, sys

from .config import parse_args
from .pipeline import run_feeds

async def run(args) -> str:
    print(f"""
        ====== InstaFeeds ======
        Base URL       : {args.base_url}
        Cats           : {args.cats_file or args.cats_path}
        Dogs           : {args.dogs_file or args.dogs_path}
        Retries        : {args.retries}
        Timeouts (s)   : connect={args.connect_timeout} read={args.read_timeout}
        ========================
    """, file=sys.stderr)
    screen = await run_feeds(
        base_url=args.base_url,
        cats_path=args.cats_path,
        dogs_path=args.dogs_path,
        retries=args.retries,
        connect_timeout=args.connect_timeout,
        read_timeout=args.read_timeout,
        cats_file=args.cats_file,
        dogs_file=args.dogs_file,
        assets_dir=args.assets_dir,
    )
    return screen.render()

def main(argv=None) -> None:
    args = parse_args(argv)
    try:
        print(asyncio.run(run(args)))
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
        sys.exit(130)
