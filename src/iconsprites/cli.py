from __future__ import annotations

import argparse
from pathlib import Path

from .coordinator import SpriteGenerator, default_worker_count
from .errors import OptionsError
from .options import load_options


DEFAULT_CONFIG = Path("sprites.json")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    default_workers = default_worker_count()
    parser = argparse.ArgumentParser(description="Pack icon folders into sprite sheets with SCSS and TypeScript bindings")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG, help="JSON options file")
    parser.add_argument("--workers", type=int, default=default_workers, help=f"Packing worker threads (default: {default_workers})")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if not args.config.is_file():
        raise SystemExit(f"error: missing config file: {args.config}")

    try:
        options = load_options(args.config)
    except OptionsError as e:
        raise SystemExit("error: " + "\nerror: ".join(e.problems)) from e

    SpriteGenerator(options, workers=args.workers).generate()


if __name__ == "__main__":
    main()
