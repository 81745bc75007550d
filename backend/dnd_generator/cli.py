from __future__ import annotations

import argparse
import json
import random
from typing import Sequence

from dnd_generator.generator import CLASSES, RACES, generate_character


def configure_generate_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", type=int, default=None, help="Seed for repeatable output.")
    parser.add_argument("--count", type=int, default=1, help="Number of characters to generate (default 1).")


def configure_options_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--kind",
        choices=["races", "classes"],
        default=None,
        help="Only list races or classes (default: both).",
    )


def generate_from_parsed(args: argparse.Namespace) -> None:
    if args.count < 1:
        raise SystemExit("--count must be at least 1")
    rng = random.Random(args.seed)
    characters = [generate_character(rng) for _ in range(args.count)]
    payload = [
        {**character.to_dict(), "modifiers": character.modifiers()}
        for character in characters
    ]
    print(json.dumps(payload, indent=2))


def options_from_parsed(args: argparse.Namespace) -> None:
    if args.kind in (None, "races"):
        print("Races: " + ", ".join(RACES))
    if args.kind in (None, "classes"):
        print("Classes: " + ", ".join(CLASSES))


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="D&D character generator CLI.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Print random characters as JSON")
    configure_generate_parser(generate_parser)

    options_parser = subparsers.add_parser("options", help="List available races and classes")
    configure_options_parser(options_parser)

    opts = parser.parse_args(args)

    if opts.command == "generate":
        generate_from_parsed(opts)
    elif opts.command == "options":
        options_from_parsed(opts)
    else:
        parser.error(f"Unknown command {opts.command}")


if __name__ == "__main__":
    main()
