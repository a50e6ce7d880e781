"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys

from .engine import Game, StoryEnded

TITLE = "=== Terminal Survival ==="


def main(argv: list[str] | None = None) -> int:
    """Play the story from the beginning."""
    parser = argparse.ArgumentParser(prog="ashfall", description="A text survival story.")
    parser.parse_args(argv)

    print(TITLE)
    try:
        Game().run_node(0)
    except StoryEnded:
        return 0
    except KeyError as error:
        print(f"ashfall: {error.args[0]}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())