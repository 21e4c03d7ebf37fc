"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from sorcery.game import Game


@dataclass
class InitOptions:
    """Settings taken from the command line."""

    testing_mode: bool = False
    graphics_mode: bool = False
    deck1: str = "default.deck"
    deck2: str = "default.deck"
    init_file: str = ""


_VALUE_FLAGS = {"-deck1": "deck1", "-deck2": "deck2", "-init": "init_file"}
_SWITCHES = {"-testing": "testing_mode", "-graphics": "graphics_mode"}


def parse_arguments(argv: Sequence[str]) -> InitOptions:
    """Build options from the arguments; raises ValueError on bad ones."""
    options = InitOptions()
    args = iter(argv)
    for arg in args:
        if arg in _VALUE_FLAGS:
            value = next(args, None)
            if value is None:
                raise ValueError(f"Missing argument for {arg}")
            setattr(options, _VALUE_FLAGS[arg], value)
        elif arg in _SWITCHES:
            setattr(options, _SWITCHES[arg], True)
        else:
            raise ValueError(f"Unknown argument: {arg}")
    return options


def main(argv: Sequence[str] | None = None) -> int:
    """Run a game from the command line; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_arguments(argv)
        game = Game(options.testing_mode, options.graphics_mode,
                    options.deck1, options.deck2)
        game.init(options.init_file)
        game.start()
    except Exception as err:  # noqa: BLE001 - every failure ends the program
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())