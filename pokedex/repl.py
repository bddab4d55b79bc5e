"""The interactive prompt and the program's entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from pokedex.client import PokeAPIClient, PokeAPIError
from pokedex.commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config, stream: TextIO | None = None) -> None:
    """Read commands line by line from ``stream`` until it is exhausted."""
    if stream is None:
        stream = sys.stdin
    commands = get_commands()
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            return

        words = clean_input(line)
        if not words:
            continue

        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, PokeAPIError) as exc:
            print(exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Pokedex prompt on standard input."""
    client = PokeAPIClient(timeout=5.0, cache_interval=300.0)
    try:
        start_repl(Config(client=client))
    finally:
        client.close()
    return 0