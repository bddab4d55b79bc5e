"""The commands understood by the interactive Pokedex."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field

from pokedex.client import PokeAPIClient
from pokedex.models import LocationPage, Pokemon


class CommandError(Exception):
    """Raised when a command cannot be carried out as asked."""


@dataclass
class Config:
    """State shared between commands during a session."""

    client: PokeAPIClient
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command, its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def _single_arg(args: tuple[str, ...], message: str) -> str:
    if len(args) != 1:
        raise CommandError(message)
    return args[0]


def command_help(cfg: Config, *args: str) -> None:
    """Print a usage summary of every command."""
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a Pokeball; stronger Pokemon are harder to catch."""
    name = _single_arg(args, "you must provide a pokemon name")
    pokemon = cfg.client.get_pokemon(name)
    if pokemon.base_experience <= 0:
        raise CommandError(f"{pokemon.name} cannot be caught")

    roll = cfg.rng.randrange(pokemon.base_experience)

    print(f"Throwing a Pokeball at {pokemon.name}...")
    if roll > 40:
        print(f"{pokemon.name} escaped!")
        return

    print(f"{pokemon.name} was caught!")
    print("You may now inspect it with the inspect command.")
    cfg.caught_pokemon[pokemon.name] = pokemon


def command_inspect(cfg: Config, *args: str) -> None:
    """Show the details of a caught Pokemon."""
    name = _single_arg(args, "you must provide a pokemon name")
    pokemon = cfg.caught_pokemon.get(name)
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")

    print("Name:", pokemon.name)
    print("Height:", pokemon.height)
    print("Weight:", pokemon.weight)
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.stat.name}: {stat.base_stat}")
    print("Types:")
    for type_slot in pokemon.types:
        print("  -", type_slot.type.name)


def command_explore(cfg: Config, *args: str) -> None:
    """List the Pokemon found in a location area."""
    name = _single_arg(args, "you must provide a location name")
    location = cfg.client.get_location(name)
    print(f"Exploring {location.name}...")
    print("Found Pokemon: ")
    for encounter in location.pokemon_encounters:
        print(f" - {encounter.pokemon.name}")


def _show_page(cfg: Config, page: LocationPage) -> None:
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for result in page.results:
        print(result.name)


def command_map(cfg: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_page(cfg, cfg.client.list_locations(cfg.next_locations_url))


def command_mapb(cfg: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.client.list_locations(cfg.prev_locations_url))


def command_pokedex(cfg: Config, *args: str) -> None:
    """List every caught Pokemon."""
    print("Your Pokedex:")
    for pokemon in cfg.caught_pokemon.values():
        print(f" - {pokemon.name}")


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye, release the client and end the program."""
    print("Closing the Pokedex... Goodbye!")
    try:
        cfg.client.close()
    finally:
        raise SystemExit(0)


def get_commands() -> dict[str, Command]:
    """Return the available commands keyed by the word that invokes them."""
    return {
        "help": Command("help", "Displays a help message", command_help),
        "catch": Command("catch <pokemon_name>", "Attempt to catch a pokemon", command_catch),
        "inspect": Command(
            "inspect <pokemon_name>", "View details about a caught Pokemon", command_inspect
        ),
        "explore": Command("explore <location_name>", "Explore a location", command_explore),
        "map": Command("map", "Get the next page of locations", command_map),
        "mapb": Command("mapb", "Get the previous page of locations", command_mapb),
        "pokedex": Command("pokedex", "See all the pokemon you've caught", command_pokedex),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
    }