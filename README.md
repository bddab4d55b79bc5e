# pokedex

An interactive command-line Pokedex. You can page through location areas and
explore them for Pokemon. You can try to catch what you find and inspect the
ones you have caught. Data comes from the public PokeAPI over HTTP. Responses
are cached in memory for five minutes, so moving back and forth between pages
does not fetch them again.

The package needs only the Python standard library (3.10 or later).

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedex
```

The prompt is `Pokedex > `. Each line is lower-cased and split on whitespace.
The first word is the command and the remaining words are its arguments.
Empty lines are ignored. An unrecognised command prints `Unknown command`.

| Command                   | What it does                          |
|---------------------------|---------------------------------------|
| `help`                    | Displays a help message               |
| `map`                     | Get the next page of locations        |
| `mapb`                    | Get the previous page of locations    |
| `explore <location_name>` | Explore a location                    |
| `catch <pokemon_name>`    | Attempt to catch a pokemon            |
| `inspect <pokemon_name>`  | View details about a caught Pokemon   |
| `pokedex`                 | See all the pokemon you've caught     |
| `exit`                    | Exit the Pokedex                      |

The session ends on `exit` or when input runs out, for example on end-of-file.

An example session. The names and numbers shown come from the API:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
 - tentacool
 - ...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
You may now inspect it with the inspect command.
Pokedex > inspect tentacool
Name: tentacool
Height: 9
Weight: 455
Stats:
  -hp: 40
  ...
Types:
  - water
  - poison
```

Behaviour worth knowing:

- `catch` draws a random number below the Pokemon's base experience. The
  Pokemon escapes if the number is above 40. Pokemon with more base experience
  are therefore harder to catch. A Pokemon whose base experience is zero or
  less cannot be caught.
- `mapb` before any page with a previous link reports `you're on the first page`.
- `inspect` works only for Pokemon caught in the current session.
- `explore`, `catch` and `inspect` take exactly one name. With any other number
  of arguments they report that a name must be provided.
- A failed request or an unreadable response is printed and the prompt carries on.

## Using it from Python

```python
from pokedex.client import PokeAPIClient
from pokedex.commands import Config, command_map, get_commands
from pokedex.repl import clean_input, start_repl

with PokeAPIClient(timeout=5.0, cache_interval=300.0) as client:
    cfg = Config(client=client)
    command_map(cfg)          # prints the first page of location areas
    start_repl(cfg)           # reads commands from standard input
```

- `pokedex.client.PokeAPIClient` has `list_locations(page_url=None)`,
  `get_location(name)` and `get_pokemon(name)`. These return
  `LocationPage`, `Location` and `Pokemon` objects from `pokedex.models`.
  Raw responses are cached by URL. Failures raise `PokeAPIError`.
  Call `close()` when you are done, or use the client as a context manager.
- `pokedex.commands.Config` holds the client, the caught Pokemon, the current
  paging URLs and a `random.Random` used by `catch`. You can seed that random
  generator to get repeatable catches. Commands raise `CommandError` when
  they cannot do what was asked. `command_exit` raises `SystemExit(0)`.
- `pokedex.repl.start_repl(cfg, stream=None)` reads lines from `stream`, or
  from standard input when no stream is given, until the stream is exhausted.
- `pokedex.cache.Cache(interval)` is a thread-safe store of byte values. The
  interval is given in seconds and must be positive. A background thread removes
  entries older than the interval. `get` returns `None` for a missing key.
  `close()` stops that thread and keeps the stored entries.

## Limitations

- Caught Pokemon are kept only in memory. Nothing is saved between sessions.
- The response cache is in memory as well. It is lost when the program exits.

## Running the tests

```
pip install .[test]
pytest
```