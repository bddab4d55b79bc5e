"""HTTP client for the Pokemon API, with a response cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable
from typing import Any, TypeVar

from pokedex.cache import Cache
from pokedex.models import Location, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

_T = TypeVar("_T")


class PokeAPIError(Exception):
    """Raised when a request fails or its response cannot be understood."""


class PokeAPIClient:
    """Fetches locations and Pokemon, caching raw responses by URL."""

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        base_url: str = BASE_URL,
    ) -> None:
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self._cache = Cache(cache_interval)

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page if no URL is given."""
        url = page_url if page_url is not None else f"{self.base_url}/location-area"
        return self._fetch(url, LocationPage.from_dict)

    def get_location(self, location_name: str) -> Location:
        """Return the location area with the given name."""
        url = f"{self.base_url}/location-area/{urllib.parse.quote(location_name, safe='')}"
        return self._fetch(url, Location.from_dict)

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the Pokemon with the given name."""
        url = f"{self.base_url}/pokemon/{urllib.parse.quote(pokemon_name, safe='')}"
        return self._fetch(url, Pokemon.from_dict)

    def close(self) -> None:
        """Release the cache's background worker."""
        self._cache.close()

    def __enter__(self) -> PokeAPIClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(self, url: str, parse: Callable[[Any], _T]) -> _T:
        cached = self._cache.get(url)
        if cached is not None:
            return self._parse(url, cached, parse)

        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as response:
                body = response.read()
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise PokeAPIError(f"request to {url} failed: {exc}") from exc

        result = self._parse(url, body, parse)
        self._cache.add(url, body)
        return result

    @staticmethod
    def _parse(url: str, body: bytes, parse: Callable[[Any], _T]) -> _T:
        try:
            return parse(json.loads(body))
        except ValueError as exc:
            raise PokeAPIError(f"invalid response from {url}: {exc}") from exc