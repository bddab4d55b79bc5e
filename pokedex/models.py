"""Typed views of the location and Pokemon documents served by the API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string or null")
    return value


def _object(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    return _mapping(value)


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it refers to."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _mapping(data)
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        data = _mapping(data)
        return cls(
            count=_int(data, "count"),
            next=_optional_str(data, "next"),
            previous=_optional_str(data, "previous"),
            results=[NamedResource.from_dict(r) for r in _list(data, "results")],
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokemon that can be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        data = _mapping(data)
        return cls(pokemon=NamedResource.from_dict(_object(data, "pokemon")))


@dataclass(frozen=True)
class Location:
    """A location area and the Pokemon encountered there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        data = _mapping(data)
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(_object(data, "location")),
            pokemon_encounters=[
                PokemonEncounter.from_dict(e) for e in _list(data, "pokemon_encounters")
            ],
        )


@dataclass(frozen=True)
class Stat:
    """A base stat of a Pokemon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> Stat:
        data = _mapping(data)
        return cls(
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
            stat=NamedResource.from_dict(_object(data, "stat")),
        )


@dataclass(frozen=True)
class TypeSlot:
    """One of a Pokemon's types and the slot it occupies."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> TypeSlot:
        data = _mapping(data)
        return cls(
            slot=_int(data, "slot"),
            type=NamedResource.from_dict(_object(data, "type")),
        )


@dataclass(frozen=True)
class Ability:
    """An ability a Pokemon may have."""

    ability: NamedResource = field(default_factory=NamedResource)
    is_hidden: bool = False
    slot: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Ability:
        data = _mapping(data)
        return cls(
            ability=NamedResource.from_dict(_object(data, "ability")),
            is_hidden=_bool(data, "is_hidden"),
            slot=_int(data, "slot"),
        )


@dataclass(frozen=True)
class Pokemon:
    """A Pokemon's core details."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    location_area_encounters: str = ""
    species: NamedResource = field(default_factory=NamedResource)
    forms: list[NamedResource] = field(default_factory=list)
    abilities: list[Ability] = field(default_factory=list)
    stats: list[Stat] = field(default_factory=list)
    types: list[TypeSlot] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _mapping(data)
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            order=_int(data, "order"),
            is_default=_bool(data, "is_default"),
            location_area_encounters=_str(data, "location_area_encounters"),
            species=NamedResource.from_dict(_object(data, "species")),
            forms=[NamedResource.from_dict(f) for f in _list(data, "forms")],
            abilities=[Ability.from_dict(a) for a in _list(data, "abilities")],
            stats=[Stat.from_dict(s) for s in _list(data, "stats")],
            types=[TypeSlot.from_dict(t) for t in _list(data, "types")],
        )