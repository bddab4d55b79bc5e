import pytest

from pokedex.models import (
    Ability,
    Location,
    LocationPage,
    NamedResource,
    Pokemon,
    PokemonEncounter,
    Stat,
    TypeSlot,
)

PAGE = {
    "count": 1036,
    "next": "https://pokeapi.co/api/v2/location-area?offset=20&limit=20",
    "previous": None,
    "results": [
        {"name": "canalave-city-area", "url": "https://pokeapi.co/api/v2/location-area/1/"},
        {"name": "eterna-city-area", "url": "https://pokeapi.co/api/v2/location-area/2/"},
    ],
}

LOCATION = {
    "id": 1,
    "name": "canalave-city-area",
    "game_index": 1,
    "location": {"name": "canalave-city", "url": "https://pokeapi.co/api/v2/location/1/"},
    "encounter_method_rates": [],
    "pokemon_encounters": [
        {"pokemon": {"name": "tentacool", "url": "https://pokeapi.co/api/v2/pokemon/72/"},
         "version_details": []},
        {"pokemon": {"name": "tentacruel", "url": "https://pokeapi.co/api/v2/pokemon/73/"},
         "version_details": []},
    ],
}

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "order": 35,
    "is_default": True,
    "location_area_encounters": "https://pokeapi.co/api/v2/pokemon/25/encounters",
    "species": {"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon-species/25/"},
    "forms": [{"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon-form/25/"}],
    "abilities": [
        {"ability": {"name": "static", "url": "u"}, "is_hidden": False, "slot": 1},
        {"ability": {"name": "lightning-rod", "url": "u"}, "is_hidden": True, "slot": 3},
    ],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u"}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": "u"}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "u"}}],
    "sprites": {"front_default": "x"},
    "moves": [],
}


def test_named_resource_from_dict():
    res = NamedResource.from_dict({"name": "hp", "url": "https://pokeapi.co/api/v2/stat/1/"})
    assert res == NamedResource("hp", "https://pokeapi.co/api/v2/stat/1/")


def test_location_page_fields():
    page = LocationPage.from_dict(PAGE)
    assert page.count == PAGE["count"]
    assert page.next == PAGE["next"]
    assert page.previous is None
    assert [r.name for r in page.results] == ["canalave-city-area", "eterna-city-area"]
    assert page.results[1].url == PAGE["results"][1]["url"]


def test_location_page_missing_fields_default():
    page = LocationPage.from_dict({})
    assert page == LocationPage(count=0, next=None, previous=None, results=[])


def test_location_encounters_in_order():
    loc = Location.from_dict(LOCATION)
    assert loc.name == "canalave-city-area"
    assert loc.location.name == "canalave-city"
    assert [e.pokemon.name for e in loc.pokemon_encounters] == ["tentacool", "tentacruel"]


def test_pokemon_encounter_from_dict():
    enc = PokemonEncounter.from_dict(LOCATION["pokemon_encounters"][0])
    assert enc.pokemon == NamedResource.from_dict(LOCATION["pokemon_encounters"][0]["pokemon"])


def test_pokemon_core_fields():
    mon = Pokemon.from_dict(PIKACHU)
    assert mon.name == "pikachu"
    assert mon.base_experience == PIKACHU["base_experience"]
    assert mon.height == PIKACHU["height"]
    assert mon.weight == PIKACHU["weight"]
    assert mon.is_default is True
    assert mon.species.name == "pikachu"
    assert [(s.stat.name, s.base_stat) for s in mon.stats] == [("hp", 35), ("speed", 90)]
    assert [t.type.name for t in mon.types] == ["electric"]
    assert [a.is_hidden for a in mon.abilities] == [False, True]


def test_stat_type_ability_from_dict():
    assert Stat.from_dict(PIKACHU["stats"][1]).effort == PIKACHU["stats"][1]["effort"]
    assert TypeSlot.from_dict(PIKACHU["types"][0]).slot == PIKACHU["types"][0]["slot"]
    assert Ability.from_dict(PIKACHU["abilities"][1]).ability.name == "lightning-rod"


def test_null_fields_take_zero_values():
    mon = Pokemon.from_dict({"name": "missingno", "height": None, "stats": None})
    assert mon == Pokemon(name="missingno")


@pytest.mark.parametrize(
    "cls, data",
    [
        (Pokemon, {"base_experience": "lots"}),
        (Pokemon, {"height": True}),
        (Pokemon, {"stats": {"hp": 1}}),
        (Pokemon, {"is_default": 1}),
        (LocationPage, {"next": 5}),
        (Location, {"pokemon_encounters": [5]}),
        (NamedResource, {"name": 7}),
        (NamedResource, ["name"]),
    ],
)
def test_malformed_documents_rejected(cls, data):
    with pytest.raises(ValueError):
        cls.from_dict(data)