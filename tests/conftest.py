import pytest

from mindustry_mods.domain.mod import Mod


def make_mod_data(**overrides):
    data = {
        "name": "Anuken/ExampleMod",
        "stars": 3,
        "date_tt": 1577836800123.0,
        "desc": "An example mod.",
        "link": "https://github.com/Anuken/ExampleMod",
        "repo": "Anuken/ExampleMod",
        "wiki": None,
        "delta_ago": "2 days",
        "icon_raw": "icon.png",
        "contents": ["content", "blocks"],
        "assets": ["sprites"],
    }
    data.update(overrides)
    return data


def make_mod(**overrides):
    return Mod.from_dict(make_mod_data(**overrides))


@pytest.fixture
def mod():
    return make_mod()
