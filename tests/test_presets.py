import numpy as np
import pytest

from galaxy.generator import generate_galaxy
from tools.presets import (
    GENERATOR_KEYS, PRESETS, get_preset_by_index, get_preset_config, get_preset_list,
    print_preset_menu,
)


@pytest.mark.parametrize("key", sorted(PRESETS))
def test_every_preset_generates(key):
    cfg = get_preset_config(key)
    assert set(cfg) == set(GENERATOR_KEYS)

    bodies = generate_galaxy((0.0, 0.0), mass=10.0, G=1.0, rng=np.random.default_rng(0), **cfg)
    assert 0 < len(bodies) <= cfg["total_count"]


def test_preset_list_is_grouped_by_category():
    categories = [preset["category"] for _, preset in get_preset_list()]
    order = ["CLASSIC", "ARTISTIC", "CHAOS"]
    assert categories == sorted(categories, key=order.index)


def test_preset_by_index():
    key, preset = get_preset_by_index(0)
    assert key == get_preset_list()[0][0]
    assert preset is PRESETS[key]
    assert get_preset_by_index(len(PRESETS)) == (None, None)
    assert get_preset_by_index(-1) == (None, None)


def test_unknown_preset_raises():
    with pytest.raises(KeyError):
        get_preset_config("andromeda")


def test_menu_lists_every_preset(capsys):
    print_preset_menu()
    out = capsys.readouterr().out
    for preset in PRESETS.values():
        assert preset["name"] in out
