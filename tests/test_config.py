import pytest

from wrapsnake.config import CFG, Config


def test_defaults():
    assert (CFG.width, CFG.height) == (40, 30)
    assert CFG.tick_rate == 8
    assert CFG.cell_size == 42
    assert CFG.seed is None
    assert CFG.screen_size == (1680, 1260)


def test_screen_size_follows_grid():
    assert Config(width=10, height=5, cell_size=20).screen_size == (200, 100)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 1},
        {"height": 0},
        {"tick_rate": 0},
        {"cell_size": -1},
        {"render_fps": 0},
    ],
)
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs)
