from unittest.mock import patch

from wrapsnake.config import Config
from wrapsnake.main import build_config, main, parse_args


def test_default_arguments_match_default_config():
    assert build_config(parse_args([])) == Config()


def test_arguments_reach_the_config():
    args = parse_args([
        "--width", "12", "--height", "9", "--tick-rate", "4",
        "--cell-size", "16", "--fps", "30", "--seed", "77",
    ])
    assert build_config(args) == Config(
        width=12, height=9, tick_rate=4, cell_size=16, render_fps=30, seed=77,
    )


def test_invalid_settings_exit_before_opening_a_window():
    assert main(["--width", "1"]) == 2


def test_missing_entropy_exits_with_an_error():
    with patch("wrapsnake.game.os.urandom", side_effect=OSError("no entropy")):
        assert main([]) == 1
