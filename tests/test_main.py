import pytest

from gridsnake.main import config_from_args, main, parse_args


def test_flags_map_onto_config():
    cfg = config_from_args(parse_args([
        "headless", "--grid-size", "8", "--tick-ms", "50", "--seed", "2",
        "--games", "3", "--no-log", "--log-level", "debug",
    ]))
    assert cfg.grid_size == 8
    assert cfg.tick_ms == 50
    assert cfg.tick_seconds == pytest.approx(0.05)
    assert cfg.seed == 2
    assert cfg.games == 3
    assert cfg.log_dir is None
    assert cfg.log_level == "DEBUG"

def test_defaults_follow_classic_game():
    cfg = config_from_args(parse_args(["play"]))
    assert cfg.grid_size == 30
    assert cfg.tick_ms == 200
    assert cfg.origin == (0, 0)

@pytest.mark.parametrize("flag", ["--grid-size", "--tick-ms"])
def test_non_positive_values_rejected(flag):
    with pytest.raises(SystemExit):
        config_from_args(parse_args(["headless", flag, "0"]))

def test_unknown_mode_rejected():
    with pytest.raises(SystemExit):
        parse_args(["fly"])

def test_main_headless_smoke():
    main(["headless", "--grid-size", "3", "--tick-ms", "5", "--seed", "1", "--no-log"])

def test_checkpoint_flags():
    cfg = config_from_args(parse_args(["play", "--checkpoint-dir", "saves", "--resume", "slot1"]))
    assert cfg.checkpoint_dir == "saves"
    assert cfg.resume == "slot1"
    assert config_from_args(parse_args(["play"])).resume is None
