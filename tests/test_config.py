"""Tests for session configuration and layout presets."""

import pytest

from breakout.config import SessionConfig, LAYOUT_PRESETS, get_config, list_configs
from breakout.session import new_session
from breakout import layout


def test_defaults_match_layout():
    cfg = SessionConfig()
    assert (cfg.width, cfg.height) == (layout.WIDTH, layout.HEIGHT)
    assert cfg.ball_speed == layout.BALL_SPEED
    assert cfg.speed_increment == 0.005
    assert cfg.max_speed == 1.0
    assert cfg.brick_columns() == 17
    assert cfg.brick_count() == 119


def test_all_presets_build_valid_sessions():
    for key in list_configs():
        cfg = get_config(key)
        session = new_session(cfg)
        assert len(session.bricks) == cfg.brick_count(), f"{key}: brick count mismatch"
        assert "label" in LAYOUT_PRESETS[key]


def test_preset_overrides():
    cfg = get_config("compact", brick_rows=1)
    assert cfg.width == 400
    assert cfg.brick_rows == 1


def test_unknown_preset_raises():
    with pytest.raises(KeyError):
        get_config("nonexistent")


@pytest.mark.parametrize("overrides", [
    {"width": 0},
    {"ball_r": 0},
    {"paddle_w": -5},
    {"paddle_w": 2000},
    {"paddle_y": 795},
    {"ball_x": 3},
    {"ball_y": 900},
    {"ball_speed": -1},
    {"max_speed": 0.1},
    {"brick_rows": 20},
    {"brick_x0": 1190},
    {"ball_angle": float("nan")},
])
def test_invalid_config_fails_fast(overrides):
    with pytest.raises(ValueError):
        SessionConfig(**overrides)


def test_zero_rows_allowed():
    cfg = SessionConfig(brick_rows=0)
    assert cfg.brick_count() == 0
    assert new_session(cfg).bricks == []
