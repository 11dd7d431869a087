from __future__ import annotations

import pytest

from nuri.color import Color
from nuri.extract import ExtractedColor
from nuri.mode import ThemeMode, decide_auto_mode, effective_mode, parse_mode


def test_mostly_light_image_picks_light():
    colors = [
        ExtractedColor(Color(245, 245, 240), 0.7),
        ExtractedColor(Color(20, 20, 20), 0.3),
    ]
    assert decide_auto_mode(colors) is ThemeMode.LIGHT


def test_mostly_dark_image_picks_dark():
    colors = [
        ExtractedColor(Color(245, 245, 240), 0.2),
        ExtractedColor(Color(20, 20, 20), 0.8),
    ]
    assert decide_auto_mode(colors) is ThemeMode.DARK


def test_no_colours_picks_dark():
    assert decide_auto_mode([]) is ThemeMode.DARK


def test_threshold_is_tunable():
    grey = [ExtractedColor(Color(128, 128, 128), 1.0)]
    assert decide_auto_mode(grey, threshold=0.5) is ThemeMode.LIGHT
    assert decide_auto_mode(grey, threshold=0.7) is ThemeMode.DARK


def test_explicit_mode_wins_over_detection():
    light = [ExtractedColor(Color(250, 250, 250), 1.0)]
    assert effective_mode(ThemeMode.DARK, light) is ThemeMode.DARK
    assert effective_mode("dark", light) is ThemeMode.DARK
    assert effective_mode(None, light) is ThemeMode.LIGHT
    assert effective_mode("auto", light) is ThemeMode.LIGHT


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        effective_mode("sepia", [])
    with pytest.raises(ValueError):
        parse_mode("sepia")


def test_parse_mode():
    assert parse_mode("Light") is ThemeMode.LIGHT
    assert parse_mode(" dark ") is ThemeMode.DARK
    assert parse_mode("auto") == "auto"
    assert parse_mode(None) is None
