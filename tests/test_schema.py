"""Tests for tap_tempo/schema.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tap_tempo import TapTempo, TapTempoConfig


def test_defaults() -> None:
    config = TapTempoConfig()
    assert config.zero_interval == "infinite"
    assert TapTempo().config == config


def test_rejects_unknown_policy() -> None:
    with pytest.raises(ValidationError):
        TapTempoConfig(zero_interval="nan")


def test_rejects_unknown_field() -> None:
    with pytest.raises(ValidationError):
        TapTempoConfig(max_taps=8)


def test_is_frozen() -> None:
    config = TapTempoConfig()
    with pytest.raises(ValidationError):
        config.zero_interval = "absent"
