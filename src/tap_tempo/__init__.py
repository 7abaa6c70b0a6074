"""Running tempo (BPM) estimate from tapped beats."""

from .schema import TapTempoConfig
from .tempo import TapTempo, calculate_tempo, utc_now

__all__ = ["TapTempo", "TapTempoConfig", "calculate_tempo", "utc_now"]
