"""Wet/dry classification of moisture readings for display."""

from enum import Enum

DEFAULT_THRESHOLD = 20000.0


class MoistureState(str, Enum):
    """Display label for a moisture reading."""
    WET = "Wet"
    DRY = "Dry"


def classify(value: float, threshold: float = DEFAULT_THRESHOLD) -> MoistureState:
    """
    Classify a raw moisture reading.

    Higher sensor values mean drier soil. The threshold itself counts as Wet,
    and so does NaN since it never compares greater.
    """
    return MoistureState.DRY if value > threshold else MoistureState.WET


def state_color(state: MoistureState, dry_color: str = "red", wet_color: str = "blue") -> str:
    """Color used for the hover label of a classified point."""
    return dry_color if state is MoistureState.DRY else wet_color
