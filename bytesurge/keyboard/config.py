from __future__ import annotations
from typing import Tuple


class kcfg:
    # Global speed: base ranges are divided by this (2.0 = twice as fast)
    SPEED_MULTIPLIER = 6.0
    SPEED_EPSILON = 1e-3

    # Personality tenure: switch once the block count exceeds a draw in [lo, hi)
    TENURE_THRESHOLD = (5, 15)

    # Per-personality ranges live in personality.PROFILES; shared ranges (ms) here
    MISTAKE_PAUSE_MS: Tuple[int, int] = (100, 500)  # noticing the typo
    REWRITE_PAUSE_MS: Tuple[int, int] = (800, 2000)  # deciding how to rewrite
    BLOCK_PAUSE_MS: Tuple[int, int] = (500, 1500)  # breathing room between blocks

    # Fixed delays, not speed-scaled
    CORRECTION_DELAY_S = 0.050  # after the backspace that removes a typo
    REFACTOR_BACKSPACE_S = 0.030  # between erase strokes while refactoring

    # "Thinking" pauses
    THINK_BEFORE_BLOCK_PROB = 0.3
    THINK_AT_CHAR_PROB = 0.1
    THINK_CHARS = " \n{}();"

    # Typo model: physical key order, neighbours are +/- TYPO_WINDOW positions
    KEYBOARD_SEQUENCE = "qwertyuiopasdfghjklzxcvbnm"
    TYPO_WINDOW = 2
    TYPO_FALLBACK_POOL = "qwertyuiop"

    # Refactor model
    REFACTOR_DELETE_MIN = 5
    REFACTOR_DELETE_MAX = 30

    BLOCK_SEPARATOR = "\n\n"

    # Telemetry keeps only this many recent events (totals are kept separately)
    TELEMETRY_MAX_EVENTS = 5000
