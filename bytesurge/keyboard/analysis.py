from __future__ import annotations

from .telemetry import KeystrokeRecorder


def summarize_typing(rec: KeystrokeRecorder) -> str:
    """
    Reports:
      - Total simulated duration
      - Characters left visible and keystroke totals
      - Average chars/min and WPM (5 chars = 1 word, includes all pauses)
      - Keystroke-only WPM (just the per-character delays)
      - Typos corrected, refactors, personality switches
      - Seed used

    Built from the recorder's running totals, so it covers the whole session
    even after old events have rolled out of the event window.
    """
    if rec.event_count < 2:
        return "No typing data"

    total_time = rec.elapsed
    if total_time <= 0:
        return "Invalid timing data"

    typed = rec.typed_chars
    erased = rec.erased_chars
    visible = max(0, typed - erased)

    overall_cpm = visible / total_time * 60.0
    overall_wpm = overall_cpm / 5.0
    if rec.char_delay_count:
        avg_char_dt = rec.char_delay_total / rec.char_delay_count
        keystroke_wpm = (60.0 / avg_char_dt) / 5.0 if avg_char_dt > 0 else 0.0
    else:
        keystroke_wpm = 0.0

    return (
        "Typing Summary:\n"
        f"  Total duration: {total_time:.2f}s\n"
        f"  Visible chars: {visible} (typed {typed}, erased {erased})\n"
        f"  Overall Avg: {overall_cpm:.1f} chars/min, {overall_wpm:.2f} WPM\n"
        f"  Keystroke Avg WPM (no pauses): {keystroke_wpm:.2f}\n"
        f"  Corrections (typos fixed): {rec.error_count}\n"
        f"  Refactors: {rec.refactor_count}\n"
        f"  Personality switches: {rec.personality_switches}\n"
        f"  Random seed: {rec.seed if rec.seed is not None else 'N/A'}"
    )
