from .behaviors import TypingContext, type_block, type_text_with_errors
from .analysis import summarize_typing
from .personality import Personality, PersonalityController, SimulatorState
from .primitives import MemorySink, OutputSink, SinkError, TerminalSink
from .telemetry import KeystrokeRecorder

__all__ = [
    "TypingContext",
    "type_block",
    "type_text_with_errors",
    "summarize_typing",
    "Personality",
    "PersonalityController",
    "SimulatorState",
    "MemorySink",
    "OutputSink",
    "SinkError",
    "TerminalSink",
    "KeystrokeRecorder",
]
