from __future__ import annotations
from .codegen import CodeGenerator, CodeTemplateCatalog, default_catalog
from .keyboard import (
    MemorySink,
    Personality,
    SimulatorState,
    SinkError,
    TerminalSink,
    summarize_typing,
)
from .session import SessionLoop
from .utils import RandomSource

__all__ = [
    "SessionLoop",
    "SimulatorState",
    "Personality",
    "RandomSource",
    "CodeGenerator",
    "CodeTemplateCatalog",
    "default_catalog",
    "TerminalSink",
    "MemorySink",
    "SinkError",
    "summarize_typing",
]
