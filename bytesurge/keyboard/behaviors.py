from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from ..utils import RandomSource
from .config import kcfg
from .pacer import _Pacer
from .personality import SimulatorState
from .primitives import OutputSink
from .refactor import RefactorEngine, RefactorPlan
from .telemetry import KeystrokeRecorder
from .timing import TimingModel
from .typos import TypoEngine

logger = logging.getLogger(__name__)


@dataclass
class TypingContext:
    """Everything one render pass needs, threaded through explicitly."""

    state: SimulatorState
    rng: RandomSource
    timing: TimingModel
    typos: TypoEngine
    refactor: RefactorEngine
    sink: OutputSink
    pacer: _Pacer
    recorder: KeystrokeRecorder


def _emit_char(ctx: TypingContext, ch: str) -> None:
    ctx.sink.write(ch)
    ctx.recorder.log("char", ch)


def _press_backspace(ctx: TypingContext) -> None:
    ctx.sink.backspace()
    ctx.recorder.log("backspace", "")


async def type_text_with_errors(ctx: TypingContext, text: str) -> None:
    """Type text one character at a time, slipping and correcting like a human."""
    for ch in text:
        # Maybe pause to "think" at a syntactic boundary
        if ch in kcfg.THINK_CHARS and ctx.rng.uniform_real() < kcfg.THINK_AT_CHAR_PROB:
            await ctx.pacer.sleep(ctx.timing.thinking_pause(), "<think>")

        # Typos only on letters
        if ch.isalpha() and ctx.typos.should_make_typo(ctx.state.current_personality):
            wrong = ctx.typos.make_typo(ch)
            _emit_char(ctx, wrong)
            ctx.recorder.log("typo", wrong)
            ctx.recorder.error_count += 1
            await ctx.pacer.sleep(ctx.timing.char_delay(), "<char-delay>")

            # Pause before realizing the mistake, then erase and correct
            await ctx.pacer.sleep(ctx.timing.mistake_pause(), "<mistake-recognition>")
            _press_backspace(ctx)
            await ctx.pacer.sleep(kcfg.CORRECTION_DELAY_S, "<correction>")

        _emit_char(ctx, ch)
        await ctx.pacer.sleep(ctx.timing.char_delay(), "<char-delay>")


async def delete_and_retype(ctx: TypingContext, block: str, offset: int) -> None:
    """Erase the text just before offset, hesitate, then type the rest again."""
    logger.info("Refactor in progress")
    ctx.recorder.log("refactor", str(offset))
    ctx.recorder.refactor_count += 1

    delete_count = ctx.refactor.delete_count(offset, len(block))
    for _ in range(delete_count):
        _press_backspace(ctx)
        await ctx.pacer.sleep(kcfg.REFACTOR_BACKSPACE_S, "<refactor-backspace>")

    await ctx.pacer.sleep(ctx.timing.rewrite_pause(), "<rewrite-think>")

    # Retyping goes through the normal path, so it can slip again
    await type_text_with_errors(ctx, block[offset - delete_count :])


async def type_block(
    ctx: TypingContext, block: str, plan: Optional[RefactorPlan] = None
) -> None:
    """Render one code block, handing over to delete_and_retype at the plan's offset."""
    for i, ch in enumerate(block):
        if plan is not None and i == plan.offset:
            await delete_and_retype(ctx, block, i)
            break
        await type_text_with_errors(ctx, ch)
