from __future__ import annotations
import logging
from typing import Callable, Optional

from .codegen import CodeGenerator, CodeTemplateCatalog
from .keyboard.behaviors import TypingContext, type_block, type_text_with_errors
from .keyboard.config import kcfg
from .keyboard.pacer import SleepFn, _Pacer
from .keyboard.personality import PersonalityController, SimulatorState
from .keyboard.primitives import OutputSink, TerminalSink
from .keyboard.refactor import RefactorEngine
from .keyboard.telemetry import KeystrokeRecorder
from .keyboard.timing import TimingModel
from .keyboard.typos import TypoEngine
from .utils import HiResTimer, RandomSource

logger = logging.getLogger(__name__)


class SessionLoop:
    """Generates code blocks forever and types them out like a person would."""

    def __init__(
        self,
        *,
        state: Optional[SimulatorState] = None,
        rng: Optional[RandomSource] = None,
        sink: Optional[OutputSink] = None,
        catalog: Optional[CodeTemplateCatalog] = None,
        recorder: Optional[KeystrokeRecorder] = None,
        sleep: Optional[SleepFn] = None,
    ):
        self.state = state if state is not None else SimulatorState()
        self.rng = rng if rng is not None else RandomSource()
        self.recorder = recorder if recorder is not None else KeystrokeRecorder()
        self.recorder.reset(seed=getattr(self.rng, "seed", None))

        self.personality = PersonalityController(self.state, self.rng, self.recorder)
        self.generator = CodeGenerator(self.rng, catalog)
        self.ctx = TypingContext(
            state=self.state,
            rng=self.rng,
            timing=TimingModel(self.state, self.rng),
            typos=TypoEngine(self.rng),
            refactor=RefactorEngine(self.rng),
            sink=sink if sink is not None else TerminalSink(),
            pacer=_Pacer(self.recorder, sleep),
            recorder=self.recorder,
        )
        self.blocks_done = 0

    async def run_once(self) -> str:
        """Type one freshly generated block followed by a blank line."""
        ctx = self.ctx
        self.personality.tick()
        code = self.generator.next()

        # Maybe add some thinking time before starting
        if self.rng.uniform_real() < kcfg.THINK_BEFORE_BLOCK_PROB:
            await ctx.pacer.sleep(ctx.timing.thinking_pause(), "<think-start>")

        plan = ctx.refactor.plan(code, self.state.current_personality)
        await type_block(ctx, code, plan)

        # Breathing room between code blocks
        await type_text_with_errors(ctx, kcfg.BLOCK_SEPARATOR)
        await ctx.pacer.sleep(ctx.timing.block_pause(), "<block-pause>")

        self.blocks_done += 1
        return code

    async def run_until(self, should_stop: Callable[[], bool]) -> int:
        """Run blocks until should_stop() is true; it is checked between blocks."""
        logger.info(
            "Starting bytesurge session (speed x%.2f, personality %s)",
            self.state.speed_multiplier,
            self.state.current_personality,
        )
        done = 0
        with HiResTimer():
            while not should_stop():
                await self.run_once()
                done += 1
        logger.info("Session stopped after %d blocks", done)
        return done
