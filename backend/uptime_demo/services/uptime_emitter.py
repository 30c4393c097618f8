"""
Delayed counter emitter

Prints a greeting and a styled info line, then waits and counts once per
step, then prints "Done". Two presets exist:

- delay_first: 3 steps counted from 1, each message after its delay
- message_first: 20 steps counted from 0, each message before its delay
"""
import logging
import sys
import uuid
from dataclasses import dataclass, replace
from typing import AsyncIterator, Dict, Optional, TextIO

from uptime_demo.core.clock import Clock, get_clock
from uptime_demo.core.exceptions import ConfigurationError, RunConsumedError
from uptime_demo.core.logging_config import LoggingConfig
from uptime_demo.core.styling import (COUNTER_STYLE, INFO_STYLE, Decorator,
                                      StyleSpec, decorate)

logger = logging.getLogger(__name__)

GREETING = "Hello world!"
DONE_MESSAGE = "Done"
COUNTER_TEMPLATE = "I've been up for {count} seconds"


@dataclass(frozen=True)
class EmitterConfig:
    """Explicit run context for one emitter"""
    steps: int = 3
    delay_ms: int = 1000
    start_index: int = 1
    delay_before_message: bool = True
    greeting: str = GREETING
    info_message: str = "I depend on a third party library, see?"
    done_message: str = DONE_MESSAGE
    info_style: Optional[StyleSpec] = INFO_STYLE
    counter_style: Optional[StyleSpec] = COUNTER_STYLE
    variant: str = "custom"

    def __post_init__(self):
        for name in ("steps", "delay_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(
                    f"{name} must be a positive integer, got {value!r}",
                    metadata={name: value},
                )
        if (
            isinstance(self.start_index, bool)
            or not isinstance(self.start_index, int)
            or self.start_index not in (0, 1)
        ):
            raise ConfigurationError(
                f"start_index must be 0 or 1, got {self.start_index!r}",
                metadata={"start_index": self.start_index},
            )

    @classmethod
    def from_variant(
        cls,
        name: str,
        steps: Optional[int] = None,
        delay_ms: Optional[int] = None,
    ) -> "EmitterConfig":
        """Look up a preset and apply optional overrides"""
        try:
            config = PRESETS[name]
        except KeyError:
            raise ConfigurationError(
                f"Unknown variant {name!r}; expected one of {sorted(PRESETS)}",
                metadata={"variant": name},
            ) from None
        overrides = {}
        if steps is not None:
            overrides["steps"] = steps
        if delay_ms is not None:
            overrides["delay_ms"] = delay_ms
        return replace(config, **overrides) if overrides else config

    @property
    def counts(self) -> range:
        """Displayed counter values, in order"""
        return range(self.start_index, self.start_index + self.steps)

    def counter_message(self, count: int) -> str:
        return COUNTER_TEMPLATE.format(count=count)


PRESETS: Dict[str, EmitterConfig] = {
    "delay_first": EmitterConfig(variant="delay_first"),
    "message_first": EmitterConfig(
        steps=20,
        start_index=0,
        delay_before_message=False,
        info_message="I'm dependant on a third party library, see?",
        variant="message_first",
    ),
}


class CounterRun:
    """
    One pass of the emitter.

    Iterating yields the greeting, the info line, one line per step and the
    done message. A run can be iterated only once; ask the emitter for a new
    run to count again.
    """

    def __init__(self, config: EmitterConfig, clock: Clock, decorator: Decorator):
        self.config = config
        self.clock = clock
        self.decorator = decorator
        self.run_id = uuid.uuid4().hex[:8]
        self._started = False

    def __aiter__(self) -> AsyncIterator[str]:
        if self._started:
            raise RunConsumedError(
                "Counter run already started; call run() for a fresh one",
                metadata={"run_id": self.run_id},
            )
        self._started = True
        return self._lines()

    async def _lines(self) -> AsyncIterator[str]:
        config = self.config
        logger.info(
            f"Starting counter run: {config.steps} steps, {config.delay_ms}ms delay, "
            f"variant={config.variant}"
        )

        yield config.greeting
        yield self.decorator(config.info_message, config.info_style)

        for count in config.counts:
            if config.delay_before_message:
                await self.clock.sleep_ms(config.delay_ms)
            logger.debug(f"Step {count} reached", extra={"step": count})
            yield self.decorator(config.counter_message(count), config.counter_style)
            if not config.delay_before_message:
                await self.clock.sleep_ms(config.delay_ms)

        logger.info("Counter run complete")
        yield config.done_message

    def __repr__(self) -> str:
        return f"<CounterRun(run_id={self.run_id}, variant={self.config.variant}, started={self._started})>"


class DelayedCounterEmitter:
    """Creates counter runs from a fixed config, clock and decorator"""

    def __init__(
        self,
        config: Optional[EmitterConfig] = None,
        clock: Optional[Clock] = None,
        decorator: Optional[Decorator] = None,
    ):
        self.config = config or PRESETS["delay_first"]
        self.clock = clock or get_clock()
        self.decorator = decorator or decorate

    def run(self) -> CounterRun:
        """Start a new run with its own counter state"""
        return CounterRun(self.config, self.clock, self.decorator)


async def emit_to_console(emitter: DelayedCounterEmitter, stream: Optional[TextIO] = None) -> int:
    """Consume one run, printing every line to `stream` (stdout by default)"""
    out = stream or sys.stdout
    run = emitter.run()
    LoggingConfig.set_context(run_id=run.run_id, variant=emitter.config.variant)
    written = 0
    try:
        async for line in run:
            print(line, file=out, flush=True)
            written += 1
    except Exception as e:
        logger.error(f"Counter run failed after {written} lines: {e}", exc_info=True)
        raise
    finally:
        LoggingConfig.clear_context()
    return written
