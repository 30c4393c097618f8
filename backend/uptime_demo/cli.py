"""CLI entry point for the uptime counter."""
import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from uptime_demo.core.config import Settings, get_settings
from uptime_demo.core.exceptions import ConfigurationError
from uptime_demo.core.logging_config import LoggingConfig
from uptime_demo.core.styling import get_decorator
from uptime_demo.services.uptime_emitter import (PRESETS,
                                                 DelayedCounterEmitter,
                                                 emit_to_console)


logger = logging.getLogger(__name__)


def build_parser():
    p = argparse.ArgumentParser(
        prog="uptime-demo",
        description="Print a greeting, then count up once per delay.",
    )
    p.add_argument("--variant", choices=sorted(PRESETS), help="Counter preset (default: from settings)")
    p.add_argument("--steps", type=int, help="Number of counter steps")
    p.add_argument("--delay-ms", type=int, dest="delay_ms", help="Delay per step in milliseconds")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI styling")
    p.add_argument("--log-level", help="Logging level for uptime_demo loggers")
    return p


def load_settings(args) -> Settings:
    """Apply command line overrides on top of env/.env settings"""
    settings = get_settings()
    overrides = {}
    if args.variant:
        overrides["uptime_variant"] = args.variant
    if args.steps is not None:
        overrides["uptime_steps"] = args.steps
    if args.delay_ms is not None:
        overrides["uptime_delay_ms"] = args.delay_ms
    if args.no_color:
        overrides["uptime_color"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    if not overrides:
        return settings
    # Re-validate so CLI values get the same constraints as env values
    return Settings.model_validate({**settings.model_dump(), **overrides})


async def run_emitter(settings: Settings, stream=None) -> int:
    emitter = DelayedCounterEmitter(
        config=settings.emitter_config,
        decorator=get_decorator(settings.uptime_color),
    )
    return await emit_to_console(emitter, stream=stream)


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    try:
        settings = load_settings(args)
        LoggingConfig.configure(settings=settings)
        if args.log_level:
            LoggingConfig.set_module_level("uptime_demo", settings.log_level)
        logger.info(f"Starting {settings.app_name} in {settings.app_env} mode...")
        asyncio.run(run_emitter(settings))
    except (ValidationError, ConfigurationError) as e:
        print(f"uptime-demo: invalid configuration: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
