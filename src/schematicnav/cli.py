"""Command line entry point for schematic-nav."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import List, Optional

from playwright.async_api import Error as PlaywrightError

from schematicnav.config.app_config import CONFIG_PATH_ENV, load_symbolic_configuration
from schematicnav.config.translator_config import SUPPORTED_PROVIDERS, load_translator_config
from schematicnav.console import DEFAULT_PROMPT, IntentConsole
from schematicnav.domains.navigation.adapters.event_logger import LoggingEventPublisher
from schematicnav.domains.navigation.adapters.playwright_driver import (
    SUPPORTED_BROWSERS,
    BrowserOptions,
    BrowserSession,
)
from schematicnav.domains.navigation.aggregates import SymbolicConfiguration
from schematicnav.domains.navigation.errors import ConfigurationError
from schematicnav.domains.navigation.services import IntentDispatcher
from schematicnav.translation.translator import IntentTranslator

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schematic-nav",
        description="Drive a web page with natural-language commands.",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        help="Optional file with one command per line (batch mode).",
    )
    parser.add_argument(
        "--config",
        dest="config",
        help=f"Site configuration file (default: ${CONFIG_PATH_ENV} or ./appsettings.json).",
    )
    parser.add_argument(
        "--provider",
        dest="provider",
        choices=list(SUPPORTED_PROVIDERS),
        help="AI provider used to translate commands (default: openai).",
    )
    parser.add_argument("--model", dest="model", help="Model name for the provider.")
    parser.add_argument("--base-url", dest="base_url", help="Custom provider endpoint.")
    parser.add_argument(
        "--browser",
        dest="browser",
        choices=list(SUPPORTED_BROWSERS),
        default="chromium",
        help="Browser engine to launch (default: chromium).",
    )
    headless = parser.add_mutually_exclusive_group()
    headless.add_argument(
        "--headless",
        dest="headless",
        action="store_true",
        default=False,
        help="Run the browser without a window.",
    )
    headless.add_argument(
        "--headed",
        dest="headless",
        action="store_false",
        help="Show the browser window (default).",
    )
    parser.add_argument(
        "--timeout-ms",
        dest="timeout_ms",
        type=int,
        help="Default timeout for every page operation, in milliseconds.",
    )
    parser.add_argument(
        "--prompt",
        dest="prompt",
        default=DEFAULT_PROMPT,
        help="Prompt shown in interactive mode.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=os.environ.get("SCHEMATICNAV_LOG_LEVEL", "WARNING"),
        help="Log level (e.g., INFO, DEBUG).",
    )
    return parser


async def _run(
    args: argparse.Namespace,
    config: SymbolicConfiguration,
    translator: IntentTranslator,
) -> None:
    options = BrowserOptions(
        browser=args.browser,
        headless=args.headless,
        timeout_ms=args.timeout_ms,
    )
    async with BrowserSession(options) as session:
        dispatcher = IntentDispatcher(
            config,
            session.driver,
            event_publisher=LoggingEventPublisher(),
        )
        console = IntentConsole(translator, dispatcher, prompt=args.prompt)
        if args.input_file:
            await console.run_batch(args.input_file)
        else:
            await console.run()


def main(argv: Optional[List[str]] = None) -> int:
    """Load configuration, start the browser and run the console."""

    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    level = str(args.log_level).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.error("Invalid log level: %s", args.log_level)
        return 1
    logging.basicConfig(level=level)

    try:
        config = load_symbolic_configuration(args.config)
        translator_config = load_translator_config(
            provider=args.provider,
            model=args.model,
            base_url=args.base_url,
        )
        translator = IntentTranslator.from_config(config, translator_config)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1

    try:
        asyncio.run(_run(args, config, translator))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except (PlaywrightError, OSError) as exc:
        logger.error("Could not run: %s", exc)
        return 1
    return 0
