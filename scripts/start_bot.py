#!/usr/bin/env python3
"""Start the Discord bot with Logfire error tracking for startup errors."""

import sys
import logfire

from punchline.config import Settings
from punchline.interface.discord import PunchlineBot
from punchline.util.di.container import create_container
from punchline.util.error import ConfigurationError
from punchline.util.logging import setup_logging
from punchline.util.observability import configure_logfire


def main() -> int:
    """Connect to the Discord gateway and run until interrupted."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings, service_name="punchline-bot")

    try:
        if not settings.discord.token:
            raise ConfigurationError("DISCORD__TOKEN is not set")

        logfire.info("Starting Discord bot", environment=settings.environment)

        bot = PunchlineBot(create_container(), settings.discord)
        # Logging is already configured; keep discord.py from adding its own handler
        bot.run(settings.discord.token, log_handler=None)

        return 0

    except Exception as e:
        logfire.error(
            "Bot startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
