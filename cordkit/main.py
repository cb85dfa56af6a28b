"""Command-line entry point: lists voice regions and resolves invite codes."""

import asyncio
import logging
import sys

from cordkit.config import ClientConfig, load_config
from cordkit.core.client import Client
from cordkit.exceptions import CordKitException

logger = logging.getLogger(__name__)


def setup_logging(log_level: int) -> None:
    """Setup logging configuration with suppressed aiohttp noise."""

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(formatter)

        root_logger.addHandler(console_handler)
    else:
        for handler in root_logger.handlers:
            handler.setLevel(log_level)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("aiohttp.client").setLevel(logging.WARNING)
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)


async def main(config: ClientConfig, invite_codes=()) -> int:
    """Prints the voice regions, then the URL and guild of each invite code."""
    async with Client(config) as client:
        try:
            regions = await client.get_voice_regions()
        except CordKitException as e:
            logger.error("Failed to fetch voice regions: %s", e)
            return 1

        print("Voice regions:")
        for region in regions:
            marker = " (optimal)" if region.optimal else ""
            print(f"  {region.id}: {region.name}{marker}")

        status = 0
        for code in invite_codes:
            try:
                invite = await client.fetch_invite(code, with_counts=True)
            except CordKitException as e:
                logger.error("Failed to resolve invite %s: %s", code, e)
                status = 1
                continue
            guild_name = invite.data.guild.name if invite.data.guild else "-"
            print(f"{invite.url} -> {guild_name}")
        return status


def run() -> None:
    config = load_config()
    setup_logging(config.log_level)
    sys.exit(asyncio.run(main(config, sys.argv[1:])))


if __name__ == "__main__":
    run()
