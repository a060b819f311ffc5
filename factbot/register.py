"""
Register the bot's slash commands with Discord.

Usage:
    python -m factbot.register
    python -m factbot.register --guild 123456789012345678
    python -m factbot.register --dry-run
    factbot-register --guild 123456789012345678   (installed entry point)

Reads DISCORD_APPLICATION_ID and DISCORD_TOKEN from the environment,
and DISCORD_GUILD_ID when --guild is not given.
"""
import argparse
import json
import sys

import requests

from factbot.commands import ALL_COMMANDS
from factbot.config import REGISTER, get_setting, missing_settings
from factbot.logger import logger

API_BASE = "https://discord.com/api/v10"
REQUEST_TIMEOUT = 10.0


class RegistrationError(Exception):
    """Raised when Discord rejects the command registration."""


def commands_url(application_id: str, guild_id: str | None = None) -> str:
    if guild_id:
        return f"{API_BASE}/applications/{application_id}/guilds/{guild_id}/commands"
    return f"{API_BASE}/applications/{application_id}/commands"


def register_commands(
    application_id: str,
    token: str,
    guild_id: str | None = None,
    session: requests.Session | None = None,
) -> list[dict]:
    """
    Overwrite the application's commands with ALL_COMMANDS.

    Global commands can take up to an hour to propagate; guild commands are immediate.

    Returns:
        The command objects Discord stored

    Raises:
        RegistrationError: If Discord answers with a non-2xx status
    """
    session = session or requests.Session()
    url = commands_url(application_id, guild_id)
    logger.info("Registering %d commands at %s", len(ALL_COMMANDS), url)

    resp = session.put(
        url,
        json=ALL_COMMANDS,
        headers={"Authorization": f"Bot {token}"},
        timeout=REQUEST_TIMEOUT,
    )
    if not resp.ok:
        # Never log the response body, it may echo the token
        logger.error("Command registration failed with HTTP %s", resp.status_code)
        raise RegistrationError(f"Discord returned HTTP {resp.status_code}")

    registered = resp.json()
    logger.info("Registered commands: %s", ", ".join(cmd.get("name", "?") for cmd in registered))
    return registered


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register Discord slash commands")
    parser.add_argument("--guild", help="Register to one guild instead of globally")
    parser.add_argument("--dry-run", action="store_true", help="Print the payload without calling Discord")
    args = parser.parse_args(argv)

    if args.dry_run:
        print(json.dumps(ALL_COMMANDS, indent=2))
        return 0

    missing = missing_settings(REGISTER)
    if missing:
        message = "Missing required environment variables: " + ", ".join(s.name for s in missing)
        logger.critical(message)
        print(message, file=sys.stderr)
        return 1

    application_id = get_setting("DISCORD_APPLICATION_ID")
    token = get_setting("DISCORD_TOKEN")
    guild_id = args.guild or get_setting("DISCORD_GUILD_ID")

    try:
        register_commands(application_id, token, guild_id)
    except (RegistrationError, requests.RequestException) as e:
        print(f"Command registration failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
