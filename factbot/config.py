"""
Environment-provided settings.

SETTINGS is the one place that names every variable the bot reads, its
default, and which entry point needs it. The server only requires the
"server" scope; `python -m factbot.register` requires the "register" scope.
"""
import logging
import os
import sys
from typing import NamedTuple

# Same logger as factbot.logger; imported by name since the logger module reads LOG_LEVEL from here
logger = logging.getLogger("factbot")

SERVER = "server"
REGISTER = "register"


class Setting(NamedTuple):
    name: str
    description: str
    default: str | None = None
    required_by: str | None = None


SETTINGS = {
    setting.name: setting
    for setting in [
        Setting("DISCORD_PUBLIC_KEY", "Discord application public key, hex encoded", required_by=SERVER),
        Setting("PORT", "Port the webhook listens on", default="8787"),
        Setting("FACTS_FILE", "Path of the facts JSON file", default=os.path.join("data", "facts.json")),
        Setting("ENV", "Deployment environment, prod disables auto-reload", default="dev"),
        Setting("LOG_LEVEL", "Logging level name", default="DEBUG"),
        Setting("DISCORD_APPLICATION_ID", "Application id used to register commands", required_by=REGISTER),
        Setting("DISCORD_TOKEN", "Bot token used to register commands", required_by=REGISTER),
        Setting("DISCORD_GUILD_ID", "Register commands to this guild only"),
    ]
}

DEFAULT_PORT = int(SETTINGS["PORT"].default)
DEFAULT_FACTS_FILE = SETTINGS["FACTS_FILE"].default


def get_setting(name: str) -> str | None:
    """Environment value with surrounding whitespace removed, or the default when unset or blank."""
    value = (os.getenv(name) or "").strip()
    return value or SETTINGS[name].default


def missing_settings(scope: str) -> list[Setting]:
    return [s for s in SETTINGS.values() if s.required_by == scope and not get_setting(s.name)]


def validate_environment_variables(scope: str = SERVER) -> None:
    """
    Exit with status 1 if a setting required by `scope` is missing.
    Everything else is logged at debug level with the value it resolved to,
    except for required settings which may be secrets.
    """
    missing = missing_settings(scope)
    if missing:
        lines = [f"  - {s.name}: {s.description}" for s in missing]
        message = f"Cannot start {scope}, missing environment variables:\n" + "\n".join(lines)
        logger.critical(message)
        print(message, file=sys.stderr)
        sys.exit(1)

    for setting in SETTINGS.values():
        if setting.required_by is not None:
            continue
        value = get_setting(setting.name)
        source = "environment" if os.getenv(setting.name, "").strip() else "default"
        logger.debug("%s=%s (%s)", setting.name, value if value is not None else "<unset>", source)

    logger.info("Configuration for %s loaded", scope)


def get_public_key() -> str:
    return get_setting("DISCORD_PUBLIC_KEY")


def get_port() -> int:
    value = get_setting("PORT")
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid PORT value %r, falling back to %s", value, DEFAULT_PORT)
        return DEFAULT_PORT


def get_facts_file() -> str:
    return get_setting("FACTS_FILE")


def get_log_level() -> str:
    return get_setting("LOG_LEVEL").upper()


def is_production() -> bool:
    return get_setting("ENV") == "prod"
