from enum import Enum

from factbot.logger import logger

ALLOWED_USERNAMES = frozenset({"LuggageMoose", "encryptoknight"})


class AccessResult(Enum):
    ALLOWED = "allowed"
    DENIED = "denied"


def check_access(username: str | None) -> AccessResult:
    """Exact, case-sensitive match against the allow-list."""
    if username and username in ALLOWED_USERNAMES:
        return AccessResult.ALLOWED
    logger.error("Invalid user access: %r", username)
    return AccessResult.DENIED
