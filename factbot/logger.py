import logging
import sys

from factbot.config import get_log_level

# Log to stderr so container runtimes pick it up unbuffered
logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

# Suppress verbose DEBUG logs from HTTP and form parsing internals
logging.getLogger("urllib3").setLevel(logging.INFO)
logging.getLogger("multipart").setLevel(logging.INFO)

logger = logging.getLogger("factbot")
