from factbot.logger import logger
from factbot.config import (
    get_facts_file,
    get_port,
    get_public_key,
    is_production,
    validate_environment_variables,
)
from factbot.server import create_app
from factbot.store import FactStore

# Validate environment variables at startup
validate_environment_variables()

fact_store = FactStore(get_facts_file())
fastapi_app = create_app(fact_store, get_public_key())
logger.info("Serving facts from %s", fact_store.path)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app:fastapi_app",
        host="0.0.0.0",
        port=get_port(),
        reload=not is_production(),
    )
