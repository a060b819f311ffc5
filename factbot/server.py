import json

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from factbot.constants import JSON_CONTENT_TYPE
from factbot.interactions import route_interaction, unknown_type
from factbot.logger import logger
from factbot.store import FactStore, StorageError
from factbot.verify import verify_discord_request

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def json_response(body: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(body, status_code=status_code, media_type=JSON_CONTENT_TYPE)


def create_app(store: FactStore, public_key: str) -> FastAPI:
    """
    Build the webhook application.

    Args:
        store: Fact storage shared by every request
        public_key: Hex-encoded Discord application public key
    """
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @app.post("/")
    async def discord_interactions(request: Request):
        """
        Main route for all requests sent from Discord.
        https://discord.com/developers/docs/interactions/receiving-and-responding#interaction-object
        """
        body = await request.body()
        if not verify_discord_request(request.headers, body, public_key):
            return PlainTextResponse("Bad request signature.", status_code=401)

        try:
            interaction = json.loads(body)
        except (ValueError, RecursionError):
            logger.error("Signed request body is not valid JSON")
            payload, status_code = unknown_type()
            return json_response(payload, status_code)

        # File I/O runs in the thread pool so we don't block the event loop.
        try:
            payload, status_code = await run_in_threadpool(route_interaction, interaction, store)
        except StorageError as e:
            return json_response({"error": str(e)}, 500)
        return json_response(payload, status_code)

    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def not_found(path: str):
        return PlainTextResponse("Not Found.", status_code=404)

    return app
