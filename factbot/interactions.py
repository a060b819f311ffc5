"""
Routes a verified Discord interaction to its handler.

Every handler returns a (json_body, http_status) pair. Store write failures
are not handled here; they propagate to the HTTP layer as StorageError.
"""
from factbot.access import AccessResult, check_access
from factbot.commands import (
    ADD_COMMAND,
    FACT_ADDED_MESSAGE,
    FACTS_UPDATED_MESSAGE,
    LIST_COMMAND,
    SELECT_COMMAND,
    add_fact_modal,
    ephemeral_message,
    list_facts_message,
    select_facts_menu,
)
from factbot.constants import InteractionResponseType, InteractionType
from factbot.logger import logger
from factbot.store import FactStore
from factbot.utils import (
    MalformedInteractionError,
    extract_modal_text,
    extract_selected_values,
    get_command_name,
    get_username,
)

OK = 200
BAD_REQUEST = 400
FORBIDDEN = 403

UNKNOWN_TYPE_ERROR = "Unknown Type"
INVALID_USER_ERROR = "Invalid user access"


def error_response(message: str, status: int) -> tuple[dict, int]:
    return {"error": message}, status


def unknown_type() -> tuple[dict, int]:
    return error_response(UNKNOWN_TYPE_ERROR, BAD_REQUEST)


def handle_ping(interaction: dict, store: FactStore) -> tuple[dict, int]:
    # Sent by Discord when the interactions endpoint URL is configured
    return {"type": InteractionResponseType.PONG}, OK


def handle_add_command(interaction: dict, store: FactStore) -> tuple[dict, int]:
    return add_fact_modal(), OK


def handle_select_command(interaction: dict, store: FactStore) -> tuple[dict, int]:
    return select_facts_menu(store.load_all()), OK


def handle_list_command(interaction: dict, store: FactStore) -> tuple[dict, int]:
    return list_facts_message(store.load_all()), OK


COMMAND_HANDLERS = {
    ADD_COMMAND["name"]: handle_add_command,
    SELECT_COMMAND["name"]: handle_select_command,
    LIST_COMMAND["name"]: handle_list_command,
}


def handle_application_command(interaction: dict, store: FactStore) -> tuple[dict, int]:
    command_name = get_command_name(interaction)
    handler = COMMAND_HANDLERS.get(command_name)
    if handler is None:
        logger.error(f"Failed to recognise the command: {command_name}")
        return unknown_type()
    logger.debug(f"Command: {command_name}")
    return handler(interaction, store)


def handle_modal_submit(interaction: dict, store: FactStore) -> tuple[dict, int]:
    text = extract_modal_text(interaction)
    store.add_one(text)
    return ephemeral_message(FACT_ADDED_MESSAGE), OK


def handle_message_component(interaction: dict, store: FactStore) -> tuple[dict, int]:
    selected = extract_selected_values(interaction)
    store.set_enabled_set(selected)
    return ephemeral_message(FACTS_UPDATED_MESSAGE), OK


# (handler, requires allow-listed user)
INTERACTION_HANDLERS = {
    InteractionType.PING: (handle_ping, False),
    InteractionType.APPLICATION_COMMAND: (handle_application_command, True),
    InteractionType.MODAL_SUBMIT: (handle_modal_submit, True),
    InteractionType.MESSAGE_COMPONENT: (handle_message_component, True),
}


def route_interaction(interaction: dict, store: FactStore) -> tuple[dict, int]:
    """
    Produce the response for one interaction.

    Args:
        interaction: Parsed interaction payload from Discord
        store: Fact storage used by the command handlers

    Returns:
        Tuple of (response body, HTTP status code)
    """
    if not isinstance(interaction, dict):
        logger.error("Interaction payload is not a JSON object")
        return unknown_type()

    try:
        interaction_type = InteractionType(interaction.get("type"))
    except (ValueError, TypeError):
        interaction_type = None

    entry = INTERACTION_HANDLERS.get(interaction_type)
    if entry is None:
        logger.error(f"Unknown interaction type: {interaction.get('type')!r}")
        return unknown_type()

    handler, requires_access = entry
    if requires_access and check_access(get_username(interaction)) is AccessResult.DENIED:
        return error_response(INVALID_USER_ERROR, FORBIDDEN)

    try:
        return handler(interaction, store)
    except MalformedInteractionError as e:
        logger.error("Malformed %s interaction: %s", interaction_type.name, e)
        return unknown_type()
