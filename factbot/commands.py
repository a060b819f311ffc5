"""
Slash command metadata and the response payload for each command.
The metadata is shared by the runtime router and by command registration.
"""
from factbot.constants import (
    EPHEMERAL_FLAG,
    FACT_INPUT_ID,
    FACT_MODAL_ID,
    MAX_FACT_LENGTH,
    MAX_MESSAGE_LENGTH,
    MAX_SELECT_OPTION_LENGTH,
    MAX_SELECT_OPTIONS,
    MIN_FACT_LENGTH,
    SELECT_FACTS_ID,
    ApplicationCommandType,
    InteractionResponseType,
    MessageComponentType,
    TextStyle,
)
from factbot.logger import logger
from factbot.store import Fact

ADD_COMMAND = {
    "name": "add",
    "description": "Add a Ben's Fact!",
    "type": ApplicationCommandType.CHAT_INPUT,
}

SELECT_COMMAND = {
    "name": "select",
    "description": "Select which of Ben's Facts to use!",
    "type": ApplicationCommandType.CHAT_INPUT,
}

LIST_COMMAND = {
    "name": "list",
    "description": "List all of Ben's Facts",
    "type": ApplicationCommandType.CHAT_INPUT,
}

ALL_COMMANDS = [ADD_COMMAND, SELECT_COMMAND, LIST_COMMAND]

FACT_ADDED_MESSAGE = "Fact added! They better hold on to their butts..."
FACTS_UPDATED_MESSAGE = "Facts updated!"
NO_FACTS_MESSAGE = "There are no facts yet. Use /add to create one."


def ephemeral_message(content: str) -> dict:
    return {
        "type": InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
        "data": {
            "content": content,
            "flags": EPHEMERAL_FLAG,
        },
    }


def add_fact_modal() -> dict:
    logger.debug("Showing add fact modal")
    return {
        "type": InteractionResponseType.MODAL,
        "data": {
            "custom_id": FACT_MODAL_ID,
            "title": "Add a cool Ben's Fact!",
            "components": [
                {
                    "type": MessageComponentType.ACTION_ROW,
                    "components": [
                        {
                            "type": MessageComponentType.INPUT_TEXT,
                            "custom_id": FACT_INPUT_ID,
                            "style": TextStyle.PARAGRAPH,
                            "label": "A cool Ben's Fact",
                            "min_length": MIN_FACT_LENGTH,
                            "max_length": MAX_FACT_LENGTH,
                            "required": True,
                        }
                    ],
                }
            ],
        },
    }


def select_facts_menu(facts: list[Fact]) -> dict:
    """
    Multi-select listing every stored fact, pre-selected by its enabled flag.
    An empty store gets a plain message since Discord rejects a select with no options.
    """
    if not facts:
        return ephemeral_message(NO_FACTS_MESSAGE)

    # Sent unchanged; Discord rejects the menu when these limits are exceeded
    if len(facts) > MAX_SELECT_OPTIONS:
        logger.warning(
            "Select menu has %d facts, Discord accepts at most %d options", len(facts), MAX_SELECT_OPTIONS
        )
    for fact in facts:
        if len(fact.text) > MAX_SELECT_OPTION_LENGTH:
            logger.warning(
                "Fact is %d characters, longer than the %d Discord allows for a select option: %.40s...",
                len(fact.text),
                MAX_SELECT_OPTION_LENGTH,
                fact.text,
            )

    logger.debug("Showing select menu with %d facts", len(facts))
    return {
        "type": InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
        "data": {
            "components": [
                {
                    "type": MessageComponentType.ACTION_ROW,
                    "components": [
                        {
                            "type": MessageComponentType.STRING_SELECT,
                            "custom_id": SELECT_FACTS_ID,
                            "placeholder": "Choose which of Ben's facts will make the cut!",
                            "min_values": 1,
                            "max_values": len(facts),
                            "options": [
                                {"label": fact.text, "value": fact.text, "default": fact.enabled}
                                for fact in facts
                            ],
                        }
                    ],
                }
            ],
            "flags": EPHEMERAL_FLAG,
        },
    }


def list_facts_message(facts: list[Fact]) -> dict:
    if not facts:
        return ephemeral_message(NO_FACTS_MESSAGE)

    lines = [f"{'✅' if fact.enabled else '❌'} {fact.text}" for fact in facts]
    enabled_count = sum(fact.enabled for fact in facts)
    header = f"*{enabled_count} of {len(facts)} facts enabled:*"
    content = "\n".join([header, *lines])
    if len(content) > MAX_MESSAGE_LENGTH:
        content = content[: MAX_MESSAGE_LENGTH - 1] + "…"
    return ephemeral_message(content)
