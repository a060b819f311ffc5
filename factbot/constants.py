"""
Discord interaction protocol codes and bot-wide limits.
https://discord.com/developers/docs/interactions/receiving-and-responding
"""
from enum import IntEnum


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    DEFERRED_UPDATE_MESSAGE = 6
    UPDATE_MESSAGE = 7
    APPLICATION_COMMAND_AUTOCOMPLETE_RESULT = 8
    MODAL = 9


class MessageComponentType(IntEnum):
    ACTION_ROW = 1
    BUTTON = 2
    STRING_SELECT = 3
    INPUT_TEXT = 4


class TextStyle(IntEnum):
    SHORT = 1
    PARAGRAPH = 2


class ApplicationCommandType(IntEnum):
    CHAT_INPUT = 1


EPHEMERAL_FLAG = 1 << 6

MIN_FACT_LENGTH = 1
MAX_FACT_LENGTH = 1000

FACT_MODAL_ID = "fact_modal"
FACT_INPUT_ID = "fact"
SELECT_FACTS_ID = "select_facts"

MAX_MESSAGE_LENGTH = 2000
MAX_SELECT_OPTIONS = 25
MAX_SELECT_OPTION_LENGTH = 100

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"
