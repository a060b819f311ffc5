class MalformedInteractionError(ValueError):
    """Raised when an interaction payload does not have the shape its prompt produces."""


def get_username(interaction: dict) -> str | None:
    """
    Return the invoking user's name.
    Guild interactions carry it under member.user, DMs under user.
    """
    member = interaction.get("member")
    user = member.get("user") if isinstance(member, dict) else None
    user = user or interaction.get("user")
    if not isinstance(user, dict):
        return None
    username = user.get("username")
    return username if isinstance(username, str) else None


def get_command_name(interaction: dict) -> str:
    data = interaction.get("data")
    name = data.get("name") if isinstance(data, dict) else None
    return name.lower() if isinstance(name, str) else ""


def extract_modal_text(interaction: dict) -> str:
    """
    Return the value of the single text input in a submitted modal.

    Args:
        interaction: MODAL_SUBMIT payload, data.components[0].components[0].value

    Raises:
        MalformedInteractionError: If the payload does not hold a string value there
    """
    try:
        value = interaction["data"]["components"][0]["components"][0]["value"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedInteractionError("Modal submission has no text input value") from e
    if not isinstance(value, str) or not value:
        raise MalformedInteractionError("Modal text input value must be a non-empty string")
    return value


def extract_selected_values(interaction: dict) -> list[str]:
    """
    Return the option values picked in a select menu.

    Raises:
        MalformedInteractionError: If data.values is missing or not a list of strings
    """
    try:
        values = interaction["data"]["values"]
    except (KeyError, TypeError) as e:
        raise MalformedInteractionError("Component interaction has no selected values") from e
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise MalformedInteractionError("Selected values must be a list of strings")
    return values
