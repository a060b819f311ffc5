"""
JSON file storage for facts.

The whole collection is read on every request and rewritten on every
mutation. There is no locking: concurrent writers race and the last one wins.
"""
import json
import os
from typing import Iterable, NamedTuple

from factbot.logger import logger


class StorageError(Exception):
    """Raised when the facts file cannot be written."""


class Fact(NamedTuple):
    text: str
    enabled: bool = True

    def to_dict(self) -> dict:
        return {"fact": self.text, "is_enabled": self.enabled}


class FactStore:
    WRITE_ERROR_MESSAGE = "Error writing to facts file"

    def __init__(self, path: str):
        self.path = path

    def load_all(self) -> list[Fact]:
        """
        Return every stored fact in file order.
        Read and parse failures are logged and treated as an empty store.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except FileNotFoundError:
            logger.warning("Facts file %s does not exist yet", self.path)
            return []
        except (OSError, ValueError, RecursionError) as e:
            logger.exception("Error reading facts file %s: %s", self.path, e)
            return []

        if not isinstance(raw, list):
            logger.error("Facts file %s does not contain a JSON array", self.path)
            return []

        facts = []
        for entry in raw:
            if not isinstance(entry, dict) or not isinstance(entry.get("fact"), str):
                logger.warning("Skipping malformed fact entry: %r", entry)
                continue
            enabled = entry.get("is_enabled", True)
            if not isinstance(enabled, bool):
                logger.warning("Fact %r has non-boolean is_enabled %r, treating as disabled", entry["fact"], enabled)
                enabled = False
            facts.append(Fact(entry["fact"], enabled))
        return facts

    def add_one(self, text: str, enabled: bool = True) -> None:
        """
        Insert a fact, or overwrite the enabled flag of an existing fact with the same text.
        """
        facts_by_text = self._dedupe(self.load_all())
        facts_by_text[text] = Fact(text, enabled)
        self._write(facts_by_text.values())
        logger.info("Stored fact (enabled=%s): %s", enabled, text)

    def set_enabled_set(self, selected: Iterable[str]) -> None:
        """
        Enable exactly the stored facts whose text is in `selected` and disable the rest.
        Never adds or removes facts.
        """
        selected = set(selected)
        facts_by_text = self._dedupe(self.load_all())
        updated = [Fact(fact.text, fact.text in selected) for fact in facts_by_text.values()]
        self._write(updated)
        logger.info("Updated enabled facts: %d of %d enabled", sum(f.enabled for f in updated), len(updated))

    @staticmethod
    def _dedupe(facts: Iterable[Fact]) -> dict[str, Fact]:
        # Keeps the position of the first occurrence, the value of the last
        facts_by_text = {}
        for fact in facts:
            facts_by_text[fact.text] = fact
        return facts_by_text

    def _write(self, facts: Iterable[Fact]) -> None:
        payload = [fact.to_dict() for fact in facts]
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as fh:
                json.dump(payload, fh)
        except (OSError, TypeError) as e:
            logger.exception("%s %s: %s", self.WRITE_ERROR_MESSAGE, self.path, e)
            raise StorageError(self.WRITE_ERROR_MESSAGE) from e
