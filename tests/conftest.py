from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient
from nacl.signing import SigningKey

from factbot.server import create_app
from factbot.store import FactStore

ALLOWED_USER = "LuggageMoose"
TIMESTAMP = "1700000000"


def make_interaction(interaction_type: int, data: dict | None = None, username: str | None = ALLOWED_USER) -> dict:
    interaction = {"type": interaction_type, "id": "1", "token": "tok"}
    if username is not None:
        interaction["member"] = {"user": {"id": "42", "username": username}}
    if data is not None:
        interaction["data"] = data
    return interaction


def command(name: str, username: str | None = ALLOWED_USER) -> dict:
    return make_interaction(2, {"name": name, "type": 1}, username)


def modal_submit(text: str, username: str | None = ALLOWED_USER) -> dict:
    data = {
        "custom_id": "fact_modal",
        "components": [{"type": 1, "components": [{"type": 4, "custom_id": "fact", "value": text}]}],
    }
    return make_interaction(5, data, username)


def component_select(values: list[str], username: str | None = ALLOWED_USER) -> dict:
    return make_interaction(3, {"custom_id": "select_facts", "component_type": 3, "values": values}, username)


def write_facts(path, facts: list[dict]) -> None:
    path.write_text(json.dumps(facts), encoding="utf-8")


def read_facts(path) -> list[dict]:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def facts_path(tmp_path):
    return tmp_path / "facts.json"


@pytest.fixture
def store(facts_path):
    return FactStore(str(facts_path))


@pytest.fixture
def signing_key():
    return SigningKey.generate()


@pytest.fixture
def public_key(signing_key):
    return signing_key.verify_key.encode().hex()


@pytest.fixture
def client(store, public_key):
    return TestClient(create_app(store, public_key))


@pytest.fixture
def signed_post(client, signing_key):
    """POST a body to / with valid Discord signature headers."""

    def _post(payload, timestamp: str = TIMESTAMP):
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        signature = signing_key.sign(timestamp.encode() + body).signature.hex()
        return client.post(
            "/",
            content=body,
            headers={
                "X-Signature-Ed25519": signature,
                "X-Signature-Timestamp": timestamp,
                "Content-Type": "application/json",
            },
        )

    return _post
