"""Client for generating NPC descriptions through the Ollama proxy."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

import requests

from .types import Npc

DEFAULT_URL = "http://localhost:3000/api/generate"
DEFAULT_MODEL = "llama2"


class DescriptionError(Exception):
    """Raised when a description cannot be generated."""


def build_prompt(npc: Npc) -> str:
    """Compose the language-model prompt describing an NPC."""
    scores = npc.ability_scores
    return (
        f"Create a brief but vivid description for a level {npc.level} "
        f"{npc.character_class.value} named {npc.name}. "
        "They have the following attributes: "
        f"Strength {scores.strength}, Dexterity {scores.dexterity}, "
        f"Constitution {scores.constitution}, "
        f"Intelligence {scores.intelligence}, Wisdom {scores.wisdom}, "
        f"Charisma {scores.charisma}. "
        "Make the description feel like it belongs in a fantasy RPG setting. "
        "Focus on their appearance, personality, and notable features. "
        "Keep it to 2-3 sentences."
    )


def build_request(npc: Npc, model: str = DEFAULT_MODEL) -> dict[str, Any]:
    """Build the JSON body of a non-streaming generate request."""
    return {"model": model, "prompt": build_prompt(npc), "stream": False}


def _status_text(response: requests.Response) -> str:
    try:
        phrase = HTTPStatus(response.status_code).phrase
    except ValueError:
        phrase = response.reason or ""
    return f"{response.status_code} {phrase}".rstrip()


def generate_description(
    npc: Npc,
    url: str = DEFAULT_URL,
    model: str = DEFAULT_MODEL,
    session: requests.Session | None = None,
) -> str:
    """Ask the proxy for a description of ``npc`` and return its text."""
    post = session.post if session is not None else requests.post
    try:
        response = post(url, json=build_request(npc, model))
    except requests.RequestException as exc:
        raise DescriptionError(
            f"Failed to connect to proxy: {exc}. "
            "Make sure the proxy server is running at http://localhost:3000"
        ) from exc

    if not response.ok:
        raise DescriptionError(
            f"Ollama server error: {_status_text(response)}. "
            "Make sure Ollama is running and the model is installed."
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise DescriptionError(f"Failed to parse response: {exc}") from exc
    text = payload.get("response") if isinstance(payload, dict) else None
    if not isinstance(text, str):
        raise DescriptionError("Failed to parse response: missing field `response`")
    return text