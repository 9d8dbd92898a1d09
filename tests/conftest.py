"""Pytest configuration helpers."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from taskwire.config import get_settings
from taskwire.models import AgentCard, AgentCardBuilder, Clock, fixed_clock

FIXED_NOW = datetime(2025, 1, 15, 10, 30, tzinfo=UTC)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Any:
    """Make every test see the environment it sets up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> Clock:
    """Clock frozen at 2025-01-15T10:30:00Z."""
    return fixed_clock(FIXED_NOW)


@pytest.fixture
def send_request_payload() -> dict[str, Any]:
    """Canonical tasks/send request."""
    return {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "tasks/send",
        "params": {
            "taskId": "t-1",
            "sessionId": "s-1",
            "message": {"role": "user", "parts": [{"type": "text", "text": "hi"}]},
        },
    }


@pytest.fixture
def agent_card_payload() -> dict[str, Any]:
    """Agent card wire document with every field populated."""
    return {
        "name": "Translator",
        "description": "Translates text between languages",
        "url": "https://agents.example.com/translator",
        "provider": {"organization": "Example Corp", "url": "https://example.com"},
        "version": "2.1.0",
        "documentationUrl": "https://docs.example.com/translator",
        "capabilities": {
            "streaming": True,
            "pushNotifications": False,
            "stateTransitionHistory": False,
        },
        "authentication": {"schemes": ["Bearer"]},
        "defaultInputModes": ["text"],
        "defaultOutputModes": ["text", "data"],
        "skills": [
            {
                "id": "translate",
                "name": "Translate",
                "description": "Translate text",
                "tags": ["i18n"],
                "examples": ["Translate 'hello' to French"],
                "inputModes": ["text"],
                "outputModes": ["text"],
            }
        ],
    }


@pytest.fixture
def echo_card() -> AgentCard:
    """Card of a minimal echo agent with streaming and push notifications enabled."""
    return (
        AgentCardBuilder("Echo Agent", "http://localhost:8080/a2a", "1.0.0")
        .with_capabilities(streaming=True, push_notifications=True)
        .add_skill("echo", "Echo", description="Echoes back your message")
        .build()
    )
