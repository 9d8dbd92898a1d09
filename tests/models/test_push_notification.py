"""Tests for PushNotificationConfig."""

import pytest
from pydantic import ValidationError

from taskwire.models import PushNotificationConfig


def test_url_only() -> None:
    """Test the minimal config."""
    config = PushNotificationConfig(url="https://client.example.com/hook")

    assert config.to_dict() == {"url": "https://client.example.com/hook"}


def test_full_config() -> None:
    """Test a config with token and authentication details."""
    payload = {
        "url": "https://client.example.com/hook",
        "token": "tok-123",
        "authentication": {"schemes": ["Bearer"], "credentials": "secret"},
    }

    config = PushNotificationConfig.from_dict(payload)

    assert config.token == "tok-123"
    assert config.to_dict() == payload


def test_url_required() -> None:
    """Test that a config without url is rejected."""
    with pytest.raises(ValidationError):
        PushNotificationConfig.from_dict({"token": "tok-123"})
