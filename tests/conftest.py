"""Shared fixtures for fcm_operation tests."""

import logging
from collections.abc import Callable, Generator
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from flask import Flask
from flask.testing import FlaskClient

from fcm_operation import client as client_module
from fcm_operation.app import create_app
from fcm_operation.client import FirebaseMessenger
from fcm_operation.config import FirebaseConfig
from fcm_operation.operation import OperationContext

MESSAGE_ID = "projects/demo-project/messages/0:1700000000000000%abc123"


@pytest.fixture(autouse=True)
def clear_cached_app() -> Generator[None, None, None]:
    """Every test starts without a cached Firebase app."""
    client_module._app = None
    yield
    client_module._app = None


@pytest.fixture()
def mock_messenger() -> MagicMock:
    """Messenger whose single sends succeed with a fixed message id."""
    messenger = MagicMock(spec=FirebaseMessenger)
    messenger.send.return_value = MESSAGE_ID
    return messenger


@pytest.fixture()
def batch_response() -> Callable[[list[bool]], SimpleNamespace]:
    """Build a multicast response from per-token success flags."""

    def _make(outcomes: list[bool]) -> SimpleNamespace:
        return SimpleNamespace(
            responses=[SimpleNamespace(success=ok) for ok in outcomes],
            success_count=sum(outcomes),
            failure_count=len(outcomes) - sum(outcomes),
        )

    return _make


@pytest.fixture()
def mock_logger() -> MagicMock:
    return MagicMock(spec=logging.Logger)


@pytest.fixture()
def firebase_config() -> FirebaseConfig:
    return FirebaseConfig(credential_env_var=None, project_id=None)


@pytest.fixture()
def context(mock_logger: MagicMock, firebase_config: FirebaseConfig) -> OperationContext:
    return OperationContext(env={}, logger=mock_logger, firebase_config=firebase_config)


@pytest.fixture()
def patched_firebase(mock_messenger: MagicMock) -> Generator[MagicMock, None, None]:
    """Skip real app initialization and route sends to mock_messenger.

    Yields the patched get_app so tests can assert it was (not) called.
    """
    with (
        patch("fcm_operation.operation.get_app") as get_app,
        patch(
            "fcm_operation.operation.FirebaseMessenger",
            return_value=mock_messenger,
        ),
    ):
        get_app.return_value = MagicMock(name="firebase_app")
        yield get_app


@pytest.fixture()
def app(context: OperationContext) -> Flask:
    app = create_app(context)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
