"""Firebase app initialization and the messaging client wrapper."""

import json
import logging
import threading
from collections.abc import Mapping

import firebase_admin
from firebase_admin import App, credentials, messaging
from google.auth.exceptions import DefaultCredentialsError

from fcm_operation.config import FirebaseConfig
from fcm_operation.errors import InitializationError
from fcm_operation.options import OperationOptions

logger = logging.getLogger(__name__)

# Process-wide handle, created on first use and reused by every invocation.
_app: App | None = None
_app_lock = threading.Lock()


def resolve_credential_path(
    options: OperationOptions,
    env: Mapping[str, str],
    config: FirebaseConfig,
) -> str | None:
    """Return the service-account file path, or None for default credentials.

    The env var name comes from the options first, then from
    ``FIREBASE_CREDENTIAL_ENV_VAR``.  Raises InitializationError when a
    name is configured but the variable is not set in *env*.
    """
    env_var = options.credential_env_var or config.credential_env_var
    if not env_var:
        return None

    path = env.get(env_var)
    if not path:
        raise InitializationError(f"Environment variable {env_var} is not set")
    return path


def get_app(credential_path: str | None, config: FirebaseConfig) -> App:
    """Return the cached Firebase app, creating it on first call.

    Once created, later calls return the same app without looking at
    *credential_path* again.
    """
    global _app
    if _app is not None:
        return _app

    with _app_lock:
        if _app is None:
            _app = _initialize(credential_path, config)
    return _app


def reset_app() -> None:
    """Delete the cached app so the next get_app() initializes again."""
    global _app
    with _app_lock:
        if _app is not None:
            firebase_admin.delete_app(_app)
            _app = None


def _initialize(credential_path: str | None, config: FirebaseConfig) -> App:
    app_options = {"projectId": config.project_id} if config.project_id else None
    try:
        if credential_path:
            with open(credential_path, encoding="utf-8") as f:
                service_account = json.load(f)
            credential = credentials.Certificate(service_account)
        else:
            credential = credentials.ApplicationDefault()
            # Application default credentials load lazily; resolve them now.
            credential.get_credential()
        app = firebase_admin.initialize_app(
            credential, options=app_options, name=config.app_name
        )
    except (OSError, ValueError, DefaultCredentialsError) as exc:
        raise InitializationError(f"Failed to initialize Firebase: {exc}") from exc

    try:
        project_id = app.project_id
    except ValueError as exc:
        firebase_admin.delete_app(app)
        raise InitializationError(f"Failed to initialize Firebase: {exc}") from exc
    if not project_id:
        firebase_admin.delete_app(app)
        raise InitializationError(
            "Failed to initialize Firebase: project ID could not be determined; "
            "set FIREBASE_PROJECT_ID or GOOGLE_CLOUD_PROJECT"
        )

    logger.info(
        "Firebase app initialized",
        extra={
            "app_name": config.app_name,
            "credential_source": "service_account" if credential_path else "default",
        },
    )
    return app


class FirebaseMessenger:
    """Wraps firebase_admin.messaging calls bound to one initialized app."""

    def __init__(self, app: App) -> None:
        self._app = app

    def send(self, message: messaging.Message, dry_run: bool = False) -> str:
        """Send a single-recipient message and return its message id.

        Raises firebase_admin.exceptions.FirebaseError on provider failure.
        """
        return messaging.send(message, dry_run=dry_run, app=self._app)

    def send_multicast(
        self, message: messaging.MulticastMessage, dry_run: bool = False
    ) -> messaging.BatchResponse:
        """Send one message to up to 500 tokens, one outcome per token."""
        return messaging.send_each_for_multicast(
            message, dry_run=dry_run, app=self._app
        )
