"""Host-facing entry point for the Firebase messaging operation."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fcm_operation.client import FirebaseMessenger, get_app, resolve_credential_path
from fcm_operation.config import FirebaseConfig
from fcm_operation.dispatcher import dispatch
from fcm_operation.options import OperationOptions, parse_options
from fcm_operation.result import failure_result

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OperationContext:
    """What the host platform exposes to an operation run."""

    env: Mapping[str, str] = field(default_factory=lambda: os.environ)
    logger: logging.Logger | logging.LoggerAdapter = logger
    firebase_config: FirebaseConfig = field(default_factory=FirebaseConfig)


def handler(
    raw_options: Mapping[str, Any],
    context: OperationContext | None = None,
) -> dict[str, Any]:
    """Run the operation once and return its JSON-ready result.

    Never raises: validation, credential and provider failures are all
    returned as a result with ``success`` false and an ``error`` object.
    """
    context = context or OperationContext()
    options: OperationOptions | None = None

    try:
        options = parse_options(raw_options)
        credential_path = resolve_credential_path(
            options, context.env, context.firebase_config
        )
        app = get_app(credential_path, context.firebase_config)
        result = dispatch(options, FirebaseMessenger(app), context.logger)
    except Exception as exc:
        context.logger.error(
            "Firebase messaging error: %s",
            exc,
            extra={"error_type": type(exc).__name__},
        )
        if options is not None:
            dry_run = options.dry_run
        else:
            dry_run = bool(raw_options.get("dryRun") or raw_options.get("dry_run"))
        result = failure_result(exc, dry_run=dry_run)

    return result.to_payload()
