"""Recipient-type dispatch to the FCM single and multicast send paths."""

import logging

from fcm_operation.client import FirebaseMessenger
from fcm_operation.enums import ALL_RECIPIENT_TYPES, RecipientType
from fcm_operation.errors import InvalidOptionsError, InvalidRecipientTypeError
from fcm_operation.message import build_message
from fcm_operation.options import OperationOptions
from fcm_operation.result import (
    OperationResult,
    multicast_result,
    single_send_result,
)

MAX_MULTICAST_TOKENS = 500

_default_logger = logging.getLogger(__name__)


def dispatch(
    options: OperationOptions,
    messenger: FirebaseMessenger,
    logger: logging.Logger | logging.LoggerAdapter = _default_logger,
) -> OperationResult:
    """Validate recipient options and send through exactly one path.

    Raises InvalidOptionsError before any provider call when the selected
    recipient value is missing or over the multicast limit, and
    InvalidRecipientTypeError for an unknown recipient type.  Provider
    errors propagate unchanged.
    """
    recipient_type = options.recipient_type
    if not recipient_type:
        raise InvalidOptionsError("Recipient type is required")

    if recipient_type == RecipientType.TOKEN:
        return _send_to_token(options, messenger, logger)
    if recipient_type == RecipientType.TOKENS:
        return _send_to_tokens(options, messenger, logger)
    if recipient_type == RecipientType.TOPIC:
        return _send_to_topic(options, messenger, logger)

    raise InvalidRecipientTypeError(
        f"Invalid recipient type: {recipient_type!r} "
        f"(expected one of {', '.join(sorted(ALL_RECIPIENT_TYPES))})"
    )


def _send_to_token(
    options: OperationOptions,
    messenger: FirebaseMessenger,
    logger: logging.Logger | logging.LoggerAdapter,
) -> OperationResult:
    if not options.device_token:
        raise InvalidOptionsError(
            "Device token is required for single token recipient type"
        )

    message = build_message(options, token=options.device_token)
    message_id = messenger.send(message.to_message(), dry_run=options.dry_run)

    if options.dry_run:
        logger.info("Firebase message validated successfully (dry run mode)")
    else:
        logger.info(
            "Firebase message sent successfully: %s",
            message_id,
            extra={"message_id": message_id},
        )
    return single_send_result(message_id, options.dry_run)


def _send_to_tokens(
    options: OperationOptions,
    messenger: FirebaseMessenger,
    logger: logging.Logger | logging.LoggerAdapter,
) -> OperationResult:
    tokens = options.device_tokens
    if not tokens:
        raise InvalidOptionsError(
            "Device tokens array is required for multicast recipient type"
        )
    if len(tokens) > MAX_MULTICAST_TOKENS:
        raise InvalidOptionsError(
            f"Maximum {MAX_MULTICAST_TOKENS} tokens allowed per multicast message"
        )

    message = build_message(options)
    response = messenger.send_multicast(
        message.to_multicast(tokens), dry_run=options.dry_run
    )

    log_ctx = {
        "success_count": response.success_count,
        "failure_count": response.failure_count,
    }
    if options.dry_run:
        logger.info(
            "Firebase multicast validated (dry run): %d valid, %d invalid",
            response.success_count,
            response.failure_count,
            extra=log_ctx,
        )
    else:
        logger.info(
            "Firebase multicast sent: %d successful, %d failed",
            response.success_count,
            response.failure_count,
            extra=log_ctx,
        )
    return multicast_result(tokens, response, options.dry_run)


def _send_to_topic(
    options: OperationOptions,
    messenger: FirebaseMessenger,
    logger: logging.Logger | logging.LoggerAdapter,
) -> OperationResult:
    if not options.topic:
        raise InvalidOptionsError("Topic name is required for topic recipient type")

    message = build_message(options)
    message_id = messenger.send(message.to_message(), dry_run=options.dry_run)

    log_ctx = {"topic": options.topic}
    if options.dry_run:
        logger.info(
            "Firebase topic message validated successfully (dry run mode): %s",
            options.topic,
            extra=log_ctx,
        )
    else:
        logger.info(
            "Firebase topic message sent successfully: %s to topic %s",
            message_id,
            options.topic,
            extra={**log_ctx, "message_id": message_id},
        )
    return single_send_result(message_id, options.dry_run)
