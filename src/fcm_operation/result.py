"""Normalization of provider responses and errors into operation results."""

from typing import Any

from firebase_admin import exceptions, messaging
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fcm_operation.errors import UNKNOWN_ERROR_CODE


class _ResultModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorInfo(_ResultModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class OperationResult(_ResultModel):
    success: bool = False
    dry_run: bool = False
    message_id: str | None = None
    success_count: int | None = None
    failure_count: int | None = None
    failed_tokens: list[str] | None = None
    error: ErrorInfo | None = None

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys and unset fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def single_send_result(message_id: str, dry_run: bool) -> OperationResult:
    """Result of a token or topic send.  Dry runs carry no message id."""
    return OperationResult(
        success=True,
        dry_run=dry_run,
        message_id=None if dry_run else message_id,
    )


def multicast_result(
    tokens: list[str],
    response: messaging.BatchResponse,
    dry_run: bool,
) -> OperationResult:
    """Result of a multicast send.

    ``response.responses`` is index-aligned with *tokens*; failed tokens
    are reported in their original order.
    """
    failed_tokens = None
    if response.failure_count > 0:
        failed_tokens = [
            tokens[idx]
            for idx, resp in enumerate(response.responses)
            if not resp.success and idx < len(tokens) and tokens[idx]
        ]

    return OperationResult(
        success=True,
        dry_run=dry_run,
        success_count=response.success_count,
        failure_count=response.failure_count,
        failed_tokens=failed_tokens,
    )


def failure_result(exc: BaseException, dry_run: bool) -> OperationResult:
    code = getattr(exc, "code", None)
    return OperationResult(
        success=False,
        dry_run=dry_run,
        error=ErrorInfo(
            code=str(code) if code else UNKNOWN_ERROR_CODE,
            message=str(exc) or "Unknown error",
            details=_error_details(exc),
        ),
    )


def _error_details(exc: BaseException) -> dict[str, Any]:
    details: dict[str, Any] = {"type": type(exc).__name__}
    if isinstance(exc, exceptions.FirebaseError):
        if exc.cause is not None:
            details["cause"] = str(exc.cause)
        if exc.http_response is not None:
            details["httpStatus"] = exc.http_response.status_code
    elif exc.__cause__ is not None:
        details["cause"] = str(exc.__cause__)
    return details
