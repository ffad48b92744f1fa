import logging
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request

from fcm_operation.definition import OPERATION_ID, describe, overview
from fcm_operation.operation import OperationContext, handler

logger = logging.getLogger(__name__)

bp = Blueprint("operation", __name__, url_prefix=f"/operations/{OPERATION_ID}")
health_bp = Blueprint("health", __name__)


def _error(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": message}), status


def _options_body() -> dict[str, Any] | None:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else None


@bp.get("")
def get_definition() -> tuple[Response, int]:
    return jsonify(describe()), 200


@bp.post("/overview")
def post_overview() -> tuple[Response, int]:
    options = _options_body()
    if options is None:
        return _error("Request body must be a JSON object", 400)
    return jsonify(overview(options)), 200


@bp.post("")
def post_run() -> tuple[Response, int]:
    options = _options_body()
    if options is None:
        return _error("Request body must be a JSON object", 400)

    context: OperationContext = current_app.extensions["operation_context"]
    result = handler(options, context)

    logger.info(
        "Operation run finished",
        extra={
            "recipient_type": options.get("recipientType"),
            "success": result["success"],
        },
    )
    return jsonify(result), 200


@health_bp.get("/health")
def health() -> tuple[Response, int]:
    return jsonify({"status": "healthy"}), 200
