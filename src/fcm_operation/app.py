import logging

from flask import Flask

from fcm_operation.config import OperationConfig
from fcm_operation.definition import OPERATION_ID
from fcm_operation.log import setup_logging
from fcm_operation.operation import OperationContext
from fcm_operation.routes import bp, health_bp

logger = logging.getLogger(__name__)


def create_app(context: OperationContext | None = None) -> Flask:
    """Flask application factory.

    Args:
        context: Operation context (env + logger) handed to every run;
                 tests pass one with a fake env.
    """
    setup_logging(OperationConfig().log_level, static_fields={"operation": OPERATION_ID})

    app = Flask(__name__)
    app.extensions["operation_context"] = context or OperationContext()

    app.register_blueprint(bp)
    app.register_blueprint(health_bp)

    logger.info("Firebase messaging operation initialized")
    return app
