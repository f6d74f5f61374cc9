"""HTTP server exposing the /arithmetic endpoint."""
from typing import Any, Optional

from flask import Blueprint, Flask, jsonify, request
from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress
from werkzeug.exceptions import HTTPException

from arithmetic_calculator.common.errors import ArithmeticRequestError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.server.handler import validate_and_compute

arithmetic_bp = Blueprint("arithmetic", __name__)


@arithmetic_bp.route("/arithmetic", methods=["GET"])
def arithmetic():
    """
    Perform one arithmetic operation.

    Query parameters:
        - operation: add | subtract | multiply | divide
        - operand1, operand2: decimal or exponential numbers

    Returns ``{"result": <number|null>}`` with status 200, or
    ``{"error": "<message>"}`` with status 400.
    """
    outcome = validate_and_compute(request.args)
    logger.info(f"🧮 {request.args.get('operation')}({request.args.get('operand1')}, "
                f"{request.args.get('operand2')}) = {outcome.result}")
    return jsonify(outcome.model_dump())


@arithmetic_bp.route("/health", methods=["GET"])
def health():
    """Liveness check."""
    return jsonify({"status": "ok"})


@arithmetic_bp.app_errorhandler(ArithmeticRequestError)
def handle_request_error(exc: ArithmeticRequestError):
    logger.warning(f"🧮❌ Rejected request ({exc.field}): {exc.message}")
    return jsonify({"error": exc.message}), 400


@arithmetic_bp.app_errorhandler(HTTPException)
def handle_http_error(exc: HTTPException):
    # Keep every response JSON, including 404/405
    return jsonify({"error": exc.description}), exc.code


def create_app(config: Optional[dict[str, Any]] = None) -> Flask:
    """
    Build the Flask application.

    :param dict config: Optional configuration overrides (e.g. ``{"TESTING": True}``)

    :return: Configured application
    :rtype: Flask
    """
    app = Flask(__name__)
    if config:
        app.config.update(config)
    app.register_blueprint(arithmetic_bp)
    return app


class ArithmeticServer(BaseModel):
    """
    HTTP server answering arithmetic requests.

    Features:
        - One stateless computation per request.
        - JSON responses for results and errors alike.
    """

    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=9000, ge=1, le=65535, description="Server TCP port")

    def start(self) -> None:
        """
        Start serving until the process is stopped.

        :return: None
        """
        logger.info(f"🖥️ Starting server on {self.host}:{self.port}")
        create_app().run(host=str(self.host), port=self.port)
