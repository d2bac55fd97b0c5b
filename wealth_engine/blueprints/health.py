"""Health check blueprint."""

from flask import Blueprint, Response, jsonify

health_bp = Blueprint("health", __name__)

SERVICE_NAME = "wealth-engine"


@health_bp.route("/healthz")
def health_check() -> Response:
    """Liveness probe; does not touch the database.

    Returns:
        JSON response with status and service name
    """
    return jsonify({"status": "ok", "service": SERVICE_NAME})
