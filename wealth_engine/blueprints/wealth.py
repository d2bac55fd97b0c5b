"""
Wealth analytics blueprint.

This module exposes the dashboard summary and the future projections computed
from the household's active records. Both endpoints are read-only.
"""

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from wealth_engine.database.base import get_session
from wealth_engine.services.wealth_service import WealthAnalyticsService

wealth_bp = Blueprint("wealth", __name__, url_prefix="/api")

MAX_AGE = 120


@wealth_bp.route("/dashboard/summary", methods=["GET"])
def get_dashboard_summary() -> Any:
    """Get the family financial health overview.

    Returns:
        JSON response with totals, wealth health score and breakdowns
    """
    db = get_session()
    try:
        summary = WealthAnalyticsService(db).get_dashboard_summary()
        return jsonify(summary.model_dump(mode="json")), 200

    except Exception as e:
        current_app.logger.error(f"Error computing dashboard summary: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500

    finally:
        db.close()


@wealth_bp.route("/future/projections", methods=["GET"])
def get_future_projections() -> Any:
    """Get year-wise future benefit projections.

    Query Args:
        current_age: Current age of the household head (defaults to settings)

    Returns:
        JSON response with projections at 5-year horizons
    """
    raw_age = request.args.get("current_age")
    if raw_age is None:
        current_age = current_app.config["DEFAULT_CURRENT_AGE"]
    else:
        try:
            current_age = int(raw_age)
        except ValueError:
            return jsonify({"error": "current_age must be an integer"}), 400

    if not 0 <= current_age <= MAX_AGE:
        return jsonify({"error": f"current_age must be between 0 and {MAX_AGE}"}), 400

    db = get_session()
    try:
        report = WealthAnalyticsService(db).get_future_projections(current_age)
        return jsonify(report.model_dump(mode="json")), 200

    except Exception as e:
        current_app.logger.error(f"Error computing future projections: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500

    finally:
        db.close()
