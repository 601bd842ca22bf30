"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from core.independence import InvalidTimelineError, ProjectionOutOfRangeError, project
from core.presenter import present
from schemas.projection import HealthResponse, ProjectionForm

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidTimelineError)
def _handle_invalid_timeline(exc: InvalidTimelineError):
    logger.warning(
        "rejected projection: current_age=%s retirement_age=%s",
        exc.current_age,
        exc.retirement_age,
    )
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ProjectionOutOfRangeError)
def _handle_out_of_range(exc: ProjectionOutOfRangeError):
    logger.warning("rejected projection: %s", exc.__cause__)
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse(message="pong").model_dump())


@api_bp.get("/projection/defaults")
def projection_defaults() -> Any:
    """Values the calculator form starts with."""
    return jsonify(ProjectionForm.defaults().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Run one projection for a submitted form."""
    raw_payload = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        return jsonify({"detail": "request body must be a JSON object"}), HTTPStatus.BAD_REQUEST

    form = ProjectionForm.model_validate(raw_payload)
    result = project(form.to_input())
    logger.info(
        "projection computed: years=%d on_track=%s",
        result.yearsToRetirement,
        result.isOnTrack,
    )
    return jsonify(present(result).model_dump())
