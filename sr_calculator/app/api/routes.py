"""HTTP routes for the Flask API."""

import uuid
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from sr_calculator.core.calculator import calculate_retirement
from sr_calculator.core.health import get_health_status
from sr_calculator.domain.validation import validate_inputs
from sr_calculator.schemas.calculator import (
    ApiDescription,
    CalculateRequest,
    CalculateResponse,
    CalculationData,
    CalculationInput,
    CalculationOutput,
    ValidationFailure,
)
from sr_calculator.utils.logging import get_logger, set_request_id

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.before_request
def _tag_request() -> None:
    set_request_id(request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12])


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload errors=%d", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(Exception)
def _handle_unexpected_error(exc: Exception):
    """Anything else, malformed JSON bodies included, is a generic server fault."""
    logger.exception("request to %s failed: %s", request.endpoint, exc)
    if request.endpoint == "api.calculate":
        message = "Failed to process calculation"
    else:
        message = "Failed to process request"
    return (
        jsonify({"error": "Internal server error", "message": message}),
        HTTPStatus.INTERNAL_SERVER_ERROR,
    )


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    settings = current_app.config["SR_SETTINGS"]
    response = get_health_status(
        service=settings.service_name,
        version=settings.version,
        started_at=current_app.config["SR_STARTED_AT"],
    )
    return jsonify(response.model_dump())


@api_bp.get("/calculate")
def describe_calculate() -> Any:
    """Describe the calculate endpoint and its fields."""
    return jsonify(ApiDescription().model_dump())


@api_bp.post("/calculate")
def calculate() -> Any:
    """Run the retirement projection for one set of inputs."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculateRequest.model_validate(raw_payload)
    calculator_input = payload.to_input()

    validation = validate_inputs(calculator_input)
    if not validation.is_valid:
        logger.warning("validation failed errors=%s", validation.errors)
        failure = ValidationFailure(details=validation.errors, warnings=validation.warnings)
        return jsonify(failure.model_dump()), HTTPStatus.BAD_REQUEST

    result = calculate_retirement(calculator_input)
    logger.info(
        "calculated corpus=%.2f duration_months=%d warnings=%d",
        result.retirementCorpus,
        result.retirementDurationMonths,
        len(result.warnings),
    )

    response = CalculateResponse(
        data=CalculationData(
            input=CalculationInput.model_validate(calculator_input.model_dump()),
            output=CalculationOutput.from_result(result),
            warnings=result.warnings,
        )
    )
    return jsonify(response.model_dump())
