"""Configuration validation endpoints."""

from fastapi import APIRouter

from renobudget.application.config import load_config_from_dict, validate_config
from renobudget.web.schemas.requests import ConfigRequest
from renobudget.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(request: ConfigRequest) -> ValidationResultSchema:
    """Validate a room estimate configuration without estimating.

    Schema errors are returned as a 422 error response; geometry errors and
    advisories are returned in the result.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
