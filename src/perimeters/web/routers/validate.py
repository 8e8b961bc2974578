"""Configuration validation endpoints."""

from fastapi import APIRouter

from perimeters.application.config import ConfigError, load_config_from_dict
from perimeters.web.schemas.requests import ConfigValidateRequest
from perimeters.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a perimeter configuration.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result with errors, one per invalid field.
    """
    try:
        load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": d["message"], "path": d["path"]} for d in e.details
            ],
        )
    return ValidationResultSchema(is_valid=True)
