"""Service health and metadata endpoints."""

from fastapi import APIRouter, Depends

from record_validation import __version__
from record_validation.api.dependencies import get_settings
from record_validation.config.settings import RecordValidationConfig

router = APIRouter(tags=["System"])


@router.get("/health", summary="Health check")
def health():
    return {"status": "ok"}


@router.get("/info", summary="Service metadata")
def info(settings: RecordValidationConfig = Depends(get_settings)):
    return {
        "name": settings.app_name,
        "version": __version__,
        "environment": settings.environment,
    }
