"""HTTP interface for the record validation service."""

from record_validation.api.main import create_app

__all__ = ["create_app"]
