"""
Configuration module for the record validation service.
"""
from .settings import (
    RecordValidationConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'RecordValidationConfig',
    'get_config',
    'load_config',
    'reload_config'
]
