"""Application configuration and settings."""

from .api_config import API_CONFIG
from .simulation_config import (
    SIMULATION_CONFIG,
    VALIDATION_CONFIG
)

__all__ = [
    'API_CONFIG',
    'SIMULATION_CONFIG',
    'VALIDATION_CONFIG'
]
