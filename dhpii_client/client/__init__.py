# dhpii_client/client/__init__.py
"""HTTP client and data transfer models"""

from .api import DHPIIClient, DEFAULT_BASE_URL, DEFAULT_API_KEY
from .errors import error_message, InvalidResponseError
from .models import (
    DetectedEntity,
    TextDetectionRequest,
    TextDetectionResponse,
    ImageDetectionResponse,
    TextAnonymizationRequest,
    TextAnonymizationResponse,
    ImageAnonymizationResponse,
    HealthStatus,
)

__all__ = [
    'DHPIIClient',
    'DEFAULT_BASE_URL',
    'DEFAULT_API_KEY',
    'error_message',
    'InvalidResponseError',
    'DetectedEntity',
    'TextDetectionRequest',
    'TextDetectionResponse',
    'ImageDetectionResponse',
    'TextAnonymizationRequest',
    'TextAnonymizationResponse',
    'ImageAnonymizationResponse',
    'HealthStatus',
]
