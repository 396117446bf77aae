# dhpii_client/client/api.py
"""
Client for the DHPII detection and anonymization API.

Example usage:
    client = DHPIIClient()

    # Check the API is up
    print(client.health_check().status)

    # Detect PII in text
    response = client.detect_text(TextDetectionRequest(text="John Doe, SSN 123-45-6789"))
    for entity in response.results:
        print(f"{entity.entity_type}: {entity.text} ({entity.confidence:.2f})")

    # Redact an image
    result = client.anonymize_image("scan.png", anonymization_type="redaction")
    Path("scan_redacted.png").write_bytes(client.download_image(result.anonymized_image_url))
"""

import mimetypes
from pathlib import Path
from typing import Optional, List, Dict, Union, BinaryIO, Tuple, Type, TypeVar
from urllib.parse import urljoin

import requests
from pydantic import BaseModel, ValidationError

from .models import (
    TextDetectionRequest,
    TextDetectionResponse,
    ImageDetectionResponse,
    TextAnonymizationRequest,
    TextAnonymizationResponse,
    ImageAnonymizationResponse,
    HealthStatus,
    SupportedLanguages,
)
from .errors import InvalidResponseError
from ..utils.logging import get_logger

logger = get_logger('client')

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_API_KEY = "dhpii-api-key"
API_KEY_HEADER = "x-api-key"

# Fixed so a dead host cannot hang the console forever
REQUEST_TIMEOUT = 30

ImageInput = Union[str, Path, bytes, BinaryIO]
ModelT = TypeVar("ModelT", bound=BaseModel)


class DHPIIClient:
    """
    Thin typed wrapper over the DHPII REST API.

    Every call is a single request with no retries. HTTP error statuses raise
    ``requests.HTTPError`` with the response attached and transport failures
    raise the underlying ``requests.RequestException``. A successful response
    whose body does not have the documented shape raises
    ``InvalidResponseError``, itself a ``requests.RequestException``. Use
    :func:`dhpii_client.client.errors.error_message` to turn either into text.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str = DEFAULT_API_KEY,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. http://localhost:8000
            api_key: Value sent in the x-api-key header on every call
            session: Optional pre-built requests session
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = REQUEST_TIMEOUT

        # No session-wide Content-Type: requests picks JSON or multipart per call
        self.session = session or requests.Session()
        self.session.headers[API_KEY_HEADER] = api_key

    def _request(self, method: str, endpoint: str, model: Type[ModelT], **kwargs) -> ModelT:
        """Make an HTTP request to the API and parse the JSON body into ``model``."""
        response = self._send(method, f"{self.base_url}{endpoint}", **kwargs)

        try:
            return model.model_validate(response.json())
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first['loc'])
            problem = f"{location}: {first['msg']}" if location else first['msg']
            logger.warning(f"{method} {endpoint} returned an unexpected body: {e}")
            raise InvalidResponseError(
                f"Unexpected response from {endpoint}: {problem}",
                response=response
            ) from e

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault('timeout', self.timeout)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {type(e).__name__}: {e}")
            raise

        if response.status_code >= 400:
            logger.warning(f"{method} {url} returned HTTP {response.status_code}")
            response.raise_for_status()

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    @staticmethod
    def _image_part(image: ImageInput, filename: Optional[str]) -> Tuple[str, bytes, str]:
        """Build the (filename, content, content type) tuple for the multipart image field."""
        if isinstance(image, (str, Path)):
            path = Path(image)
            content = path.read_bytes()
            name = filename or path.name
        elif isinstance(image, (bytes, bytearray)):
            content = bytes(image)
            name = filename or "image"
        else:
            content = image.read()
            name = filename or Path(getattr(image, 'name', None) or "image").name

        content_type = mimetypes.guess_type(name)[0] or 'application/octet-stream'
        return name, content, content_type

    @staticmethod
    def _entity_fields(entities: Optional[List[str]]) -> List[Tuple[str, str]]:
        """One repeated 'entities' form field per selected entity."""
        if not entities:
            return []
        return [('entities', entity) for entity in entities]

    # -------------------------------------------------------------------------
    # Detection
    # -------------------------------------------------------------------------

    def detect_text(self, request: TextDetectionRequest) -> TextDetectionResponse:
        """
        Detect PII/PHI entities in text.

        Args:
            request: Text plus optional language, entity filter, threshold and allow list

        Returns:
            TextDetectionResponse with results, statistics, language_used and session_id
        """
        payload = request.to_payload()
        logger.debug(f"Text detection request: {len(request.text)} chars, keys={sorted(payload)}")

        return self._request("POST", "/api/v1/detection/text", TextDetectionResponse, json=payload)

    def detect_image(
        self,
        image: ImageInput,
        language: str = 'en',
        entities: Optional[List[str]] = None,
        confidence_threshold: float = 0.4,
        filename: Optional[str] = None
    ) -> ImageDetectionResponse:
        """
        Detect PII/PHI entities in an image.

        The image is uploaded as multipart field ``image``; the threshold
        travels as a query parameter.

        Args:
            image: Path, raw bytes or binary file object
            language: Language code for OCR and detection
            entities: Optional entity types to restrict detection to
            confidence_threshold: Minimum confidence for reported entities
            filename: Upload filename when it cannot be taken from ``image``

        Returns:
            ImageDetectionResponse with results, statistics and session_id
        """
        data = [('language', language)] + self._entity_fields(entities)
        files = {'image': self._image_part(image, filename)}

        return self._request(
            "POST",
            "/api/v1/detection/image",
            ImageDetectionResponse,
            data=data,
            files=files,
            params={'confidence_threshold': confidence_threshold}
        )

    def get_supported_languages(self) -> Dict[str, str]:
        """
        List languages supported by the detection engine.

        Returns:
            dict mapping language code to display name, e.g. {'en': 'English'}
        """
        return self._request("GET", "/api/v1/detection/languages", SupportedLanguages).root

    # -------------------------------------------------------------------------
    # Anonymization
    # -------------------------------------------------------------------------

    def anonymize_text(self, request: TextAnonymizationRequest) -> TextAnonymizationResponse:
        """
        Anonymize PII/PHI in text using the requested method.

        Returns:
            TextAnonymizationResponse with anonymized_text and anonymized_entities
        """
        payload = request.to_payload()
        logger.debug(
            f"Text anonymization request: {len(request.text)} chars, "
            f"type={request.anonymization_type}"
        )

        return self._request(
            "POST", "/api/v1/anonymization/text", TextAnonymizationResponse, json=payload
        )

    def anonymize_image(
        self,
        image: ImageInput,
        anonymization_type: str = 'redaction',
        language: str = 'en',
        entities: Optional[List[str]] = None,
        confidence_threshold: float = 0.4,
        fill: str = 'black',
        filename: Optional[str] = None
    ) -> ImageAnonymizationResponse:
        """
        Anonymize PII/PHI regions in an image.

        Args:
            image: Path, raw bytes or binary file object
            anonymization_type: redaction, blur or pixelation
            language: Language code for OCR and detection
            entities: Optional entity types to restrict anonymization to
            confidence_threshold: Minimum confidence for anonymized regions
            fill: Fill colour for redaction boxes
            filename: Upload filename when it cannot be taken from ``image``

        Returns:
            ImageAnonymizationResponse including anonymized_image_id and anonymized_image_url
        """
        data = [
            ('anonymization_type', anonymization_type),
            ('language', language),
            ('confidence_threshold', str(confidence_threshold)),
            ('fill', fill),
        ] + self._entity_fields(entities)
        files = {'image': self._image_part(image, filename)}

        return self._request(
            "POST", "/api/v1/anonymization/image", ImageAnonymizationResponse, data=data, files=files
        )

    def download_image(self, url: str) -> bytes:
        """
        Fetch an anonymized image.

        Args:
            url: anonymized_image_url from an ImageAnonymizationResponse,
                absolute or relative to the base URL

        Returns:
            Raw image bytes
        """
        full_url = urljoin(f"{self.base_url}/", url)
        return self._send("GET", full_url).content

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    def health_check(self) -> HealthStatus:
        """Liveness probe, e.g. HealthStatus(status='healthy')"""
        return self._request("GET", "/health", HealthStatus)

    def is_healthy(self) -> bool:
        """
        Check if the API is reachable and answering.

        Returns:
            True if the health endpoint responded successfully
        """
        try:
            self.health_check()
            return True
        except (requests.RequestException, ValueError) as e:
            logger.debug(f"Health check failed: {e}")
            return False
