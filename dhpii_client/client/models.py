# dhpii_client/client/models.py

from pydantic import BaseModel, ConfigDict, Field, RootModel
from typing import Optional, List, Dict, Any


# Entity model
class DetectedEntity(BaseModel):
    model_config = ConfigDict(extra='allow')

    entity_type: str = Field(..., description="Entity label, e.g. PERSON or EMAIL_ADDRESS")
    text: str = Field(..., description="Matched text span")
    start: int = Field(..., description="Start offset of the span")
    end: int = Field(..., description="End offset of the span (exclusive)")
    confidence: float = Field(..., description="Detection confidence between 0 and 1")


# Request Models
class TextDetectionRequest(BaseModel):
    text: str = Field(..., description="Text to scan for PII/PHI")
    language: Optional[str] = Field(None, description="Language code, server default when omitted")
    entities: Optional[List[str]] = Field(None, description="Restrict detection to these entity types")
    confidence_threshold: Optional[float] = Field(None, description="Minimum confidence for reported entities")
    allow_list: Optional[List[str]] = Field(None, description="Values never reported as PII")

    def to_payload(self) -> Dict[str, Any]:
        """JSON body with unset fields left out"""
        return self.model_dump(exclude_none=True)


class TextAnonymizationRequest(BaseModel):
    text: str = Field(..., description="Text to anonymize")
    anonymization_type: str = Field(..., description="Method: mask, replace, redaction, hash, pseudonymize, encrypt")
    entities: Optional[List[str]] = Field(None, description="Restrict anonymization to these entity types")
    config: Optional[Dict[str, Any]] = Field(None, description="Method-specific options, e.g. mask_char")

    def to_payload(self) -> Dict[str, Any]:
        """JSON body with unset fields left out"""
        return self.model_dump(exclude_none=True)


# Response Models
class _Response(BaseModel):
    model_config = ConfigDict(extra='allow')

    statistics: Dict[str, Any] = Field(default_factory=dict)
    session_id: str = ""


class TextDetectionResponse(_Response):
    results: List[DetectedEntity] = Field(default_factory=list)
    language_used: str = ""


class ImageDetectionResponse(_Response):
    results: List[DetectedEntity] = Field(default_factory=list)


class TextAnonymizationResponse(_Response):
    anonymized_text: str = ""
    anonymized_entities: List[DetectedEntity] = Field(default_factory=list)


class ImageAnonymizationResponse(_Response):
    anonymized_entities: List[DetectedEntity] = Field(default_factory=list)
    anonymized_image_id: str = ""
    anonymized_image_url: str = ""


class HealthStatus(BaseModel):
    model_config = ConfigDict(extra='allow')

    status: str


class SupportedLanguages(RootModel[Dict[str, str]]):
    """Language code to display name"""


# Common entity types offered by the console pickers
COMMON_ENTITIES = [
    'PERSON',
    'EMAIL_ADDRESS',
    'PHONE_NUMBER',
    'CREDIT_CARD',
    'SSN',
    'DATE_TIME',
    'LOCATION',
    'ORGANIZATION',
    'URL',
    'IP_ADDRESS',
    'IBAN_CODE',
    'US_DRIVER_LICENSE',
    'US_PASSPORT',
    'MEDICAL_LICENSE',
    'US_BANK_NUMBER',
]

# Text anonymization methods (value -> label)
ANONYMIZATION_TYPES = {
    'mask': 'Mask (replace with *)',
    'replace': 'Replace with placeholder',
    'redaction': 'Redaction (black boxes)',
    'hash': 'Hash (SHA-256)',
    'pseudonymize': 'Pseudonymize',
    'encrypt': 'Encrypt',
}

IMAGE_ANONYMIZATION_TYPES = {
    'redaction': 'Redaction (black boxes)',
    'blur': 'Blur effect',
    'pixelation': 'Pixelation',
}

FILL_COLORS = ['black', 'white', 'gray', 'red']

# Used when the languages endpoint cannot be reached
DEFAULT_LANGUAGES = {
    'en': 'English',
    'es': 'Spanish',
    'de': 'German',
    'fr': 'French',
    'it': 'Italian',
    'pt': 'Portuguese',
    'nl': 'Dutch',
    'ru': 'Russian',
    'zh': 'Chinese (Simplified)',
    'zh-TW': 'Chinese (Traditional)',
    'ja': 'Japanese',
    'ko': 'Korean',
    'ar': 'Arabic',
    'he': 'Hebrew',
    'pl': 'Polish',
    'cs': 'Czech',
    'sk': 'Slovak',
    'hu': 'Hungarian',
    'ro': 'Romanian',
    'bg': 'Bulgarian',
    'hr': 'Croatian',
    'sl': 'Slovenian',
    'lt': 'Lithuanian',
    'lv': 'Latvian',
    'et': 'Estonian',
    'fi': 'Finnish',
    'sv': 'Swedish',
    'no': 'Norwegian',
    'da': 'Danish',
    'is': 'Icelandic',
    'el': 'Greek',
    'tr': 'Turkish',
    'uk': 'Ukrainian',
    'sr': 'Serbian',
    'mk': 'Macedonian',
    'sq': 'Albanian',
    'bs': 'Bosnian',
    'cnr': 'Montenegrin',
    'mt': 'Maltese',
    'ga': 'Irish',
    'cy': 'Welsh',
    'eu': 'Basque',
    'ca': 'Catalan',
    'gl': 'Galician',
    'hi': 'Hindi',
    'bn': 'Bengali',
    'ta': 'Tamil',
    'te': 'Telugu',
    'mr': 'Marathi',
    'gu': 'Gujarati',
    'kn': 'Kannada',
    'ml': 'Malayalam',
    'pa': 'Punjabi',
    'ur': 'Urdu',
    'ne': 'Nepali',
    'th': 'Thai',
    'vi': 'Vietnamese',
    'id': 'Indonesian',
    'ms': 'Malay',
    'fil': 'Filipino',
}

SAMPLE_TEXT = (
    "Hello, my name is John Doe and I work at Microsoft Corporation.\n"
    "My email address is john.doe@microsoft.com and my phone number is (555) 123-4567.\n"
    "I was born on January 15, 1985 and my Social Security Number is 123-45-6789.\n"
    "My credit card number is 4532-1234-5678-9012 and it expires on 12/25.\n"
    "I live at 123 Main Street, Seattle, WA 98101."
)
