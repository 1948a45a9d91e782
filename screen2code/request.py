"""Request validation — field presence, framework and provider credential."""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from screen2code.constants import (
    FIELD_FRAMEWORK,
    FIELD_IMAGE,
    MSG_ERR_INVALID_FRAMEWORK,
    MSG_ERR_MISSING_FIELDS,
    MSG_ERR_NO_API_KEY,
    MSG_ERR_NOT_OBJECT,
)
from screen2code.errors import (
    ConfigurationError,
    MissingFieldError,
    UnsupportedFrameworkError,
    ValidationError,
)
from screen2code.prompts import Framework


@dataclass(frozen=True)
class GenerationRequest:
    image_payload: str
    framework: Framework


def _parse_framework(value: object) -> Framework:
    try:
        return Framework(value)
    except ValueError:
        raise UnsupportedFrameworkError(MSG_ERR_INVALID_FRAMEWORK) from None


def validate_request(body: object, api_key: Optional[str]) -> GenerationRequest:
    """Check a parsed JSON body and the provider credential.

    Empty values count as missing. The credential is checked last so that
    client mistakes are reported as 400 even on a misconfigured server.
    """
    match body:
        case Mapping():
            pass
        case _:
            raise ValidationError(MSG_ERR_NOT_OBJECT)

    image = body.get(FIELD_IMAGE)
    framework = body.get(FIELD_FRAMEWORK)
    if not image or not framework:
        raise MissingFieldError(MSG_ERR_MISSING_FIELDS)

    parsed = _parse_framework(framework)

    if not api_key:
        raise ConfigurationError(MSG_ERR_NO_API_KEY)

    return GenerationRequest(image_payload=image, framework=parsed)
