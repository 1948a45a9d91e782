"""Embedded image decoder — splits a data URL into media subtype and base64 data."""
import re
from dataclasses import dataclass

from screen2code.constants import DATA_URL_PATTERN, MEDIA_TYPE_PREFIX, MSG_ERR_INVALID_IMAGE
from screen2code.errors import MalformedImageError

_DATA_URL_RE = re.compile(DATA_URL_PATTERN)


@dataclass(frozen=True)
class DecodedImage:
    media_subtype: str
    raw_data: str

    @property
    def media_type(self) -> str:
        return MEDIA_TYPE_PREFIX + self.media_subtype

    @property
    def data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.raw_data}"


def decode_image_payload(payload: object) -> DecodedImage:
    """Parse ``data:image/<subtype>;base64,<data>``.

    The subtype and data are returned untouched. Whether the bytes really are
    an image is left to the vision model. Raises MalformedImageError on any
    other shape.
    """
    match payload:
        case str() as text if (m := _DATA_URL_RE.fullmatch(text)):
            return DecodedImage(media_subtype=m.group(1), raw_data=m.group(2))
        case _:
            raise MalformedImageError(MSG_ERR_INVALID_IMAGE)
