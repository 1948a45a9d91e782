"""VisionClient — abstract base for screenshot-to-code backends."""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from screen2code.image_payload import DecodedImage
from screen2code.normalizer import Segment


@dataclass(frozen=True)
class ModelRequest:
    image: DecodedImage
    instruction: str


class VisionClient(ABC):
    model: str

    @abstractmethod
    async def generate(self, request: ModelRequest) -> list[Segment]:
        """Send image + instruction in one call and return the response segments.

        Raises UpstreamUnavailableError on transport failure and UpstreamError
        on a non-success status.
        """
        ...
