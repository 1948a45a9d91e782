"""ClaudeVisionClient — Anthropic Claude vision backend."""
from anthropic import APIConnectionError, APIStatusError, AsyncAnthropic

from screen2code.constants import DEFAULT_ANTHROPIC_MODEL, MAX_OUTPUT_TOKENS, SDK_MAX_RETRIES
from screen2code.errors import UpstreamError, UpstreamUnavailableError
from screen2code.normalizer import OtherSegment, Segment, TextSegment
from screen2code.vision.client import ModelRequest, VisionClient


def _to_segment(block) -> Segment:
    match getattr(block, "type", None):
        case "text":
            return TextSegment(block.text)
        case kind:
            return OtherSegment(str(kind))


class ClaudeVisionClient(VisionClient):

    def __init__(self, api_key: str | None, model: str = DEFAULT_ANTHROPIC_MODEL) -> None:
        self._api_key = api_key
        self.model = model

    async def generate(self, request: ModelRequest) -> list[Segment]:
        async with AsyncAnthropic(api_key=self._api_key, max_retries=SDK_MAX_RETRIES) as client:
            try:
                message = await client.messages.create(
                    model=self.model,
                    max_tokens=MAX_OUTPUT_TOKENS,
                    messages=[
                        {
                            "role": "user",
                            "content": [
                                {
                                    "type": "image",
                                    "source": {
                                        "type": "base64",
                                        "media_type": request.image.media_type,
                                        "data": request.image.raw_data,
                                    },
                                },
                                {"type": "text", "text": request.instruction},
                            ],
                        }
                    ],
                )
            except APIConnectionError as e:
                raise UpstreamUnavailableError() from e
            except APIStatusError as e:
                raise UpstreamError(e.status_code, e.message) from e
        return list(map(_to_segment, message.content or []))
