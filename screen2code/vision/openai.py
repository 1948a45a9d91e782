"""OpenAIVisionClient — OpenAI GPT-4o vision backend."""
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from screen2code.constants import DEFAULT_OPENAI_MODEL, MAX_OUTPUT_TOKENS, SDK_MAX_RETRIES
from screen2code.errors import UpstreamError, UpstreamUnavailableError
from screen2code.normalizer import Segment, TextSegment
from screen2code.vision.client import ModelRequest, VisionClient


class OpenAIVisionClient(VisionClient):

    def __init__(self, api_key: str | None, model: str = DEFAULT_OPENAI_MODEL) -> None:
        self._api_key = api_key
        self.model = model

    async def generate(self, request: ModelRequest) -> list[Segment]:
        async with AsyncOpenAI(api_key=self._api_key, max_retries=SDK_MAX_RETRIES) as client:
            try:
                response = await client.chat.completions.create(
                    model=self.model,
                    max_tokens=MAX_OUTPUT_TOKENS,
                    messages=[
                        {
                            "role": "user",
                            "content": [
                                {
                                    "type": "image_url",
                                    "image_url": {"url": request.image.data_url},
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
        match response.choices:
            case [first, *_] if first.message.content:
                return [TextSegment(first.message.content)]
            case _:
                return []
