"""CodeGenerationPipeline — validate → decode → prompt → vision model → normalize."""
import logging
import time
from dataclasses import dataclass

from screen2code.config import Config
from screen2code.constants import (
    FIELD_CODE,
    FIELD_ERROR,
    MSG_CLIENT_ERROR,
    MSG_EMPTY_RESPONSE,
    MSG_ERR_GENERATION_FAILED,
    MSG_GENERATED,
    MSG_GENERATING,
    MSG_SERVER_ERROR,
    STATUS_BAD_REQUEST,
    STATUS_MAX_ERROR,
    STATUS_OK,
    STATUS_SERVER_ERROR,
)
from screen2code.errors import GenerationError, MalformedImageError, ValidationError
from screen2code.image_payload import decode_image_payload
from screen2code.normalizer import normalize_segments
from screen2code.prompts import select_prompt
from screen2code.request import validate_request
from screen2code.vision.client import ModelRequest, VisionClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    code: str


@dataclass(frozen=True)
class GenerationResponse:
    status: int
    body: dict[str, str]


# ── pure helpers (module-level so tests can import them directly) ──────────────


def _status_of(exc: BaseException) -> int:
    """Use an integer 4xx/5xx ``status_code`` when the error carries one, else 500."""
    match getattr(exc, "status_code", None):
        case bool():
            return STATUS_SERVER_ERROR
        case int() as code if STATUS_BAD_REQUEST <= code <= STATUS_MAX_ERROR:
            return code
        case _:
            return STATUS_SERVER_ERROR


def _message_of(exc: BaseException) -> str:
    match exc:
        case GenerationError(message=str() as message) if message:
            return message
        case _:
            return str(exc) or MSG_ERR_GENERATION_FAILED


def error_response(exc: BaseException) -> GenerationResponse:
    status = _status_of(exc)
    message = _message_of(exc)
    # Only caller mistakes are warnings; a forwarded upstream 4xx is still an error.
    match exc:
        case ValidationError() | MalformedImageError():
            logger.warning(MSG_CLIENT_ERROR, message)
        case GenerationError():
            logger.error(MSG_SERVER_ERROR, message)
        case _:
            logger.exception(MSG_SERVER_ERROR, message)
    return GenerationResponse(status=status, body={FIELD_ERROR: message})


# ── pipeline ──────────────────────────────────────────────────────────────────


class CodeGenerationPipeline:
    """Turns one {image, framework} request body into generated source code.

    Holds no per-request state; one instance serves concurrent requests.
    """

    def __init__(self, config: Config, vision_client: VisionClient) -> None:
        self._config = config
        self._vision = vision_client

    async def generate(self, body: object) -> GenerationResult:
        """Run the pipeline, raising GenerationError subclasses on failure."""
        request = validate_request(body, self._config.vision_api_key)
        image = decode_image_payload(request.image_payload)
        instruction = select_prompt(request.framework)

        logger.info(
            MSG_GENERATING,
            self._config.vision_provider,
            self._vision.model,
            request.framework.value,
        )
        started = time.monotonic()
        segments = await self._vision.generate(
            ModelRequest(image=image, instruction=instruction)
        )
        code = normalize_segments(segments)

        if not code:
            logger.warning(MSG_EMPTY_RESPONSE)
        logger.info(MSG_GENERATED, len(code), request.framework.value, time.monotonic() - started)
        return GenerationResult(code=code)

    async def handle(self, body: object) -> GenerationResponse:
        """Pipeline boundary: always answers {code} or {error} with a status."""
        try:
            result = await self.generate(body)
        except Exception as e:
            return error_response(e)
        return GenerationResponse(status=STATUS_OK, body={FIELD_CODE: result.code})
