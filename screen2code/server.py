"""FastAPI surface — POST /api/generate in front of the pipeline."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from screen2code.config import Config
from screen2code.constants import (
    FIELD_ERROR,
    GENERATE_ROUTE,
    HEALTH_ROUTE,
    MSG_CLIENT_ERROR,
    MSG_ERR_INVALID_JSON,
    STATUS_BAD_REQUEST,
)
from screen2code.pipeline import CodeGenerationPipeline

logger = logging.getLogger(__name__)


def create_app(config: Config, pipeline: CodeGenerationPipeline) -> FastAPI:
    app = FastAPI(title="screen2code")

    @app.post(GENERATE_ROUTE)
    async def generate(request: Request) -> JSONResponse:
        # Parsed by hand so missing fields get the pipeline's 400, not a 422.
        try:
            body = await request.json()
        except ValueError:
            logger.warning(MSG_CLIENT_ERROR, MSG_ERR_INVALID_JSON)
            return JSONResponse(
                {FIELD_ERROR: MSG_ERR_INVALID_JSON},
                status_code=STATUS_BAD_REQUEST,
            )
        response = await pipeline.handle(body)
        return JSONResponse(response.body, status_code=response.status)

    @app.get(HEALTH_ROUTE)
    async def health() -> dict[str, str]:
        return {
            "status": "ok",
            "provider": config.vision_provider,
            "model": config.vision_model,
        }

    return app
