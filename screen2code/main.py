"""Entry point — wires Config → VisionClient → CodeGenerationPipeline → FastAPI."""
import logging

import uvicorn
from rich.logging import RichHandler

from screen2code.config import Config
from screen2code.constants import MSG_SERVER_STARTING, PROVIDER_OPENAI
from screen2code.pipeline import CodeGenerationPipeline
from screen2code.server import create_app
from screen2code.vision.claude import ClaudeVisionClient
from screen2code.vision.client import VisionClient
from screen2code.vision.openai import OpenAIVisionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_vision_client(config: Config) -> VisionClient:
    match config.vision_provider:
        case p if p == PROVIDER_OPENAI:
            return OpenAIVisionClient(config.openai_api_key, config.openai_model)
        case _:
            return ClaudeVisionClient(config.anthropic_api_key, config.anthropic_model)


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(
        MSG_SERVER_STARTING,
        config.host,
        config.port,
        config.vision_provider,
        config.vision_model,
    )

    pipeline = CodeGenerationPipeline(config, build_vision_client(config))
    app = create_app(config, pipeline)
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
