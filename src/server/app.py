"""FastAPI application exposing the LINE survey webhook."""

from __future__ import annotations

from fastapi import FastAPI, Request, Response

from src.webhook.handler import SurveyWebhookHandler
from src.webhook.line import LineMessagingClient
from src.webhook.models import ChannelConfig
from src.webhook.signature import SIGNATURE_HEADER

CALLBACK_PATH = "/callback"


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn --factory: reads config from environment variables."""
    return create_app(ChannelConfig.from_env())


def create_app(
    config: ChannelConfig,
    client: LineMessagingClient | None = None,
) -> FastAPI:
    """Create the webhook FastAPI app for one LINE channel."""
    app = FastAPI(docs_url=None, redoc_url=None)
    handler = SurveyWebhookHandler(config, client)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(CALLBACK_PATH)
    async def callback(request: Request) -> Response:
        body = await request.body()
        signature = request.headers.get(SIGNATURE_HEADER)
        result = await handler.handle(body, signature)
        return Response(status_code=result.status_code)

    return app
