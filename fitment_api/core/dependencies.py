"""FastAPI dependency injection for services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..services.completion import CompletionClient, OpenAICompletionClient
from ..services.fitment import FitmentService
from .config import Settings, get_settings

# -----------------------------------------------------------------------------
# Completion Client
# -----------------------------------------------------------------------------


@lru_cache
def get_openai_completion_client(api_key: str) -> OpenAICompletionClient:
    """Get cached OpenAI completion client."""
    return OpenAICompletionClient(api_key=api_key)


def get_completion_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CompletionClient:
    """Dependency for the completion client."""
    return get_openai_completion_client(settings.openai_api_key)


# -----------------------------------------------------------------------------
# Fitment Service
# -----------------------------------------------------------------------------


def get_fitment_service(
    client: Annotated[CompletionClient, Depends(get_completion_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> FitmentService:
    """Dependency for the fitment service."""
    return FitmentService(client, settings)
