"""Fitment services: completion client, response extraction, orchestration."""

from .completion import CompletionClient, OpenAICompletionClient
from .extraction import extract_fitment
from .fitment import FitmentService, inspect_fitment_shape

__all__ = [
    "CompletionClient",
    "FitmentService",
    "OpenAICompletionClient",
    "extract_fitment",
    "inspect_fitment_shape",
]
