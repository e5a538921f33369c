"""Fitment lookup pipeline: prompt -> completion -> extraction."""

from typing import Any

from ..core.config import Settings
from ..core.logging import logger
from ..models.fitment import FitmentQuery, UPGRADE_DIAMETERS
from ..prompts.fitment import build_messages
from .completion import CompletionClient
from .extraction import extract_fitment


def inspect_fitment_shape(data: Any) -> list[str]:
    """List the ways ``data`` deviates from the requested fitment shape.

    Purely informational: callers still receive the data as parsed.
    """
    if not isinstance(data, dict):
        return [f"top-level value is a {type(data).__name__}, not an object"]

    problems = []

    oem = data.get("oem")
    if not isinstance(oem, dict):
        problems.append("missing 'oem' object")

    upgrades = data.get("upgrades")
    if not isinstance(upgrades, dict):
        problems.append("missing 'upgrades' object")
        return problems

    for diameter in UPGRADE_DIAMETERS:
        if diameter not in upgrades:
            problems.append(f"missing upgrades['{diameter}']")
        elif not isinstance(upgrades[diameter], list):
            problems.append(f"upgrades['{diameter}'] is not a list")

    return problems


class FitmentService:
    """Resolve OEM and upgrade fitment for one vehicle via the completion API.

    Stateless: every call is independent and makes exactly one completion
    request.
    """

    def __init__(self, client: CompletionClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def lookup(self, query: FitmentQuery) -> Any:
        """Return the parsed fitment object for ``query``.

        Raises:
            CompletionError: the completion call failed.
            ResponseParseError: the reply held no parseable JSON object.
        """
        vehicle = " ".join(
            str(v) for v in (query.year, query.make, query.model, query.trim) if v
        )
        logger.info(f"Fitment lookup vehicle='{vehicle}'")

        text = await self._client.complete(
            build_messages(query),
            model=self._settings.openai_model,
            temperature=self._settings.openai_temperature,
            max_tokens=self._settings.openai_max_tokens,
        )

        data = extract_fitment(text)

        problems = inspect_fitment_shape(data)
        if problems:
            logger.warning(
                f"Fitment response shape deviations vehicle='{vehicle}': "
                + "; ".join(problems)
            )
        return data
