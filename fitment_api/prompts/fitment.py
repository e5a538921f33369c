"""Prompts for the wheel and tire fitment lookup."""

from ..models.fitment import FitmentQuery

SYSTEM_PROMPT = (
    "You are a vehicle fitment expert specializing in wheel and tire upgrades. "
    "Provide accurate, detailed information about OEM specifications and safe "
    "upgrade options."
)

FITMENT_PROMPT_TEMPLATE = """
Generate detailed wheel and tire fitment information for a {year} {make} {model} {trim}.
Include OEM (factory) specs and possible upgrades for 20", 22", and 24" wheels.

Format the response as a JSON object with the following structure:
{{
  "oem": {{
    "wheelSize": "string (e.g., '17x7.5')",
    "tireSize": "string (e.g., '245/70R17')",
    "boltPattern": "string (e.g., '6x135mm')",
    "hubSize": "string (e.g., '87.1mm')",
    "offset": "string (e.g., '+44mm')",
    "tpms": "string (e.g., 'Required')"
  }},
  "upgrades": {{
    "20": [
      {{
        "wheelSize": "string (e.g., '20x9.0')",
        "tireSize": "string (e.g., '275/55R20')",
        "offset": "string (e.g., '+18mm to +25mm')",
        "notes": "string (e.g., 'No rubbing or modifications required')"
      }}
    ],
    "22": [],
    "24": []
  }}
}}
Every entry under "22" and "24" uses the same structure as the "20" entries.

Return ONLY the JSON object. No markdown, no explanation outside the JSON.
Only provide fitment options that will work without major modifications to the vehicle.
For each wheel size upgrade, provide at least 2-3 tire size options that maintain a similar overall diameter to the OEM setup (within 3%).
If a particular wheel size upgrade is not recommended or not possible, provide an empty array for that wheel size.
"""


def build_user_prompt(query: FitmentQuery) -> str:
    """Render the fitment request for one vehicle."""
    return FITMENT_PROMPT_TEMPLATE.format(
        year=query.year,
        make=query.make,
        model=query.model,
        trim=query.trim or "",
    ).strip()


def build_messages(query: FitmentQuery) -> list[dict[str, str]]:
    """System + user messages for the chat completion call."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(query)},
    ]
