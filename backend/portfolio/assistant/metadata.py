from __future__ import annotations

import json
import logging
import re


logger = logging.getLogger("portfolio.assistant.metadata")

_TAG_BLOCK = re.compile(r"```json\s*\n?(\{[\s\S]*?\})\s*\n?```")


def _string_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if isinstance(item, str) and item.strip()]


def extract_tag_block(answer: str) -> tuple[str, list[str], list[str]]:
    """
    Split a completion into visible text and its trailing ```json block of
    related skills/experiences. A block that fails to parse leaves the text
    untouched and yields no tags.
    """
    text = str(answer or "")
    match = _TAG_BLOCK.search(text)
    if not match:
        return text, [], []

    try:
        metadata = json.loads(match.group(1))
    except json.JSONDecodeError as exc:
        logger.warning("tag block parse failed | err=%s", exc)
        return text, [], []

    if not isinstance(metadata, dict):
        logger.warning("tag block is not an object | type=%s", type(metadata).__name__)
        return text, [], []

    visible = (text[: match.start()] + text[match.end():]).strip()
    return visible, _string_list(metadata.get("skills")), _string_list(metadata.get("experiences"))
