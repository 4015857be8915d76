"""Parsing of raw AI replies into question payloads."""
import json
import re
from typing import Any, Dict, List

from core.services.errors import InvalidRequestError
from core.utils.logger import logger

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def parse_questions_response(raw: str) -> List[Dict[str, Any]]:
    """
    Pull the questions array out of a generator reply.

    The reply is either pure JSON or JSON wrapped in prose or a code fence.
    Both ``{"questions": [...]}`` and a bare array are accepted.

    Raises:
        InvalidRequestError: If no usable JSON is found
    """
    try:
        result = json.loads(raw)
    except json.JSONDecodeError:
        match = _JSON_OBJECT.search(raw)
        if not match:
            raise InvalidRequestError("Could not parse AI response", detail="No JSON object found")
        try:
            result = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse JSON from AI response: {raw[:200]}")
            raise InvalidRequestError("Could not parse AI response", detail=str(e)) from e

    if isinstance(result, dict):
        questions = result.get("questions") or []
    else:
        questions = result

    if not isinstance(questions, list) or not all(isinstance(q, dict) for q in questions):
        raise InvalidRequestError("Could not parse AI response", detail="questions must be a list of objects")
    return questions
