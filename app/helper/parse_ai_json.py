"""
Description:
Parse the JSON a model returned, tolerating the wrapping some models add despite
being asked for bare JSON: <think> blocks, markdown code fences and prose
before or after the JSON value.

Arguments:
- content: Raw text content extracted from the provider response.
- opener: "{" for a JSON object, "[" for a JSON array.

Returns:
- The decoded JSON value.

Dependencies:
- json: For decoding.
- re: For stripping reasoning tags and code fences.
- loguru: For logging what had to be cleaned.
"""
import json
import re
from loguru import logger
from app.errors.exceptions import ParseError

_CLOSERS = {"{": "}", "[": "]"}

def _balanced_slice(content: str, start: int, opener: str) -> str:
    """Return content[start:end] where end closes the value opened at start, or "" if unbalanced."""
    closer = _CLOSERS[opener]
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(content)):
        char = content[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return content[start:i + 1]
    return ""

def clean_ai_response(content: str, opener: str = "{") -> str:
    """
    Strip reasoning tags and code fences, then isolate the first JSON value.

    Example:
        >>> clean_ai_response('<think>reasoning...</think>{"totalScore": 70}')
        '{"totalScore": 70}'
        >>> clean_ai_response('```json\\n["Q1", "Q2"]\\n```', opener="[")
        '["Q1", "Q2"]'
    """
    if not content or not isinstance(content, str):
        return content

    original_length = len(content)

    content = re.sub(r'<think>.*?</think>', '', content, flags=re.DOTALL | re.IGNORECASE)
    content = re.sub(r'</?think[^>]*>', '', content, flags=re.IGNORECASE)
    content = re.sub(r'```(?:json)?', '', content, flags=re.IGNORECASE)
    content = content.strip()

    start = content.find(opener)
    if start != -1:
        sliced = _balanced_slice(content, start, opener)
        if sliced:
            content = sliced

    if len(content) != original_length:
        logger.debug(f"AI response cleaned: {original_length} -> {len(content)} chars")

    return content

def parse_ai_json(content: str, opener: str = "{"):
    """
    Decode model output as JSON, cleaning it first only when it is not already valid.

    Raises:
        ParseError: If no JSON value can be decoded
    """
    if not isinstance(content, str):
        raise ParseError()

    try:
        return json.loads(content.strip())
    except json.JSONDecodeError:
        pass

    cleaned = clean_ai_response(content, opener=opener)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"JSON parsing error: {e}")
        raise ParseError() from e
