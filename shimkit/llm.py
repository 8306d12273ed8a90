"""Pulling JSON out of free-form model responses."""

import re

_MARKDOWN_JSON_BLOCK = re.compile(r"```json\n(.*?)```", re.DOTALL)
_GENERIC_MARKDOWN_BLOCK = re.compile(r"```\n(.*?)```", re.DOTALL)
_INLINE_MARKDOWN_JSON_BLOCK = re.compile(r"```json(\{.*\})```", re.DOTALL)
_INLINE_GENERIC_MARKDOWN_BLOCK = re.compile(r"```(\{.*\})```", re.DOTALL)
_WHOLE_BRACED = re.compile(r"\A[{\[].*?[}\]]\Z")

_NOISE = ("```json", "```", "Here is the JSON:", "```json\n", "```\n")


def _clean_json_string(text: str) -> str:
    """Trim whitespace and drop a trailing comma before the closing bracket."""
    text = text.strip()
    if len(text) > 1 and text[-1] in "}]" and text[-2] == ",":
        text = text[:-2] + text[-1]
    return text


def _looks_like_json(text: str) -> bool:
    return (text.startswith("{") and text.endswith("}")) or (
        text.startswith("[") and text.endswith("]")
    )


def extract_potential_json(raw_response: str) -> str:
    """Return the most likely JSON fragment in ``raw_response``, or ``""``.

    Fenced ```json blocks are tried first, then plain fences holding
    something bracketed, then inline fences, then a response that is
    bracketed as a whole, and finally the span from the first opening
    bracket to the last closing one once fence markers are stripped.
    """
    match = _MARKDOWN_JSON_BLOCK.search(raw_response)
    if match:
        return _clean_json_string(match.group(1))

    match = _GENERIC_MARKDOWN_BLOCK.search(raw_response)
    if match:
        trimmed = match.group(1).strip()
        if _looks_like_json(trimmed):
            return _clean_json_string(trimmed)

    for pattern in (_INLINE_MARKDOWN_JSON_BLOCK, _INLINE_GENERIC_MARKDOWN_BLOCK):
        match = pattern.search(raw_response)
        if match:
            return _clean_json_string(match.group(1))

    match = _WHOLE_BRACED.search(raw_response)
    if match:
        return _clean_json_string(match.group(0))

    cleaned = raw_response
    for noise in _NOISE:
        cleaned = cleaned.replace(noise, "")

    opening = [pos for pos in (cleaned.find("{"), cleaned.find("[")) if pos != -1]
    closing = max(cleaned.rfind("}"), cleaned.rfind("]"))
    if opening and closing != -1:
        first = min(opening)
        if closing > first:
            return _clean_json_string(cleaned[first : closing + 1])

    return ""