"""
Request body parsing.

Clients post the chat payload either as `application/json` or as a plain
string (some embedding hosts send `text/plain`, and a few double-encode the
JSON). Everything is resolved here, once, into a plain dict.
"""
import json
import logging
from typing import Any, Dict, Mapping, Union

logger = logging.getLogger(__name__)

RawBody = Union[bytes, str, Mapping[str, Any], None]


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def parse_body(raw: RawBody) -> Dict[str, Any]:
    """
    Resolve a raw request body into a JSON object.

    Args:
        raw: Body as received: bytes, text, an already-decoded mapping or None

    Returns:
        The decoded object, or an empty dict when the body is empty,
        malformed, or decodes to something other than an object.
    """
    if isinstance(raw, Mapping):
        return dict(raw)

    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Request body is not valid UTF-8")
            return {}

    if not raw:
        return {}

    data = _decode(raw)
    # A JSON string literal wrapping the real payload
    if isinstance(data, str):
        data = _decode(data)

    if not isinstance(data, dict):
        logger.debug("Request body is not a JSON object")
        return {}
    return data
