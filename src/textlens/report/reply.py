"""Decoding of JSON replies returned by the language model."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from ..exceptions import EmptyReplyError, ReplyParseError


def parse_model_reply(raw: str | None) -> Dict[str, Any]:
    """Decode ``raw`` into a JSON object."""

    if raw is None or not raw.strip():
        raise EmptyReplyError()
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ReplyParseError("model reply is not valid JSON") from exc
    if not isinstance(decoded, Mapping):
        raise ReplyParseError("model reply must be a JSON object")
    return dict(decoded)


__all__ = ["parse_model_reply"]
