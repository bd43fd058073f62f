"""Decode notification-service frames into messages."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from downsync.contracts.exceptions import ProtocolError
from downsync.contracts.watch import ErrorMessage, FileNotification, SubscribeAck, UnknownMessage, WatchMessage


def parse_message(frame: str) -> WatchMessage:
    """Classify one frame.

    Raises:
        ProtocolError: If the frame is not a JSON object or a file-list
            notification is malformed.
    """
    try:
        payload: Any = json.loads(frame)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"invalid JSON frame: {exc.msg}", frame=frame) from exc

    if not isinstance(payload, dict):
        raise ProtocolError("frame is not a JSON object", frame=frame)

    if "error" in payload:
        return ErrorMessage(error=payload["error"])
    if "subscribe" in payload:
        return SubscribeAck(subscribe=payload["subscribe"])
    if "subscription" in payload and "files" in payload:
        try:
            return FileNotification.model_validate(
                {"subscription": payload["subscription"], "files": payload["files"]}
            )
        except ValidationError as exc:
            raise ProtocolError(f"malformed file notification: {exc.error_count()} error(s)", frame=frame) from exc
    return UnknownMessage(payload=payload)
