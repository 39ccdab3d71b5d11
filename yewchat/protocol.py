"""Wire format of the chat server's JSON messages."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

AVATAR_URL_TEMPLATE = "https://avatars.dicebear.com/api/adventurer-neutral/{}.svg"


class ProtocolError(ValueError):
    """Raised when a message does not follow the chat protocol."""


class MsgType(str, Enum):
    """Kinds of message exchanged with the server."""

    USERS = "users"
    REGISTER = "register"
    MESSAGE = "message"


def _load_object(text: str) -> dict[str, Any]:
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ProtocolError(f"invalid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise ProtocolError("expected a JSON object")
    return value


def _required_str(obj: dict[str, Any], key: str) -> str:
    if key not in obj:
        raise ProtocolError(f"missing field {key!r}")
    value = obj[key]
    if not isinstance(value, str):
        raise ProtocolError(f"field {key!r} must be a string")
    return value


@dataclass
class WebSocketMessage:
    """An envelope sent to or received from the server."""

    message_type: MsgType
    data_array: list[str] | None = None
    data: str | None = None

    def to_json(self) -> str:
        """Serialise to the compact JSON the server expects."""
        payload = {
            "messageType": self.message_type.value,
            "dataArray": self.data_array,
            "data": self.data,
        }
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> WebSocketMessage:
        """Parse an envelope, raising ProtocolError if it is malformed."""
        obj = _load_object(text)
        try:
            message_type = MsgType(_required_str(obj, "messageType"))
        except ValueError as exc:
            if isinstance(exc, ProtocolError):
                raise
            raise ProtocolError(f"unknown message type: {obj['messageType']!r}") from exc

        data_array = obj.get("dataArray")
        if data_array is not None:
            if not isinstance(data_array, list) or not all(
                isinstance(item, str) for item in data_array
            ):
                raise ProtocolError("field 'dataArray' must be a list of strings")

        data = obj.get("data")
        if data is not None and not isinstance(data, str):
            raise ProtocolError("field 'data' must be a string")

        return cls(message_type=message_type, data_array=data_array, data=data)


@dataclass
class MessageData:
    """A chat line: who sent it and what it says."""

    sender: str
    message: str

    @classmethod
    def from_json(cls, text: str) -> MessageData:
        """Parse the payload of a message envelope."""
        obj = _load_object(text)
        return cls(sender=_required_str(obj, "from"), message=_required_str(obj, "message"))


def avatar_url(name: str) -> str:
    """Return the avatar image address for a user name."""
    return AVATAR_URL_TEMPLATE.format(name)


@dataclass
class UserProfile:
    """A connected user as shown in the user list."""

    name: str
    avatar: str

    @classmethod
    def from_name(cls, name: str) -> UserProfile:
        """Build a profile with the default avatar for *name*."""
        return cls(name=name, avatar=avatar_url(name))