import json

import pytest

from yewchat.protocol import (
    MessageData,
    MsgType,
    ProtocolError,
    UserProfile,
    WebSocketMessage,
    avatar_url,
)


def test_register_wire_format():
    msg = WebSocketMessage(MsgType.REGISTER, data="alice")
    assert msg.to_json() == '{"messageType":"register","dataArray":null,"data":"alice"}'


@pytest.mark.parametrize("kind", list(MsgType))
def test_round_trip(kind):
    msg = WebSocketMessage(kind, data_array=["a", "b"], data="x")
    assert WebSocketMessage.from_json(msg.to_json()) == msg


def test_missing_optional_fields_are_none():
    msg = WebSocketMessage.from_json('{"messageType":"users"}')
    assert msg.message_type is MsgType.USERS
    assert msg.data_array is None
    assert msg.data is None


def test_unknown_fields_are_ignored():
    msg = WebSocketMessage.from_json('{"messageType":"message","data":"d","extra":1}')
    assert msg.data == "d"


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2]",
        "{}",
        '{"messageType":"shout"}',
        '{"messageType":3}',
        '{"messageType":"users","dataArray":[1]}',
        '{"messageType":"users","dataArray":"a"}',
        '{"messageType":"message","data":5}',
    ],
)
def test_invalid_envelopes(text):
    with pytest.raises(ProtocolError):
        WebSocketMessage.from_json(text)


def test_message_data_parses():
    data = MessageData.from_json(json.dumps({"from": "bob", "message": "hi"}))
    assert data == MessageData(sender="bob", message="hi")


@pytest.mark.parametrize("payload", [{"message": "hi"}, {"from": "bob"}, {"from": 1, "message": "x"}])
def test_message_data_invalid(payload):
    with pytest.raises(ProtocolError):
        MessageData.from_json(json.dumps(payload))


def test_avatar_url():
    assert avatar_url("bob") == "https://avatars.dicebear.com/api/adventurer-neutral/bob.svg"


def test_profile_from_name():
    profile = UserProfile.from_name("carol")
    assert profile.name == "carol"
    assert profile.avatar == avatar_url("carol")