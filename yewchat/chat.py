"""The chat page: user list, message history and message input."""

from __future__ import annotations

import asyncio
import logging
from html import escape
from typing import Protocol

from .protocol import MessageData, MsgType, ProtocolError, UserProfile, WebSocketMessage
from .session import User

log = logging.getLogger(__name__)


class _Sender(Protocol):
    def send(self, text: str) -> None: ...


class Chat:
    """State of the chat page for one user."""

    def __init__(self, user: User, service: _Sender) -> None:
        self.user = user
        self.service = service
        self.users: list[UserProfile] = []
        self.messages: list[MessageData] = []
        register = WebSocketMessage(MsgType.REGISTER, data=user.username)
        try:
            service.send(register.to_json())
        except asyncio.QueueFull:
            pass
        else:
            log.debug("message sent successfully")

    def handle_message(self, raw: str) -> bool:
        """Apply a message from the server; return True when the page changed."""
        msg = WebSocketMessage.from_json(raw)
        if msg.message_type is MsgType.USERS:
            self.users = [UserProfile.from_name(name) for name in msg.data_array or []]
            return True
        if msg.message_type is MsgType.MESSAGE:
            if msg.data is None:
                raise ProtocolError("message without data")
            self.messages.append(MessageData.from_json(msg.data))
            return True
        return False

    def submit_message(self, text: str) -> None:
        """Send a chat line to the server."""
        message = WebSocketMessage(MsgType.MESSAGE, data=text)
        try:
            self.service.send(message.to_json())
        except asyncio.QueueFull as exc:
            log.debug("error sending to channel: %r", exc)

    def _profile(self, name: str) -> UserProfile:
        for profile in self.users:
            if profile.name == name:
                return profile
        raise LookupError(f"message from unknown user {name!r}")

    def _render_user(self, profile: UserProfile) -> str:
        return (
            '<div class="flex m-3 rounded-lg p-2" style="background-color: #FFFFFF;">'
            f'<div><img class="w-12 h-12 rounded-full" src="{escape(profile.avatar)}" alt="avatar"/></div>'
            '<div class="flex-grow p-3"><div class="flex text-xs justify-between">'
            f'<div style="color: #D291BC;">{escape(profile.name)}</div></div>'
            '<div class="text-xs" style="color: #F7CAC9;">Hi there!</div></div></div>'
        )

    def _render_message(self, message: MessageData) -> str:
        profile = self._profile(message.sender)
        if message.message.endswith(".gif"):
            body = f'<img class="mt-3" src="{escape(message.message)}"/>'
        else:
            body = escape(message.message)
        return (
            '<div class="flex items-end w-3/6 m-8 rounded-tl-lg rounded-tr-lg rounded-br-lg" '
            'style="background-color: #FFE5EC;">'
            f'<img class="w-8 h-8 rounded-full m-3" src="{escape(profile.avatar)}" alt="avatar"/>'
            '<div class="p-3">'
            f'<div class="text-sm" style="color: #D291BC;">{escape(message.sender)}</div>'
            f'<div class="text-xs" style="color: #B5838D;">{body}</div>'
            "</div></div>"
        )

    def render(self) -> str:
        """Return the page as HTML."""
        users = "".join(self._render_user(profile) for profile in self.users)
        messages = "".join(self._render_message(message) for message in self.messages)
        return (
            '<div class="flex w-screen" style="background-color: #FFF6F9;">'
            '<div class="flex-none w-56 h-screen" style="background-color: #FFF1E6;">'
            f'<div class="text-xl p-3" style="color: #D291BC;">Users</div>{users}</div>'
            '<div class="grow h-screen flex flex-col">'
            '<div class="w-full h-14 border-b-2" style="border-color: #F7CAC9; background-color: #FFF1E6;">'
            '<div class="text-xl p-3" style="color: #D291BC;">💬 Welcome to YewChat!</div></div>'
            '<div class="w-full grow overflow-auto border-b-2" style="border-color: #F7CAC9;">'
            f"{messages}</div>"
            '<div class="w-full h-14 flex px-3 items-center" style="background-color: #FFF1E6;">'
            '<input type="text" placeholder="Message" name="message" required '
            'class="block w-full py-2 pl-4 mx-3 rounded-full outline-none focus:text-gray-700" '
            'style="background-color: #FFE5EC; color: #B5838D;"/>'
            '<button class="p-3 shadow-sm w-10 h-10 rounded-full flex justify-center items-center" '
            'style="background-color: #D291BC;">'
            '<svg viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg" class="fill-white">'
            '<path d="M0 0h24v24H0z" fill="none"></path>'
            '<path d="M2.01 21L23 12 2.01 3 2 10l15 2-15 2z"></path></svg>'
            "</button></div></div></div>"
        )