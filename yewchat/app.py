"""Terminal front end: routes between the login and chat pages."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import threading
from typing import TextIO

from .chat import Chat
from .event_bus import EventBus
from .protocol import ProtocolError
from .session import LoginForm, Route, User, route_for_path
from .websocket import DEFAULT_URL, WebsocketService

log = logging.getLogger(__name__)

NOT_FOUND_PAGE = "404 baby"


def switch(route: Route):
    """Return the page for *route*: a page class, or the text of the 404 page."""
    match route:
        case Route.LOGIN:
            return LoginForm
        case Route.CHAT:
            return Chat
        case _:
            return NOT_FOUND_PAGE


def _login(user: User, username: str | None) -> Route | None:
    form = LoginForm(user)
    if username:
        form.input(username)
    while (route := form.submit()) is None:
        try:
            form.input(input("Username: ").strip())
        except EOFError:
            return None
    return route


async def _chat(user: User, url: str, stdin: TextIO) -> None:
    bus = EventBus()
    service = WebsocketService(bus, url)
    chat = Chat(user, service)

    def on_message(raw: str) -> None:
        seen = len(chat.messages)
        try:
            changed = chat.handle_message(raw)
        except ProtocolError as exc:
            log.error("bad message from server: %s", exc)
            return
        if not changed:
            return
        if len(chat.messages) > seen:
            for message in chat.messages[seen:]:
                print(f"{message.sender}: {message.message}")
        else:
            print("Users: " + ", ".join(profile.name for profile in chat.users))

    bus.connect(on_message)
    loop = asyncio.get_running_loop()
    task = asyncio.create_task(service.run())

    def read_lines() -> None:
        try:
            for line in stdin:
                loop.call_soon_threadsafe(chat.submit_message, line.rstrip("\n"))
            loop.call_soon_threadsafe(task.cancel)
        except RuntimeError:
            pass

    threading.Thread(target=read_lines, daemon=True).start()
    try:
        await task
    except asyncio.CancelledError:
        pass


def main(argv: list[str] | None = None) -> int:
    """Run the chat client in the terminal."""
    parser = argparse.ArgumentParser(prog="yewchat", description="Terminal chat client.")
    parser.add_argument("--url", default=DEFAULT_URL, help="chat server address")
    parser.add_argument("--username", help="log in with this name")
    parser.add_argument("--path", default=Route.LOGIN.path, help="page to start on")
    parser.add_argument("--verbose", action="store_true", help="show debug logging")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    user = User()
    route = route_for_path(args.path)
    while True:
        page = switch(route)
        if page is LoginForm:
            next_route = _login(user, args.username)
            if next_route is None:
                return 1
            route = next_route
        elif page is Chat:
            try:
                asyncio.run(_chat(user, args.url, sys.stdin))
            except OSError as exc:
                print(f"cannot connect to {args.url}: {exc}", file=sys.stderr)
                return 1
            return 0
        else:
            print(page)
            return 1


if __name__ == "__main__":
    sys.exit(main())