"""Routes, the logged-in user and the login form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit


class Route(Enum):
    """Pages of the application, keyed by their path."""

    LOGIN = "/"
    CHAT = "/chat"
    NOT_FOUND = "/404"

    @property
    def path(self) -> str:
        return self.value


def route_for_path(path: str) -> Route:
    """Return the route matching *path*, or NOT_FOUND."""
    try:
        return Route(urlsplit(path).path)
    except ValueError:
        return Route.NOT_FOUND


@dataclass
class User:
    """The user shared between pages."""

    username: str = "initial"


class LoginForm:
    """Collects a user name and hands it to the shared user on submit."""

    def __init__(self, user: User) -> None:
        self.user = user
        self.username = ""

    def input(self, value: str) -> None:
        """Record the current contents of the name field."""
        self.username = value

    def submit(self) -> Route | None:
        """Store the name and return the chat route; None while the name is empty."""
        if not self.username:
            return None
        self.user.username = self.username
        return Route.CHAT