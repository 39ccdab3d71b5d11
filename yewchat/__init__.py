"""WebSocket chat client: login, user list, messages and a terminal front end."""

__version__ = "0.1.0"