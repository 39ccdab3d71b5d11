# yewchat

A small chat client that talks to a chat server over WebSocket.

You pick a username. The client registers that name with the server. It then
shows which users are online and lets you send and receive chat lines.

## Installation

```
pip install .
```

## Running

Start a compatible chat server on `ws://localhost:8080`, then run:

```
yewchat
```

If you do not pass `--username`, the client asks for a name at a
`Username:` prompt. It asks again until the name is not empty.

Once you are logged in, each line you type on standard input is sent as a
message. Incoming messages are printed as `sender: message`. When the user
list changes, it is printed as `Users: name, name, ...`. The client stops
when standard input ends or when the server closes the connection.

Options:

- `--url URL`: address of the chat server (default `ws://localhost:8080`).
- `--username NAME`: log in with this name and skip the prompt.
- `--path PATH`: page to start on. `/` is the login page and `/chat` is the
  chat page. If you start on `/chat` you skip the login, and the name
  `initial` is used. Any other path prints `404 baby`.
- `--verbose`: show debug logging.

The command exits with status 0 after a chat session. It exits with status 1
if the server cannot be reached, if input ends before a name is given, or if
the page is unknown.

## Using it as a library

- `yewchat.protocol` holds the JSON wire format. Its names are
  `WebSocketMessage` (with `to_json` and `from_json`), `MsgType` (`users`,
  `register` and `message`), `MessageData`, `UserProfile` and `avatar_url`.
  Input that does not follow the format raises `ProtocolError`.
- `yewchat.event_bus` has `EventBus`. `connect(handler)` returns a handler id,
  `disconnect(handler_id)` removes that handler, and `publish(message)` calls
  every connected handler with the message.
- `yewchat.websocket` has `WebsocketService(event_bus, url)`. `send(text)`
  queues outgoing text and raises `asyncio.QueueFull` once 1000 items are
  waiting. `run()` is a coroutine: it connects and publishes each incoming
  frame on the event bus until the connection closes. `decode_frame` turns a
  frame into text and returns `None` for binary data that is not UTF-8.
- `yewchat.session` has `Route`, `route_for_path`, the shared `User` and
  `LoginForm`. `LoginForm.input` records the name. `LoginForm.submit` stores
  the name on the user and returns `Route.CHAT`, or returns `None` while the
  name is empty.
- `yewchat.chat` has `Chat(user, service)`, which sends a register message
  when it is created.
  - `handle_message(raw)` applies a message from the server and returns
    whether the state changed.
  - `submit_message(text)` sends a chat line.
  - `render()` returns the chat page as an HTML string. In that HTML, a
    message ending in `.gif` is shown as an image and not as text.
- `yewchat.app` has `switch(route)`, which returns the page for a route, and
  `main(argv=None)`, the command above.

## What it does not do

The package is only a client. It has no chat server, so you need a server
that speaks the same JSON protocol. `Chat.render()` builds the HTML for the
chat page, but the package does not serve it or show it in a browser. The
`yewchat` command is a plain terminal client.

## Tests

```
pip install .[test]
pytest
```