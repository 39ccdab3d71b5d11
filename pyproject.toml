[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yewchat"
version = "0.1.0"
description = "A small WebSocket chat client: log in with a username, see who is online and exchange messages."
requires-python = ">=3.10"
dependencies = [
    "websockets",
]
keywords = ["chat", "websocket", "client", "messaging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
yewchat = "yewchat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["yewchat"]

[tool.pytest.ini_options]
addopts = "-ra"
