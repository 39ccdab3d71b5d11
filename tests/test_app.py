from yewchat.app import main, switch
from yewchat.chat import Chat
from yewchat.session import LoginForm, Route


def test_switch_login():
    assert switch(Route.LOGIN) is LoginForm


def test_switch_chat():
    assert switch(Route.CHAT) is Chat


def test_switch_not_found():
    assert switch(Route.NOT_FOUND) == "404 baby"


def test_main_unknown_path_shows_404(capsys):
    assert main(["--path", "/missing"]) == 1
    assert "404 baby" in capsys.readouterr().out


def test_main_login_aborted_on_eof(monkeypatch):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["--path", "/"]) == 1