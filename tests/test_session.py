import pytest

from yewchat.session import LoginForm, Route, User, route_for_path


@pytest.mark.parametrize(
    "path, route",
    [
        ("/", Route.LOGIN),
        ("/chat", Route.CHAT),
        ("/404", Route.NOT_FOUND),
        ("/elsewhere", Route.NOT_FOUND),
        ("/chat?room=1", Route.CHAT),
    ],
)
def test_route_for_path(path, route):
    assert route_for_path(path) is route


@pytest.mark.parametrize("route", list(Route))
def test_path_round_trip(route):
    assert route_for_path(route.path) is route


def test_user_default_name():
    assert User().username == "initial"


def test_empty_login_does_nothing():
    user = User()
    form = LoginForm(user)
    assert form.submit() is None
    assert user.username == "initial"


def test_login_sets_user_and_navigates():
    user = User()
    form = LoginForm(user)
    form.input("dave")
    assert form.submit() is Route.CHAT
    assert user.username == "dave"


def test_input_applies_only_on_submit():
    user = User()
    form = LoginForm(user)
    form.input("erin")
    form.submit()
    form.input("frank")
    assert user.username == "erin"
    form.input("")
    assert form.submit() is None
    assert user.username == "erin"