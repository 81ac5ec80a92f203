from pigeonfarm.actions import ActionDispatcher
from pigeonfarm.events import ClientEvents
from pigeonfarm.types import Action


def _recorder():
    calls = []
    events = ClientEvents()
    events.connect_button_touched(lambda mid, button: calls.append(("touched", mid, button)))
    return events, calls


def test_url_action_notifies_then_opens():
    events, calls = _recorder()
    dispatcher = ActionDispatcher(events, opener=lambda url: calls.append(("open", url)))
    raw = {"title": "Go", "action": "url", "url": "https://example.com"}

    dispatcher.dispatch(4, Action(label="Go", kind="url", target="https://example.com", raw=raw))

    assert calls == [("touched", 4, raw), ("open", "https://example.com")]


def test_unknown_kind_only_notifies():
    events, calls = _recorder()
    opened = []
    dispatcher = ActionDispatcher(events, opener=opened.append)
    raw = {"title": "Later", "action": "dismiss"}

    dispatcher.dispatch(4, Action(label="Later", kind="dismiss", raw=raw))

    assert calls == [("touched", 4, raw)]
    assert opened == []


def test_custom_handler_can_be_registered():
    events, calls = _recorder()
    dispatcher = ActionDispatcher(events, opener=lambda url: None)
    dispatcher.handlers["share"] = lambda action: calls.append(("share", action.label))

    dispatcher.dispatch(1, Action(label="Share", kind="share", raw={}))

    assert calls == [("touched", 1, {}), ("share", "Share")]


def test_listeners_called_in_order_and_failures_isolated():
    events = ClientEvents()
    seen = []

    def broken(mid):
        raise RuntimeError("listener bug")

    events.connect_message_shown(lambda mid: seen.append(("a", mid)))
    events.connect_message_shown(broken)
    events.connect_message_shown(lambda mid: seen.append(("b", mid)))

    events.emit_message_shown(3)

    assert seen == [("a", 3), ("b", 3)]


def test_failing_opener_is_logged_not_raised(caplog):
    events, calls = _recorder()

    def opener(url):
        raise TypeError("expected str")

    dispatcher = ActionDispatcher(events, opener=opener)
    raw = {"title": "Go", "action": "url", "url": 5}

    with caplog.at_level("ERROR", logger="pigeonfarm.actions"):
        dispatcher.dispatch(2, Action(label="Go", kind="url", target=5, raw=raw))

    assert calls == [("touched", 2, raw)]
    assert "Could not open 5" in caplog.text
