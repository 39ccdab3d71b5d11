from yewchat.event_bus import EventBus


def test_all_subscribers_receive():
    bus = EventBus()
    first, second = [], []
    bus.connect(first.append)
    bus.connect(second.append)
    bus.publish("ping")
    assert first == ["ping"]
    assert second == ["ping"]


def test_ids_are_distinct():
    bus = EventBus()
    ids = {bus.connect(lambda m: None) for _ in range(5)}
    assert len(ids) == 5


def test_disconnect_stops_delivery():
    bus = EventBus()
    kept, dropped = [], []
    bus.connect(kept.append)
    dropped_id = bus.connect(dropped.append)
    bus.publish("one")
    bus.disconnect(dropped_id)
    bus.disconnect(dropped_id)
    bus.publish("two")
    assert kept == ["one", "two"]
    assert dropped == ["one"]


def test_messages_keep_order():
    bus = EventBus()
    seen = []
    bus.connect(seen.append)
    for text in ["a", "b", "c"]:
        bus.publish(text)
    assert seen == ["a", "b", "c"]