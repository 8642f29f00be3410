from vector_config.observable import ObservableObject


class _Thing(ObservableObject):
    def __init__(self) -> None:
        super().__init__()
        self._value = None


def test_set_property_reports_change_and_notifies():
    thing = _Thing()
    events = []
    thing.add_property_changed(lambda sender, name: events.append((sender, name)))

    assert thing.set_property("_value", 3, "value") is True
    assert thing._value == 3
    assert events == [(thing, "value")]


def test_set_property_equal_value_is_noop():
    thing = _Thing()
    events = []
    thing.add_property_changed(lambda sender, name: events.append(name))

    thing.set_property("_value", "a", "value")
    assert thing.set_property("_value", "a", "value") is False
    assert events == ["value"]


def test_raise_changed_without_backing_field():
    thing = _Thing()
    events = []
    thing.add_property_changed(lambda sender, name: events.append(name))
    thing.raise_changed("derived")
    assert events == ["derived"]


def test_remove_property_changed():
    thing = _Thing()
    events = []

    def handler(sender, name):
        events.append(name)

    thing.add_property_changed(handler)
    thing.remove_property_changed(handler)
    thing.remove_property_changed(handler)  # unknown handler is ignored
    thing.set_property("_value", 1, "value")
    assert events == []


def test_handler_can_unsubscribe_itself():
    thing = _Thing()
    events = []

    def once(sender, name):
        events.append(name)
        sender.remove_property_changed(once)

    thing.add_property_changed(once)
    thing.set_property("_value", 1, "value")
    thing.set_property("_value", 2, "value")
    assert events == ["value"]
