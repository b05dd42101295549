"""Tests for SuperModel."""

from rxsuper import SuperModel, rx_state


class User(SuperModel):
    def __init__(self, id, name):
        self.id = id
        self.name = name

    @property
    def props(self):
        return [self.id, self.name]


class TestSuperModel:
    def test_str(self):
        assert str(User(1, "Ada")) == "User(1,Ada)"

    def test_equality_by_props(self):
        assert User(1, "Ada") == User(1, "Ada")
        assert User(1, "Ada").equals(User(1, "Ada"))
        assert User(1, "Ada") != User(2, "Ada")

    def test_hashable(self):
        assert len({User(1, "Ada"), User(1, "Ada")}) == 1

    def test_equal_model_write_is_noop(self):
        cell = rx_state(User(1, "Ada"))
        log = []
        cell.add_listener(lambda: log.append(cell.value))
        cell.value = User(1, "Ada")
        assert log == []
        cell.value = User(1, "Grace")
        assert log == [User(1, "Grace")]
