import gc
import logging

import pytest

from pipeutils.objects import Any, AnyStorage, Creator, ObjectStatistic


def test_any_empty():
    holder = Any()
    assert not holder
    assert holder.empty()
    assert holder.type_name() == ""
    with pytest.raises(ValueError, match="Any is empty"):
        holder.get(int)


def test_any_set_and_get():
    holder = Any()
    holder.set(5)
    assert holder
    assert not holder.empty()
    assert holder.holds(int)
    assert not holder.holds(str)
    assert holder.get(int) == 5
    assert holder.type_name() == "int"


def test_any_get_wrong_type():
    holder = Any("text")
    with pytest.raises(ValueError, match="unable cast to"):
        holder.get(int)
    assert holder.get(int, safe=False) == "text"


def test_any_exact_type_only():
    holder = Any(True)
    assert holder.holds(bool)
    assert not holder.holds(int)


def test_any_set_none_resets():
    holder = Any([1, 2])
    holder.set(None)
    assert holder.empty()
    assert not holder.holds(list)


def test_any_reset():
    holder = Any({"k": 1})
    assert holder.get(dict) == {"k": 1}
    holder.reset()
    assert holder.empty()
    with pytest.raises(ValueError):
        holder.get(dict)


def test_any_type_name_for_user_class():
    class Custom:
        pass

    holder = Any(Custom())
    assert holder.type_name().endswith("Custom")
    assert holder.holds(Custom)


def test_any_storage_missing_key():
    storage = AnyStorage()
    holder = storage["missing"]
    assert holder.empty()
    assert "missing" in storage
    storage["missing"].set(3)
    assert storage["missing"].get(int) == 3


class Recorder:
    def __init__(self, name="default"):
        self.name = name
        self.events = []

    def on_create(self):
        self.events.append("create")

    def on_destroy(self):
        self.events.append("destroy")


def test_creator_create_runs_hooks():
    lifetime = Creator.create(Recorder, "first")
    obj = lifetime.value
    assert obj.name == "first"
    assert obj.events == ["create"]
    with lifetime as inner:
        assert inner is obj
    assert obj.events == ["create", "destroy"]
    lifetime.close()
    assert obj.events == ["create", "destroy"]


def test_creator_destroy_on_collect():
    lifetime = Creator.create(Recorder)
    obj = lifetime.value
    del lifetime
    gc.collect()
    assert obj.events == ["create", "destroy"]


class WithArgs:
    def __init__(self):
        self.received = None
        self.destroyed = False

    def on_create(self, a, b=0):
        self.received = (a, b)

    def on_destroy(self):
        self.destroyed = True


def test_creator_create2_passes_args():
    lifetime = Creator.create2(WithArgs, 1, b=2)
    assert lifetime.value.received == (1, 2)
    lifetime.close()
    assert lifetime.value.destroyed
    assert lifetime.closed


def test_creator_create2_positional_default():
    lifetime = Creator.create2(WithArgs, 7)
    assert lifetime.value.received == (7, 0)


def test_creator_create_skips_mismatched_hook():
    lifetime = Creator.create(WithArgs)
    assert lifetime.value.received is None
    lifetime.close()
    assert lifetime.value.destroyed


def test_creator_create2_skips_mismatched_hook():
    lifetime = Creator.create2(WithArgs, 1, 2, 3)
    assert lifetime.value.received is None


def test_creator_create2_skips_unknown_keyword():
    lifetime = Creator.create2(WithArgs, 1, c=2)
    assert lifetime.value.received is None


class Exploding:
    def on_destroy(self):
        raise RuntimeError("boom")


def test_creator_destroy_exception_is_logged(caplog):
    lifetime = Creator.create(Exploding)
    with caplog.at_level(logging.ERROR):
        lifetime.close()
    assert lifetime.closed
    assert "boom" in caplog.text
    assert "on_destroy" in caplog.text


def test_creator_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Creator()


class Tracked(ObjectStatistic):
    def __init__(self, value):
        self.value = value


class TrackedChild(Tracked):
    pass


def test_object_statistic_counts_live_instances():
    gc.collect()
    base = ObjectStatistic.count()
    tracked_base = Tracked.count()
    first = Tracked(1)
    second = Tracked(2)
    assert ObjectStatistic.count() == base + 2
    assert Tracked.count() == tracked_base + 2
    del first
    gc.collect()
    assert ObjectStatistic.count() == base + 1
    del second
    gc.collect()
    assert ObjectStatistic.count() == base
    assert Tracked.count() == tracked_base


def test_object_statistic_subclass_counts_towards_parent():
    gc.collect()
    root_base = ObjectStatistic.count()
    parent_base = Tracked.count()
    child_base = TrackedChild.count()
    child = TrackedChild(3)
    assert child.value == 3
    assert TrackedChild.count() == child_base + 1
    assert Tracked.count() == parent_base + 1
    assert ObjectStatistic.count() == root_base + 1
    del child
    gc.collect()
    assert TrackedChild.count() == child_base
    assert Tracked.count() == parent_base
    assert ObjectStatistic.count() == root_base