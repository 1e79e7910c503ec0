import pytest

from signalhub import MixinTargetError, SignalHub


def test_mixin_returns_bound_operations():
    table = SignalHub.mixin()
    assert sorted(table) == ["emit", "off", "on", "once", "reset"]
    assert all(callable(method) for method in table.values())
    hubs = {method.__self__ for method in table.values()}
    assert len(hubs) == 1


def test_mixin_callables_survive_detachment():
    table = SignalHub.mixin()
    on, emit = table["on"], table["emit"]
    ary = []
    on("pop", lambda value: ary.append(value))
    emit("pop", "x")
    assert ary == ["x"]


def test_mixin_tables_are_independent():
    first, second = SignalHub.mixin(), SignalHub.mixin()
    ary = []
    second["on"]("pop", lambda: ary.append("second"))
    first["emit"]("pop")
    assert ary == []
    second["emit"]("pop")
    assert ary == ["second"]


def test_mix_into_instances_keeps_state_separate():
    class Thingie:
        pass

    one = SignalHub.mix_into(Thingie())
    two = SignalHub.mix_into(Thingie())
    ary = []
    one.on("pop", lambda: ary.append("one"))
    two.once("pop", lambda: ary.append("two"))
    one.emit("pop")
    two.emit("pop")
    two.emit("pop")
    assert ary == ["one", "two"]
    assert callable(one.off) and callable(one.reset)


def test_mix_into_class_is_rejected():
    class Thingie:
        pass

    with pytest.raises(MixinTargetError):
        SignalHub.mix_into(Thingie)
    assert not hasattr(Thingie, "on")


def test_class_extends():
    class Widgey(SignalHub):
        pass

    wijjy, other = Widgey(), Widgey()
    ary = []
    wijjy.on("pop", lambda: ary.append("w"))
    other.emit("pop")
    wijjy.emit("pop")
    assert ary == ["w"]


def test_subclass_mixin_uses_subclass():
    class Widgey(SignalHub):
        pass

    table = Widgey.mixin()
    assert isinstance(table["on"].__self__, Widgey)


def test_composition_delegation():
    class Player:
        def __init__(self):
            self.signals = SignalHub()

        def play(self):
            self.signals.emit("play", self)

    player = Player()
    seen = []
    player.signals.on("play", seen.append)
    player.play()
    assert seen == [player]
