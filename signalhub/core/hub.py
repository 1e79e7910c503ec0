"""Succinct signal/receiver hub for embedding pub/sub into other objects.

A ``SignalHub`` is either owned and delegated to, subclassed, or its bound
methods are copied onto a single object with ``SignalHub.mix_into``.
"""
import logging
import types
from typing import Any, Callable, Dict, List, Tuple

from signalhub.core.exceptions import MixinTargetError

logger = logging.getLogger(__name__)

Receiver = Callable[..., Any]

MIXIN_METHODS = ("on", "once", "off", "emit", "reset")


def receiver_key(receiver: Receiver) -> Any:
    """Identity key for a receiver.

    Bound methods are recreated on every attribute access, so they are keyed
    by (instance, function) identity; everything else by its own identity.
    The registered relay keeps the receiver alive, so ids are not reused
    while a subscription exists.
    """
    if isinstance(receiver, types.MethodType):
        return (id(receiver.__self__), id(receiver.__func__))
    if isinstance(receiver, types.BuiltinMethodType):
        owner = receiver.__self__
        if owner is not None and not isinstance(owner, types.ModuleType):
            return (id(owner), receiver.__name__)
    return id(receiver)


class Relay:
    """Adapter registered for one (receiver, signal name) subscription."""

    __slots__ = ("hub", "signal_name", "receiver", "once", "attached")

    def __init__(self, hub: "SignalHub", signal_name: str, receiver: Receiver, once: bool = False) -> None:
        self.hub = hub
        self.signal_name = signal_name
        self.receiver = receiver
        self.once = once
        self.attached = True

    def __call__(self, args: Tuple[Any, ...]) -> None:
        if not self.attached:
            return
        if self.once:
            # detach before the receiver runs so a nested emit cannot reach it
            self.hub.off(self.signal_name, self.receiver)
        self.hub._invoke(self.receiver, args)

    def __repr__(self) -> str:
        state = "attached" if self.attached else "detached"
        kind = "once" if self.once else "on"
        return f"<Relay {kind} {self.signal_name!r} -> {self.receiver!r} ({state})>"


class SignalHub:
    """Registry of receivers per signal name with synchronous dispatch.

    Receivers are matched by identity, never by equality; bound methods
    match on (instance, function) identity. Subscribing the same receiver
    to the same signal twice is a no-op.

    ``bind_context=True`` is an opt-in legacy mode where plain functions get
    the hub passed as their first argument, like a method of the hub.
    """

    def __init__(self, bind_context: bool = False) -> None:
        self.bind_context = bind_context
        self._receiver_map: Dict[Any, Dict[str, Relay]] = {}
        self._relays: Dict[str, List[Relay]] = {}

    def _add(self, signal_name: str, receiver: Receiver, once: bool = False) -> None:
        if not signal_name or receiver is None:
            return

        key = receiver_key(receiver)
        found = self._receiver_map.get(key)
        # bails when a relay exists for the signal
        if found is not None and signal_name in found:
            return

        relay = Relay(self, signal_name, receiver, once)
        if found is None:
            self._receiver_map[key] = {signal_name: relay}
        else:
            found[signal_name] = relay
        self._relays.setdefault(signal_name, []).append(relay)
        logger.debug("Subscribed %r to %s (once=%s)", receiver, signal_name, once)

    def _invoke(self, receiver: Receiver, args: Tuple[Any, ...]) -> None:
        if self.bind_context and isinstance(receiver, types.FunctionType):
            receiver = types.MethodType(receiver, self)
        receiver(*args)

    def on(self, signal_name: str, receiver: Receiver) -> "SignalHub":
        """Call ``receiver`` on every emit of ``signal_name`` until removed."""
        self._add(signal_name, receiver)
        return self

    def once(self, signal_name: str, receiver: Receiver) -> "SignalHub":
        """Call ``receiver`` on the next emit of ``signal_name`` only."""
        self._add(signal_name, receiver, once=True)
        return self

    def off(self, signal_name: str, receiver: Receiver) -> "SignalHub":
        """Remove ``receiver`` from ``signal_name``; unknown pairs are ignored."""
        key = receiver_key(receiver)
        found = self._receiver_map.get(key)
        if found is None:
            return self

        relay = found.pop(signal_name, None)
        if relay is None:
            return self

        relay.attached = False
        relays = self._relays.get(signal_name)
        if relays is not None:
            relays.remove(relay)
            if not relays:
                del self._relays[signal_name]
        if not found:
            del self._receiver_map[key]
        logger.debug("Unsubscribed %r from %s", receiver, signal_name)
        return self

    def emit(self, signal_name: str, *args: Any) -> "SignalHub":
        """Call every receiver of ``signal_name`` with ``args``, in order.

        Receivers removed while the emit is running are skipped once their
        turn comes; receivers added while it runs wait for the next emit.
        Exceptions from a receiver propagate and end the emit.
        """
        relays = tuple(self._relays.get(signal_name, ()))
        logger.debug("Emitting %s to %d receiver(s)", signal_name, len(relays))
        for relay in relays:
            relay(args)
        return self

    def reset(self) -> "SignalHub":
        """Remove every receiver for every signal."""
        for relays in self._relays.values():
            for relay in relays:
                relay.attached = False
        self._receiver_map = {}
        self._relays = {}
        logger.debug("Reset %r", self)
        return self

    def receivers(self, signal_name: str) -> Tuple[Receiver, ...]:
        """Receivers currently subscribed to ``signal_name``, in order."""
        return tuple(relay.receiver for relay in self._relays.get(signal_name, ()))

    def has_receivers(self, signal_name: str) -> bool:
        """Whether anything is subscribed to ``signal_name``."""
        return bool(self._relays.get(signal_name))

    @classmethod
    def mixin(cls) -> Dict[str, Callable[..., Any]]:
        """Methods bound to a new hub, to be assigned to a single object.

        Assign these to instances, never to a class: every instance of that
        class would then share one registry.
        """
        hub = cls()
        return {name: getattr(hub, name) for name in MIXIN_METHODS}

    @classmethod
    def mix_into(cls, target: Any) -> Any:
        """Attach a fresh ``mixin()`` table onto ``target`` and return it."""
        if isinstance(target, type):
            raise MixinTargetError(
                f"Cannot mix {cls.__name__} into class {target.__name__}; "
                "mix into each instance instead"
            )
        for name, method in cls.mixin().items():
            setattr(target, name, method)
        return target

    def __repr__(self) -> str:
        return f"<{type(self).__name__} signals={sorted(self._relays)}>"
