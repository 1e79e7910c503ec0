"""Minimal signal/receiver hub for embedding pub/sub behavior into objects."""
from signalhub.core.exceptions import ConfigurationError, MixinTargetError, SignalHubError
from signalhub.core.hub import Receiver, Relay, SignalHub

__all__ = [
    "SignalHub",
    "Relay",
    "Receiver",
    "SignalHubError",
    "MixinTargetError",
    "ConfigurationError",
]
