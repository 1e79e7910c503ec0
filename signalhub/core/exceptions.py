class SignalHubError(Exception):
    """Base class for errors raised by signalhub itself."""


class MixinTargetError(SignalHubError, TypeError):
    """Raised when hub methods would be attached to a shared class surface."""


class ConfigurationError(SignalHubError):
    """Raised when required configuration is missing or invalid."""
