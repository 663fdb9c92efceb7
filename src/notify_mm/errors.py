"""Exceptions raised while building or delivering a notification."""


class NotifyError(Exception):
    """Base class for every failure that aborts a run."""


class ConfigurationError(NotifyError):
    """The action inputs or the files they point at are unusable."""


class MissingRequiredInputError(ConfigurationError):
    """A required input was not supplied."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"Input required and not supplied: {', '.join(names)}")


class FileAccessError(ConfigurationError):
    """The legacy payload file exists but cannot be read."""


class ParseError(NotifyError):
    """The event context is not well-formed JSON."""


class InvalidPayloadError(ParseError):
    """The PAYLOAD input is not well-formed JSON."""


class MissingInputError(NotifyError):
    """No input produced a payload."""

    def __init__(self) -> None:
        super().__init__("You need to provide TEXT or PAYLOAD input")


class DeliveryError(NotifyError):
    """The webhook answered with something other than 200 OK."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Unexpected status code: {status_code} {reason}".rstrip())
