class PigeonFarmError(Exception):
    """Base class for message client errors."""


class ConfigurationError(PigeonFarmError):
    """The client was used without the configuration it needs.

    This is a programming error of the host and is the only error that
    escapes ``PigeonFarmClient.show``.
    """


class MissingConfigurationError(ConfigurationError):
    def __init__(self, message: str = "No URL was set for the message client") -> None:
        super().__init__(message)


class InvalidUrlError(PigeonFarmError):
    def __init__(self, url: str, reason: str = "") -> None:
        text = f"Invalid message url: {url}"
        if reason:
            text += f" ({reason})"
        super().__init__(text)
        self.url = url


class NetworkError(PigeonFarmError):
    def __init__(self, url: str, original_error: Exception) -> None:
        super().__init__(f"Failure loading data from {url}: {original_error}")
        self.url = url
        self.original_error = original_error


class DecodeError(PigeonFarmError):
    """Received data could not be parsed as JSON."""


class ValidationError(PigeonFarmError):
    """Received JSON does not describe a message."""
