"""Exception hierarchy for switch scraping."""


class SwitchError(Exception):
    """Base exception for all switch scraping errors."""


class TransportError(SwitchError):
    """Network or connection failure while talking to the switch."""


class AuthenticationError(SwitchError):
    """Login request was rejected by the switch."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class AuthenticationFailed(AuthenticationError):
    """The switch answered with its login page instead of the requested page."""


class FetchError(SwitchError):
    """Status page request returned a non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ParseError(SwitchError):
    """Status page could not be turned into port statistics."""


class UnrecognizedPageFormat(ParseError):
    """The port statistics script block was not found in the page."""

    def __init__(self, message: str, page: str = ""):
        self.page = page
        super().__init__(message)


class MalformedField(ParseError):
    """A field of the port statistics script block failed to decode."""

    def __init__(self, field: str, raw: str, reason: str = ""):
        self.field = field
        self.raw = raw
        message = f"unable to read {field} `{raw}`"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
