"""Error taxonomy shared by the HTTP routes and the tool server."""


class CopilotError(Exception):
    """Base class for errors raised by the copilot."""


class ConfigError(CopilotError):
    """Missing or invalid configuration, such as an absent API key."""


class InputShapeError(CopilotError):
    """Caller input does not have the expected shape."""


class BackendError(CopilotError):
    """The generative backend call failed."""


class SessionBusyError(CopilotError):
    """A chat session already has a reply outstanding."""
