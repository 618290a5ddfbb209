"""Exception types raised at the edges of the API."""


class TermEnvError(Exception):
    """Base class for termenv errors."""


class InvalidColorError(TermEnvError, ValueError):
    """A color string could not be parsed."""

    def __init__(self, value: str, message: str = "invalid color"):
        super().__init__(f"{message}: {value!r}")
        self.value = value


class InvalidProfileError(TermEnvError, ValueError):
    """A profile name is not one of TrueColor, ANSI256, ANSI or Ascii."""

    def __init__(self, name: str):
        super().__init__(f"unknown color profile: {name!r}")
        self.name = name
