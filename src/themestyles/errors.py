"""Exception types raised at the edges of the stylesheet pipeline."""


class ThemeStylesError(Exception):
    """Base class for all themestyles errors."""


class UnknownTransformError(ThemeStylesError, KeyError):
    """Raised when a transform variant name is not registered."""

    def __init__(self, name: str, known: list[str] | None = None):
        self.name = name
        self.known = known or []
        message = f"Unknown transform: {name!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])
