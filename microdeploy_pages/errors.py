"""Render-time lookup failures shared by the glyph and asset resolvers."""


class ResolutionMiss(LookupError):
    """Raised when a resolver cannot translate a reference into a handle.

    The page composer treats this as recoverable: it substitutes a neutral
    placeholder, records the miss and carries on with the remaining sections.
    """

    def __init__(self, reference: str, message: str | None = None) -> None:
        self.reference = reference
        super().__init__(message or f"Could not resolve '{reference}'.")


__all__ = ["ResolutionMiss"]
