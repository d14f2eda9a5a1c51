class DateParseError(ValueError):
    """Raised when a membership end date cannot be read as a calendar date."""

    def __init__(self, value: str, message: str | None = None) -> None:
        super().__init__(message or f"Cannot parse membership end date: {value!r}")
        self.value = value


class SectionCatalogError(Exception):
    """Raised when a section catalog source is missing or malformed."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
