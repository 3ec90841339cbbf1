"""Exception hierarchy for board acquisition and play."""


class TriviaBoardError(Exception):
    """Base class for all trivia board errors."""

    pass


class UpstreamError(TriviaBoardError):
    """Raised when the trivia API cannot be reached or returns garbage."""

    pass


class SampleSizeError(TriviaBoardError, ValueError):
    """Raised when more items are requested than a collection holds."""

    def __init__(self, requested: int, available: int, message: str | None = None):
        self.requested = requested
        self.available = available
        super().__init__(message or f"Cannot sample {requested} items from {available}")


class InsufficientCluesError(SampleSizeError):
    """Raised when a category has fewer clues than a board row count."""

    def __init__(self, category_id: int, requested: int, available: int):
        self.category_id = category_id
        super().__init__(
            requested,
            available,
            f"Category {category_id} has {available} clues, {requested} required",
        )


class InsufficientCategoriesError(SampleSizeError):
    """Raised when the catalog holds fewer categories than a board needs."""

    def __init__(self, requested: int, available: int):
        super().__init__(
            requested,
            available,
            f"Catalog returned {available} categories, {requested} required",
        )


class GameLoadingError(TriviaBoardError):
    """Raised when a board is requested or started while one is being assembled."""

    pass


class GameNotReadyError(TriviaBoardError):
    """Raised when a clue is revealed before a board has been assembled."""

    pass


class InvalidCoordinateError(TriviaBoardError, IndexError):
    """Raised when a clue coordinate falls outside the board."""

    pass
