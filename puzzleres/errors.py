"""Error type shared by the resource and message tools."""


class PuzzleError(Exception):
    """Raised when a resource, message or value cannot be processed."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return str(self.message)