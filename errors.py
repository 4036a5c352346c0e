# errors.py


class RouletteError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RouletteError):
    # bad client input
    status_code = 400


class StorageError(RouletteError):
    # database unreachable or transaction failed (already rolled back)
    status_code = 500


class EmptyListError(RouletteError):
    status_code = 500
