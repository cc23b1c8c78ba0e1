class SlugError(ValueError):
    """Base class for every error raised while deriving a slug."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class RootMismatchError(SlugError):
    pass


class UnexpectedFilenameError(SlugError):
    pass


class InvalidDateError(SlugError):
    pass
