class Error(Exception):
    """Base class for other exceptions"""


class ReferenceDataError(Error):
    """
    Raised when a reference table file exists but cannot be read or parsed.
    For example, a truncated JSON export or a CSV with a broken header.
    The engine itself never raises this; only the file loader does.
    """

    def __init__(self, message, path: str = None):
        super().__init__(message)
        self.message = message
        self.path = path
