"""Error kinds raised by the record codec and the boats registry.

Every error derives from :class:`BoatManagementError` so the command menu
can report any of them with a single handler. Only :class:`FileOpenError`
raised while loading is fatal; the others are handled by the command that
triggered them.
"""


class BoatManagementError(Exception):
    """Base class for all boat management errors."""


class FileOpenError(BoatManagementError):
    def __init__(self, path: str, cause: OSError) -> None:
        """The data file could not be opened.

        Parameters
        ----------
        path : str
            Path of the data file.
        cause : OSError
            Underlying error reported by the operating system.
        """
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {reason}")


class ParseError(BoatManagementError):
    def __init__(self, line: str, reason: str) -> None:
        """A line does not have the expected 5-field record shape."""
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class CapacityExceeded(BoatManagementError):
    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Marina is full ({capacity} boats)")


class NotFound(BoatManagementError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No boat named {name!r}")


class OverpaymentRejected(BoatManagementError):
    def __init__(self, name: str, amount: float, amount_owed: float) -> None:
        """A payment larger than the outstanding balance was refused.

        The balance of the boat is left unchanged.
        """
        self.name = name
        self.amount = amount
        self.amount_owed = amount_owed
        super().__init__(f"Payment of ${amount:.2f} exceeds ${amount_owed:.2f} owed by {name!r}")
