class AtomLocException(Exception):
    """
    Base exception class for AtomLoc.
    """

    pass


class InvalidStrandError(AtomLocException):
    """
    Raised when a strand is set to something other than ``+``, ``-``, ``.``, -1, 0 or 1.
    The rejected input is kept on the ``value`` attribute.
    """

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message or "{!r} is not a valid strand".format(value))


class LocationException(AtomLocException):
    """
    Raised when a Location is given inputs it cannot represent, such as fuzzy positions.
    """

    pass


class MissingCoordinateError(LocationException):
    """
    Raised when an operation needs both start and end, but at least one of them has not been set.
    """

    pass


class LocationOrientationWarning(UserWarning):
    """
    Emitted when a Location is constructed with start > end and is flipped onto the minus strand.
    """

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(
            "When building a location, start ({}) is expected to be less than end ({}), however it was not. "
            "Switching start and end and setting strand to -1".format(start, end)
        )
