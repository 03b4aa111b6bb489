from inscripta.atomloc.exc import MissingCoordinateError


class ObjectValidation:
    @staticmethod
    def require_coordinates(location):
        if location.start is None or location.end is None:
            raise MissingCoordinateError(
                "Location must have both start and end set:\n{}".format(repr(location))
            )

    @staticmethod
    def require_integer_position(value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("Position must be an integer: {!r}".format(value))
