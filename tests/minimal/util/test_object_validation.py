import pytest

from inscripta.atomloc.exc import MissingCoordinateError, LocationException
from inscripta.atomloc.location.location_impl import AtomicLocation
from inscripta.atomloc.location.strand import Strand
from inscripta.atomloc.util.object_validation import ObjectValidation


class TestObjectValidation:
    def test_require_coordinates(self):
        with pytest.raises(MissingCoordinateError):
            ObjectValidation.require_coordinates(AtomicLocation())
        with pytest.raises(MissingCoordinateError):
            ObjectValidation.require_coordinates(AtomicLocation(start=5))
        with pytest.raises(LocationException):
            ObjectValidation.require_coordinates(AtomicLocation(end=5))
        ObjectValidation.require_coordinates(AtomicLocation(0, 0, Strand.PLUS))

    @pytest.mark.parametrize("value", [0, -1, 10**12])
    def test_require_integer_position(self, value):
        ObjectValidation.require_integer_position(value)

    @pytest.mark.parametrize("value", [None, 1.0, "1", False])
    def test_require_integer_position_invalid(self, value):
        with pytest.raises(TypeError):
            ObjectValidation.require_integer_position(value)
