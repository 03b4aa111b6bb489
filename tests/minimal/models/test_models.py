"""
Test importing and exporting AtomicLocationModel objects from JSON.
"""
import json

import pytest
from marshmallow import ValidationError

from inscripta.atomloc.exc import LocationOrientationWarning
from inscripta.atomloc.location import AtomicLocation, Strand, make_location
from inscripta.atomloc.models import AtomicLocationModel


class TestAtomicLocationModel:
    def test_from_atomic_location(self):
        loc = AtomicLocation(1, 100, Strand.MINUS, seq_id="chrI")
        model = AtomicLocationModel.from_atomic_location(loc)
        assert model == AtomicLocationModel(start=1, end=100, strand=Strand.MINUS, seq_id="chrI", is_remote=False)

    def test_to_atomic_location(self):
        model = AtomicLocationModel(start=10, end=20, strand=Strand.PLUS, is_remote=True)
        loc = model.to_atomic_location()
        assert (loc.start, loc.end, loc.strand, loc.seq_id, loc.is_remote) == (10, 20, Strand.PLUS, None, True)

    def test_to_atomic_location_unset_strand(self):
        loc = AtomicLocationModel(start=10, end=20).to_atomic_location()
        assert loc.strand is None

    def test_to_atomic_location_reorients(self):
        with pytest.warns(LocationOrientationWarning):
            loc = AtomicLocationModel(start=20, end=10).to_atomic_location()
        assert (loc.start, loc.end, loc.strand) == (10, 20, Strand.MINUS)

    def test_json_round_trip(self):
        loc = AtomicLocation(5, 500, "-", seq_id="chrII")
        loc.is_remote = True
        schema = AtomicLocationModel.Schema()
        dumped = json.dumps(schema.dump(AtomicLocationModel.from_atomic_location(loc)))
        assert schema.load(json.loads(dumped)).to_atomic_location() == loc

    def test_load_defaults(self):
        model = AtomicLocationModel.Schema().load({"start": 1, "end": 5})
        assert model == AtomicLocationModel(start=1, end=5)
        assert model.is_remote is False
        assert model.strand is None

    @pytest.mark.parametrize(
        "data",
        [
            {"start": "one", "end": 5},
            {"start": 1, "end": 5, "strand": "SIDEWAYS"},
            {"start": 1, "end": 5, "is_remote": "maybe"},
        ],
    )
    def test_load_invalid(self, data):
        with pytest.raises(ValidationError):
            AtomicLocationModel.Schema().load(data)

    def test_make_location(self):
        model = AtomicLocationModel(start=1, end=5, strand=Strand.PLUS, seq_id="chrI")
        assert make_location(model) == AtomicLocation(1, 5, Strand.PLUS, seq_id="chrI")
