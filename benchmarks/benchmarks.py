import warnings

from Bio.SeqFeature import FeatureLocation

from inscripta.atomloc.exc import LocationOrientationWarning
from inscripta.atomloc.location import AtomicLocation, Strand, make_location
from inscripta.atomloc.models import AtomicLocationModel

NUM_LOCATIONS = 10000

LOCATION_ARGS = [(i, i + 500, Strand.PLUS if i % 2 else Strand.MINUS) for i in range(1, NUM_LOCATIONS + 1)]


class TestConstruction:
    def time_construct(self):
        for start, end, strand in LOCATION_ARGS:
            AtomicLocation(start, end, strand, seq_id="chrI")

    def time_construct_symbols(self):
        for start, end, strand in LOCATION_ARGS:
            AtomicLocation(start, end, strand.to_symbol(), seq_id="chrI")

    def time_construct_reversed(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", LocationOrientationWarning)
            for start, end, _ in LOCATION_ARGS:
                AtomicLocation(end, start)


class TestLocationOperations:
    def setup(self):
        self.locations = [AtomicLocation(start, end, strand, seq_id="chrI") for start, end, strand in LOCATION_ARGS]

    def time_to_feature_table_string(self):
        for loc in self.locations:
            loc.to_feature_table_string()

    def time_truncate_inside(self):
        for loc in self.locations:
            loc.truncate(1, NUM_LOCATIONS + 1000, Strand.MINUS)

    def time_truncate_remote(self):
        for loc in self.locations:
            loc.truncate(1000, 2000, Strand.PLUS)

    def time_has_overlap(self):
        query = AtomicLocation(5000, 5100, Strand.PLUS, seq_id="chrI")
        for loc in self.locations:
            loc.has_overlap(query)


class TestConversion:
    def setup(self):
        self.locations = [AtomicLocation(start, end, strand, seq_id="chrI") for start, end, strand in LOCATION_ARGS]
        self.feature_locations = [FeatureLocation(start - 1, end, strand.value) for start, end, strand in LOCATION_ARGS]
        self.models = [AtomicLocationModel.from_atomic_location(loc) for loc in self.locations]

    def time_to_biopython(self):
        for loc in self.locations:
            loc.to_biopython()

    def time_make_location_biopython(self):
        for feature_location in self.feature_locations:
            make_location(feature_location)

    def time_dump_models(self):
        AtomicLocationModel.Schema().dump(self.models, many=True)
