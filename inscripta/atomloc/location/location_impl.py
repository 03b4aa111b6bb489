import warnings
from typing import Optional, Iterator

from Bio.SeqFeature import FeatureLocation, ExactPosition

from inscripta.atomloc import PositionType, LocationType
from inscripta.atomloc.exc import LocationException, LocationOrientationWarning
from inscripta.atomloc.location.location import Location
from inscripta.atomloc.location.strand import Strand, StrandInputType
from inscripta.atomloc.util.object_validation import ObjectValidation


class AtomicLocation(Location):
    """A single contiguous range on a sequence, with exact start and end positions.

    Positions are 1-based and closed. Every field can be reassigned after construction; start/end
    normalization only happens once, in the constructor.
    """

    def __init__(
        self,
        start: Optional[int] = None,
        end: Optional[int] = None,
        strand: Optional[StrandInputType] = None,
        seq_id: Optional[str] = None,
    ):
        """
        Parameters
        ----------
        start
            First position of this Location
        end
            Last position of this Location. If ``start > end`` and strand is not minus, the positions are
            swapped, strand is set to minus and a :class:`LocationOrientationWarning` is emitted.
        strand
            Strand of this Location. Accepts a Strand, -1/0/1 or one of ``+``, ``-``, ``.``.
            If not provided, the strand is left unset.
        seq_id
            Identifier of the sequence this Location is on
        """
        self._start = None
        self._end = None
        self._strand = None
        self.seq_id = None
        self.is_remote = False

        if strand is not None:
            self.strand = strand
        if start is not None:
            self.start = start
        if end is not None:
            self.end = end

        if self.start is not None and self.end is not None and self.start > self.end and self.strand != Strand.MINUS:
            warnings.warn(LocationOrientationWarning(start, end))
            self.strand = Strand.MINUS
            self.start, self.end = self.end, self.start

        if seq_id:
            self.seq_id = seq_id

    def _get_start(self) -> Optional[int]:
        return self._start

    def _set_start(self, value: int):
        ObjectValidation.require_integer_position(value)
        self._start = value

    def _get_end(self) -> Optional[int]:
        return self._end

    def _set_end(self, value: int):
        ObjectValidation.require_integer_position(value)
        self._end = value

    # an exact location has no uncertainty, so min and max are the same position
    start = min_start = max_start = property(_get_start, _set_start)
    end = min_end = max_end = property(_get_end, _set_end)

    @property
    def strand(self) -> Optional[Strand]:
        return self._strand

    @strand.setter
    def strand(self, value: StrandInputType):
        self._strand = Strand.coerce(value)

    def __str__(self):
        return self.to_feature_table_string()

    def __repr__(self):
        strand = str(self.strand) if self.strand is not None else "?"
        data = f"{self.start}-{self.end}:{strand}"
        if self.seq_id:
            data = f"{self.seq_id}:{data}"
        if self.is_remote:
            data += " remote"
        return f"<AtomicLocation {data}>"

    def __eq__(self, other):
        if type(other) is not AtomicLocation:
            return False
        if self.start != other.start:
            return False
        if self.end != other.end:
            return False
        if self.strand is not other.strand:
            return False
        if self.seq_id != other.seq_id:
            return False
        if self.is_remote != other.is_remote:
            return False
        return True

    __hash__ = None

    @property
    def length(self) -> int:
        ObjectValidation.require_coordinates(self)
        return abs(self.end - self.start) + 1

    @property
    def start_pos_type(self) -> PositionType:
        return PositionType.EXACT

    @property
    def end_pos_type(self) -> PositionType:
        return PositionType.EXACT

    @property
    def location_type(self) -> LocationType:
        return LocationType.EXACT

    def each_location(self) -> Iterator[Location]:
        yield self

    def to_feature_table_string(self) -> str:
        ObjectValidation.require_coordinates(self)
        if self.start == self.end:
            return str(self.start)
        ft_str = f"{self.start}..{self.end}"
        if self.strand == Strand.MINUS:
            ft_str = f"complement({ft_str})"
        return ft_str

    def truncate(self, window_start: int, window_end: int, relative_orientation: StrandInputType) -> "AtomicLocation":
        """Remaps this Location onto the window ``[window_start, window_end]`` of its sequence, such as when
        that sequence is sliced.

        If this Location does not fit in the window, the result keeps the original positions, strand and
        sequence ID, and is flagged as remote. Otherwise the result has window-relative positions, its strand
        combined with ``relative_orientation`` (unstranded if this Location's strand is unset) and no sequence ID.
        This Location is never modified.
        """
        ObjectValidation.require_coordinates(self)
        relative_orientation = Strand.coerce(relative_orientation)
        new_start = self.start - window_start + 1
        new_end = self.end - window_start + 1

        # assign fields after construction so that the constructor does not reorient the result
        truncated = AtomicLocation()
        if new_start < 1 or new_end > window_end - window_start + 1:
            truncated.start = self.start
            truncated.end = self.end
            if self.strand is not None:
                truncated.strand = self.strand
            truncated.seq_id = self.seq_id
            truncated.is_remote = True
        else:
            truncated.start = new_start
            truncated.end = new_end
            if self.strand is None:
                truncated.strand = Strand.UNSTRANDED
            else:
                truncated.strand = self.strand.relative_to(relative_orientation)
        return truncated

    def to_feature_location(self) -> FeatureLocation:
        """Convert to a BioPython FeatureLocation."""
        ObjectValidation.require_coordinates(self)
        start, end = sorted((self.start, self.end))
        strand = self.strand.value if self.strand is not None else None
        return FeatureLocation(start - 1, end, strand, ref=self.seq_id)

    def to_biopython(self) -> FeatureLocation:
        """Provide a shared function signature with other Locations"""
        return self.to_feature_location()

    @classmethod
    def from_biopython(cls, feature_location: FeatureLocation) -> "AtomicLocation":
        """Construct from a BioPython FeatureLocation. Fuzzy positions and empty spans cannot be represented."""
        for pos in (feature_location.start, feature_location.end):
            if not isinstance(pos, ExactPosition):
                raise LocationException(f"Position {pos!r} is not exact; cannot build an AtomicLocation")
        if int(feature_location.start) == int(feature_location.end):
            raise LocationException(f"{feature_location} is empty; cannot build an AtomicLocation")
        return cls(
            int(feature_location.start) + 1,
            int(feature_location.end),
            feature_location.strand,
            seq_id=feature_location.ref,
        )
