from abc import ABC
from typing import Tuple

from inscripta.atomloc import AbstractLocation
from inscripta.atomloc.util.object_validation import ObjectValidation


class Location(AbstractLocation, ABC):
    """Abstract location on a sequence. Behavior here is written only against the
    :class:`~inscripta.atomloc.AbstractLocation` interface, so it applies to every variant."""

    def __len__(self):
        """Returns the number of positions spanned by this Location."""
        return self.length

    def _span(self) -> Tuple[int, int]:
        """Returns the outermost (first, last) positions this Location can cover."""
        ObjectValidation.require_coordinates(self)
        return min(self.min_start, self.max_end), max(self.min_start, self.max_end)

    def _comparable(self, other: "Location", match_strand: bool) -> bool:
        if self.seq_id and other.seq_id and self.seq_id != other.seq_id:
            return False
        if match_strand and self.strand != other.strand:
            return False
        return True

    def has_overlap(self, other: "Location", match_strand: bool = False) -> bool:
        """Returns True iff this Location shares at least one position with the given Location.

        Parameters
        ----------
        other
            Other Location
        match_strand
            If set to True, automatically return False if the other Location's Strand does not match this
            Location's Strand

        Returns
        -------
        True if there is any overlap, False otherwise
        """
        if not self._comparable(other, match_strand):
            return False
        self_start, self_end = self._span()
        other_start, other_end = other._span()
        return self_start <= other_end and other_start <= self_end

    def contains(self, other: "Location", match_strand: bool = False) -> bool:
        """Returns True iff every position of the other Location is also a position of this Location.

        Parameters
        ----------
        other
            Other Location
        match_strand
            If set to True, automatically return False if the other Location's Strand does not match this
            Location's Strand
        """
        if not self._comparable(other, match_strand):
            return False
        self_start, self_end = self._span()
        other_start, other_end = other._span()
        return self_start <= other_start and other_end <= self_end
