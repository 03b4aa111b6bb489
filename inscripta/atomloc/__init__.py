__version__ = "0.1.0"

from abc import ABC, abstractmethod
from enum import Enum
from typing import TypeVar, Iterator, Optional

from Bio.SeqFeature import FeatureLocation

Strand = TypeVar("Strand")


class PositionType(str, Enum):
    """How precisely a start or end position is known. Feature-table markers are ``<``, ``>`` and ``^``."""

    BEFORE = "BEFORE"
    AFTER = "AFTER"
    EXACT = "EXACT"
    WITHIN = "WITHIN"
    BETWEEN = "BETWEEN"


class LocationType(str, Enum):
    EXACT = "EXACT"
    WITHIN = "WITHIN"
    BETWEEN = "BETWEEN"


class AbstractLocation(ABC):
    """Shared AbstractLocation base class simplifies imports for type checking.

    Every location variant (atomic, compound, fuzzy) implements this interface, so that
    feature readers and writers can handle any of them without type inspection.
    All positions are 1-based and closed.
    """

    # The first position of this Location, or None if not yet set
    start: Optional[int]

    # The last position of this Location, or None if not yet set
    end: Optional[int]

    # The smallest and largest possible start of this Location
    min_start: Optional[int]
    max_start: Optional[int]

    # The smallest and largest possible end of this Location
    min_end: Optional[int]
    max_end: Optional[int]

    # The strand of this Location, or None if the strand was never assigned
    strand: Optional[Strand]

    # Identifier of the sequence this Location is on
    seq_id: Optional[str]

    # True if this Location refers to coordinates outside of the sequence it is annotated on
    is_remote: bool

    @abstractmethod
    def __str__(self):
        """Returns a human readable string representation of this Location"""

    @abstractmethod
    def __eq__(self, other):
        """Returns True iff this Location is equal to other object"""

    @abstractmethod
    def __repr__(self):
        """Returns the 'official' string representation of this Location"""

    @property
    @abstractmethod
    def length(self) -> int:
        """Returns the number of positions spanned by this Location"""

    @property
    @abstractmethod
    def start_pos_type(self) -> PositionType:
        """Returns the position type of the start of this Location"""

    @property
    @abstractmethod
    def end_pos_type(self) -> PositionType:
        """Returns the position type of the end of this Location"""

    @property
    @abstractmethod
    def location_type(self) -> LocationType:
        """Returns the type of this Location"""

    @abstractmethod
    def each_location(self) -> Iterator["AbstractLocation"]:
        """Returns an iterator over the component Locations of this Location. Variants without sublocations
        yield only themselves."""

    @abstractmethod
    def to_feature_table_string(self) -> str:
        """Returns the feature table representation of this Location, e.g. ``complement(1..100)``"""

    @abstractmethod
    def truncate(self, window_start: int, window_end: int, relative_orientation) -> "AbstractLocation":
        """Remaps this Location into the window ``[window_start, window_end]`` of its sequence.

        Parameters
        ----------
        window_start
            First position of the window, 1-based
        window_end
            Last position of the window, 1-based
        relative_orientation
            Orientation of the window relative to the sequence this Location is on

        Returns
        -------
        New Location. Locations that do not fit in the window are returned unchanged, flagged as remote.
        """

    @abstractmethod
    def to_biopython(self) -> FeatureLocation:
        """Returns a BioPython location with 0-based half-open coordinates"""
