"""
Data models. These models allow for validation of inputs to an AtomLoc model, acting as a JSON schema for serializing
and deserializing the models.
"""
from typing import Optional, ClassVar, Type

from marshmallow import Schema
from marshmallow_dataclass import dataclass

from inscripta.atomloc.location import make_location
from inscripta.atomloc.location.location import Location
from inscripta.atomloc.location.location_impl import AtomicLocation
from inscripta.atomloc.location.strand import Strand


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class AtomicLocationModel(BaseModel):
    """Data model that allows construction of a :class:`~inscripta.atomloc.location.AtomicLocation` object."""

    start: Optional[int] = None
    end: Optional[int] = None
    strand: Optional[Strand] = None
    seq_id: Optional[str] = None
    is_remote: bool = False

    def to_atomic_location(self) -> AtomicLocation:
        """Construct an :class:`AtomicLocation`. The usual start/end normalization applies."""
        location = AtomicLocation(self.start, self.end, self.strand, seq_id=self.seq_id)
        location.is_remote = self.is_remote
        return location

    @staticmethod
    def from_atomic_location(location: AtomicLocation) -> "AtomicLocationModel":
        """Convert an :class:`AtomicLocation` to a :class:`AtomicLocationModel`."""
        return AtomicLocationModel(
            start=location.start,
            end=location.end,
            strand=location.strand,
            seq_id=location.seq_id,
            is_remote=location.is_remote,
        )


@make_location.register(AtomicLocationModel)
def _(obj) -> Location:
    return obj.to_atomic_location()
