"""
:class:`Location` objects represent ranges defined on a sequence. Every location variant implements the same
interface, so callers can iterate the component locations of any variant with
:meth:`~inscripta.atomloc.AbstractLocation.each_location` and render it with
:meth:`~inscripta.atomloc.AbstractLocation.to_feature_table_string`.

:func:`make_location` builds a :class:`Location` from any of the supported input types.
"""

from functools import singledispatch

from Bio.SeqFeature import FeatureLocation

from inscripta.atomloc.location.location import Location
from inscripta.atomloc.location.strand import Strand  # noqa: F401
from inscripta.atomloc.location.location_impl import AtomicLocation


@singledispatch
def make_location(obj) -> Location:
    raise TypeError("{} not supported".format(type(obj)))


@make_location.register(Location)
def _(obj) -> Location:
    return obj


@make_location.register(FeatureLocation)
def _(obj) -> Location:
    return AtomicLocation.from_biopython(obj)
