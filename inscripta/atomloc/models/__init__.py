"""
Data models. These models allow for validation of inputs to an AtomLoc model.
"""

from inscripta.atomloc.models.models import AtomicLocationModel  # noqa: F401
