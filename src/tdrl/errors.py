"""Exception hierarchy for tdrl.

Two families matter at runtime:

- ``ConfigurationError``: geometry or shape mismatches detected while
  building approximators and agents.  These are fatal: nothing sensible can
  run on top of an inconsistent feature space.
- ``UpdateError``: a single evaluate/update addressed a feature or output
  column outside the approximator's bounds.  Raised *before* any weight is
  touched, so the caller can log it and keep the episode going.
"""

from __future__ import annotations


class TDRLError(Exception):
    """Base class for all tdrl errors."""


class ConfigurationError(TDRLError, ValueError):
    """Incompatible construction-time geometry (shapes, sizes, spaces)."""


class OutOfBoundsError(TDRLError, ValueError):
    """An input value lies outside the bounds of a partitioned dimension."""


class UpdateError(TDRLError, IndexError):
    """An evaluate/update was addressed outside the declared bounds."""


class FeatureIndexError(UpdateError):
    """A projection references a feature index outside ``[0, n_features)``."""


class ActionIndexError(UpdateError):
    """An output column (action) index outside ``[0, n_outputs)``."""
