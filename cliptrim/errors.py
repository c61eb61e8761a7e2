"""Errors raised by the trimming core.

All of them derive from :class:`ValueError` so hosts that already guard
file/asset loading with ``except ValueError`` keep working.  Pixel and
time inputs never raise: out-of-range values are clamped instead.
"""


class TrimError(ValueError):
    """Base class for trimming-core failures."""


class DegenerateRange(TrimError):
    """Usable width or total duration is zero or negative, so nothing maps."""


class NoAssetLoaded(TrimError):
    """Operation needs a loaded asset but the session is still empty."""


class InvalidMinDuration(TrimError):
    """Minimum trim duration is not shorter than the asset itself."""
