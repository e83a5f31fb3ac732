# bounding_region.py

import logging
import numpy as np
import numba
import constants

logger = logging.getLogger(constants.LOGGER_NAME)


class DimensionMismatchError(ValueError):
    """Raised when points of different dimensionality meet in one region."""


# --- JIT-Compiled Containment Kernels ---
# Kept outside the BoundingRegion class so Numba's nopython mode only ever
# sees NumPy arrays and scalars.

@numba.jit(nopython=True)
def _axis_contains_jit(value, a, b):
    """
    Closed-interval test on one axis with unordered bounds.
    Equivalent to min(a, b) <= value <= max(a, b), except that a NaN anywhere
    fails both branches, whichever corner holds it.
    """
    return (a <= value and value <= b) or (b <= value and value <= a)

@numba.jit(nopython=True)
def _contains_jit(point, corner_a, corner_b):
    """Checks every axis of a single point against the two corners."""
    for d in range(point.shape[0]):
        if not _axis_contains_jit(point[d], corner_a[d], corner_b[d]):
            return False
    return True

@numba.jit(nopython=True)
def _contains_many_jit(points, corner_a, corner_b, out):
    """Batch containment. Writes one flag per row of `points` into `out`."""
    for i in range(points.shape[0]):
        out[i] = _contains_jit(points[i], corner_a, corner_b)


def _as_point(point, name="point"):
    """Normalizes a point to a flat float64 array, rejecting D=0 and nested input."""
    arr = np.asarray(point, dtype=np.float64)
    if arr.ndim != 1 or arr.shape[0] == 0:
        raise DimensionMismatchError(
            f"{name} must be a flat, non-empty sequence of coordinates, got shape {arr.shape}."
        )
    return arr


def _frozen(arr):
    # Copy first so the caller's own array is never locked.
    arr = np.array(arr, dtype=np.float64)
    arr.flags.writeable = False
    return arr


class BoundingRegion:
    """
    An axis-aligned box in D-dimensional space spanned by two corner points.

    Data Contract:
    - Inputs:
        - corner_a, corner_b (sequence of float): Opposite corners of equal
          dimensionality. Neither has to be the per-axis minimum.
    - Outputs: None. Answers containment queries.
    - Side Effects: None. The corner and extent arrays are read-only.
    - Invariants: Both corners share one dimensionality for the lifetime of the
      region. extent[d] = |corner_b[d] - corner_a[d]| >= 0. Corners are stored
      in the order given; min/max per axis is recomputed on every query, so
      swapping corners never changes a result.
    """
    def __init__(self, corner_a, corner_b):
        a = _as_point(corner_a, "corner_a")
        b = _as_point(corner_b, "corner_b")
        if a.shape[0] != b.shape[0]:
            raise DimensionMismatchError(
                f"Corners differ in dimensionality: corner_a has {a.shape[0]}, corner_b has {b.shape[0]}."
            )

        self._corner_a = _frozen(a)
        self._corner_b = _frozen(b)
        self._extent = _frozen(np.abs(b - a))

        logger.debug(f"BoundingRegion created: corner_a={self._corner_a}, corner_b={self._corner_b}, extent={self._extent}")

    @classmethod
    def from_config(cls, section: dict):
        """Builds a region from a mapping with 'corner_a' and 'corner_b' lists."""
        return cls(section['corner_a'], section['corner_b'])

    @property
    def corner_a(self) -> np.ndarray:
        return self._corner_a

    @property
    def corner_b(self) -> np.ndarray:
        return self._corner_b

    @property
    def extent(self) -> np.ndarray:
        """Per-axis side length, |corner_b - corner_a|."""
        return self._extent

    @property
    def dimension(self) -> int:
        return self._corner_a.shape[0]

    def _check_point(self, point):
        p = _as_point(point)
        if p.shape[0] != self.dimension:
            raise DimensionMismatchError(
                f"Point has dimensionality {p.shape[0]}, region has {self.dimension}."
            )
        return p

    def contains(self, point) -> bool:
        """
        Returns True if the point lies inside the closed box on every axis.
        Faces and corners count as inside.
        """
        p = self._check_point(point)
        return bool(_contains_jit(p, self._corner_a, self._corner_b))

    def __contains__(self, point) -> bool:
        return self.contains(point)

    def contains_points(self, points) -> np.ndarray:
        """
        Vectorized containment for an (N, D) array of points.

        - Inputs: points (array-like) - N rows of D coordinates. N may be zero.
        - Outputs: np.ndarray of bool, shape (N,). Element i equals contains(points[i]).
        - Invariants: points must be two-dimensional with D columns.
        """
        pts = np.ascontiguousarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != self.dimension:
            raise DimensionMismatchError(
                f"Expected an (N, {self.dimension}) array of points, got shape {pts.shape}."
            )

        out = np.zeros(pts.shape[0], dtype=np.bool_)
        if pts.shape[0] > 0:
            _contains_many_jit(pts, self._corner_a, self._corner_b, out)
        return out

    def clamp(self, point) -> np.ndarray:
        """
        Returns a copy of the point with each coordinate limited to the box
        on its axis. Points already inside come back unchanged.
        """
        p = self._check_point(point)
        lo = np.minimum(self._corner_a, self._corner_b)
        hi = np.maximum(self._corner_a, self._corner_b)
        return np.clip(p, lo, hi)

    def __repr__(self):
        return f"BoundingRegion(corner_a={self._corner_a.tolist()}, corner_b={self._corner_b.tolist()})"
