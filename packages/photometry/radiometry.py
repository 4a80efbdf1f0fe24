"""Concentrated-disk radiometric model for a single fixture.

Each fixture's flux is spread uniformly over a disk whose radius is the
beam cone's footprint shrunk by an empirical concentration factor (real
fixtures put more flux near nadir than a uniform cone implies).  Outside
the disk the contribution decays smoothly instead of dropping to zero:

* ``inverse_square`` – point-source cosine-cubed law,
  ``E0 * ((R² + z²) / (r² + z²)) ** 1.5``, continuous at ``r = R``.
* ``gaussian`` – ``E0 * exp(-½ ((r - R) / (w R))²)``.

The tail adds flux on top of the disk, so the model is not energy
conserving; the estimate is advisory.
"""

from __future__ import annotations

import numpy as np
from scipy.spatial.distance import cdist

from packages.core.types import CalcOptions, FalloffModel


def concentration_factor(beam_angle: float | np.ndarray, options: CalcOptions) -> np.ndarray:
    """Empirical concentration correction, strictly decreasing in beam angle.

    ``reference_concentration * (reference_beam_angle / beam_angle) ** exponent``
    """
    beam_angle = np.asarray(beam_angle, dtype=np.float64)
    return options.reference_concentration * (
        options.reference_beam_angle / beam_angle
    ) ** options.concentration_exponent


def theoretical_radius(
    z: float | np.ndarray, beam_angle: float | np.ndarray, options: CalcOptions
) -> np.ndarray:
    """Footprint radius of the beam cone at the plane, ``z * tan(θ/2)``.

    The half-angle is capped at ``options.max_half_angle`` so that a
    180° emitter still has a finite footprint.
    """
    half = np.minimum(np.asarray(beam_angle, dtype=np.float64) / 2.0, options.max_half_angle)
    return np.asarray(z, dtype=np.float64) * np.tan(np.radians(half))


def effective_radius(
    z: float | np.ndarray, beam_angle: float | np.ndarray, options: CalcOptions
) -> np.ndarray:
    return theoretical_radius(z, beam_angle, options) / np.sqrt(
        concentration_factor(beam_angle, options)
    )


def peak_ppfd(
    ppf: float | np.ndarray,
    z: float | np.ndarray,
    beam_angle: float | np.ndarray,
    options: CalcOptions,
) -> np.ndarray:
    """PPFD inside the concentrated disk, ``PPF / (π R²)``."""
    radius = effective_radius(z, beam_angle, options)
    return np.asarray(ppf, dtype=np.float64) / (np.pi * radius**2)


def falloff(r: np.ndarray, radius: np.ndarray, z: np.ndarray, options: CalcOptions) -> np.ndarray:
    """Relative intensity (1 at the disk edge) for points with ``r > radius``."""
    if options.falloff == FalloffModel.GAUSSIAN:
        sigma = options.gaussian_width * radius
        return np.exp(-0.5 * ((r - radius) / sigma) ** 2)
    return ((radius**2 + z**2) / (r**2 + z**2)) ** 1.5


def source_contributions(
    points: np.ndarray,
    positions: np.ndarray,
    ppf: np.ndarray,
    beam_angles: np.ndarray,
    options: CalcOptions,
) -> np.ndarray:
    """PPFD contributed by every source at every grid point.

    Parameters
    ----------
    points : np.ndarray
        ``(N, 2)`` grid point coordinates on the plane.
    positions : np.ndarray
        ``(S, 3)`` source positions; column 2 is the mounting height.
    ppf : np.ndarray
        ``(S,)`` effective photon output per source (dimming applied).
    beam_angles : np.ndarray
        ``(S,)`` full beam angles in degrees.

    Returns
    -------
    np.ndarray
        ``(N, S)`` matrix; summing over axis 1 gives the PPFD field.
    """
    z = positions[:, 2]
    r = cdist(points, positions[:, :2])  # (N, S)
    radius = effective_radius(z, beam_angles, options)  # (S,)
    e0 = peak_ppfd(ppf, z, beam_angles, options)  # (S,)

    inside = r <= radius
    tail = e0 * falloff(r, radius, z, options)
    return np.where(inside, e0, tail)
