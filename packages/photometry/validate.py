"""Input checks and unit normalisation for the coverage estimator."""

from __future__ import annotations

import math
from collections.abc import Sequence

from packages.core.errors import InvalidInputError
from packages.core.types import (
    FEET_TO_METRES,
    CalcOptions,
    LightSource,
    PlaneSpec,
    Units,
)


def validate_plane(plane: PlaneSpec) -> None:
    for name in ("width", "length", "resolution"):
        if not math.isfinite(getattr(plane, name)):
            raise InvalidInputError(f"Plane {name} must be finite, got {getattr(plane, name)}")
    if plane.width <= 0 or plane.length <= 0:
        raise InvalidInputError(
            f"Plane must have positive area (width={plane.width}, length={plane.length})"
        )
    if plane.resolution <= 0:
        raise InvalidInputError(f"Grid resolution must be positive, got {plane.resolution}")
    if plane.resolution > min(plane.width, plane.length):
        raise InvalidInputError(
            f"Grid resolution {plane.resolution} exceeds the smaller plane "
            f"dimension {min(plane.width, plane.length)}"
        )


def validate_options(options: CalcOptions) -> None:
    if not 0 < options.photoperiod_hours <= 24:
        raise InvalidInputError(
            f"Photoperiod must be in (0, 24] hours, got {options.photoperiod_hours}"
        )
    if not 0 <= options.reflectance <= 1:
        raise InvalidInputError(f"Reflectance must be in [0, 1], got {options.reflectance}")
    constants = (
        options.reference_beam_angle,
        options.reference_concentration,
        options.concentration_exponent,
        options.max_half_angle,
        options.gaussian_width,
    )
    if not all(math.isfinite(c) for c in constants):
        raise InvalidInputError("Calibration constants must be finite")
    if options.reference_beam_angle <= 0 or options.reference_concentration <= 0:
        raise InvalidInputError("Calibration constants must be positive")
    # keeps the factor strictly decreasing in beam angle
    if options.concentration_exponent <= 0:
        raise InvalidInputError(
            f"concentration_exponent must be positive, got {options.concentration_exponent}"
        )
    if not 0 < options.max_half_angle < 90:
        raise InvalidInputError(
            f"max_half_angle must be in (0, 90) degrees, got {options.max_half_angle}"
        )
    if options.gaussian_width <= 0:
        raise InvalidInputError(f"gaussian_width must be positive, got {options.gaussian_width}")


def validate_source(source: LightSource) -> None:
    for name in ("x", "y", "z", "ppf"):
        if not math.isfinite(getattr(source, name)):
            raise InvalidInputError(
                f"Source {source.id!r}: {name} must be finite, got {getattr(source, name)}"
            )
    if source.ppf <= 0:
        raise InvalidInputError(f"Source {source.id!r}: PPF must be positive, got {source.ppf}")
    if not 0 < source.beam_angle <= 180:
        raise InvalidInputError(
            f"Source {source.id!r}: beam angle must be in (0, 180], got {source.beam_angle}"
        )
    if source.z <= 0:
        raise InvalidInputError(
            f"Source {source.id!r}: mounting height must be above the canopy, got z={source.z}"
        )
    if not 0 <= source.dimming <= 100:
        raise InvalidInputError(
            f"Source {source.id!r}: dimming must be in [0, 100] percent, got {source.dimming}"
        )


def distance_to_plane(source: LightSource, plane: PlaneSpec) -> float:
    """Horizontal distance from a source footprint to the plane rectangle (0 if over it)."""
    dx = max(0.0, -source.x, source.x - plane.width)
    dy = max(0.0, -source.y, source.y - plane.length)
    return math.hypot(dx, dy)


def validate_inputs(
    sources: Sequence[LightSource], plane: PlaneSpec, options: CalcOptions
) -> None:
    """Raise :class:`InvalidInputError` on any malformed input."""
    if not sources:
        raise InvalidInputError("At least one light source is required")
    validate_plane(plane)
    validate_options(options)

    diagonal = math.hypot(plane.width, plane.length)
    for source in sources:
        validate_source(source)
        if distance_to_plane(source, plane) > diagonal:
            raise InvalidInputError(
                f"Source {source.id!r} at ({source.x}, {source.y}) lies more than the plane "
                f"diagonal ({diagonal:.2f}) outside the plane; check units"
            )


def to_metres(
    sources: Sequence[LightSource], plane: PlaneSpec
) -> tuple[list[LightSource], PlaneSpec]:
    """Convert a feet-based plane and its sources to metres.

    PPF and beam angles are unit-free and pass through unchanged.
    """
    if plane.units == Units.METRES:
        return list(sources), plane
    k = FEET_TO_METRES
    plane_m = PlaneSpec(
        width=plane.width * k,
        length=plane.length * k,
        resolution=plane.resolution * k,
        units=Units.METRES,
    )
    sources_m = [
        s.model_copy(update={"x": s.x * k, "y": s.y * k, "z": s.z * k}) for s in sources
    ]
    return sources_m, plane_m
