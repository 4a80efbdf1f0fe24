"""Load layout documents and resolve fixture placements into light sources.

A layout is a JSON document validated by :class:`~packages.core.types.Layout`:

* ``plane`` – footprint, resolution and units.
* ``fixtures`` – optional catalog, model name → PPF / beam angle / wattage.
* ``sources`` – placements, each either inline (``ppf`` and friends) or a
  ``fixture`` reference into the catalog.  Inline fields override the
  catalog entry.
* ``options`` / ``targets`` – calculation options and design targets.
"""

from __future__ import annotations

import logging
from pathlib import Path

from packages.core.errors import InvalidInputError
from packages.core.types import FixtureModel, FixturePlacement, Layout, LightSource

logger = logging.getLogger(__name__)


def load_json_layout(path: str | Path) -> Layout:
    """Read and validate a JSON layout file."""
    logger.info(f"📄 Reading layout {Path(path).name}...")
    layout = Layout.model_validate_json(Path(path).read_text())
    logger.info(
        f"✅ Layout loaded: {len(layout.sources)} placements, "
        f"{len(layout.fixtures)} catalog models"
    )
    return layout


def load_layout(path: str | Path) -> Layout:
    """Dispatch on the file extension.

    Raises ``ValueError`` for unsupported extensions.
    """
    p = Path(path)
    ext = p.suffix.lower()
    if ext == ".json":
        return load_json_layout(p)
    raise ValueError(f"Unsupported layout format '{ext}'. Supported: .json")


def resolve_placement(
    placement: FixturePlacement, catalog: dict[str, FixtureModel]
) -> LightSource:
    """Merge a placement with its catalog entry (inline fields win)."""
    model: FixtureModel | None = None
    if placement.fixture is not None:
        model = catalog.get(placement.fixture)
        if model is None:
            raise InvalidInputError(
                f"Placement {placement.id!r} references unknown fixture {placement.fixture!r}"
            )

    ppf = placement.ppf if placement.ppf is not None else (model.ppf if model else None)
    if ppf is None:
        raise InvalidInputError(
            f"Placement {placement.id!r} has no PPF and no catalog fixture"
        )

    beam_angle = placement.beam_angle
    if beam_angle is None:
        beam_angle = model.beam_angle if model else 120.0
    wattage = placement.wattage
    if wattage is None and model:
        wattage = model.wattage
    spectrum = placement.spectrum
    if spectrum is None and model:
        spectrum = model.spectrum

    return LightSource(
        id=placement.id,
        x=placement.x,
        y=placement.y,
        z=placement.z,
        ppf=ppf,
        beam_angle=beam_angle,
        dimming=placement.dimming,
        enabled=placement.enabled,
        wattage=wattage,
        spectrum=spectrum,
    )


def resolve_sources(layout: Layout) -> list[LightSource]:
    """Resolve every placement in *layout* into a :class:`LightSource`."""
    return [resolve_placement(p, layout.fixtures) for p in layout.sources]
