"""Pydantic models for light sources, target planes, and coverage results.

Coordinates live in the room frame: the target plane spans
``[0, width] x [0, length]`` at z = 0 (canopy height), and a source's ``z``
is its mounting height above the canopy.  Results are always reported in
metres and μmol/m²/s regardless of the input units.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

FEET_TO_METRES = 0.3048


# ── units / enums ────────────────────────────────────────────────────
class Units(str, Enum):
    METRES = "metres"
    FEET = "feet"


class FalloffModel(str, Enum):
    """Shape of the tail beyond a source's effective radius."""

    INVERSE_SQUARE = "inverse_square"
    GAUSSIAN = "gaussian"


class Confidence(str, Enum):
    HIGH = "high"
    REDUCED = "reduced"


# ── inputs ───────────────────────────────────────────────────────────
class LightSource(BaseModel):
    """A resolved fixture placement, ready for the estimator."""

    model_config = ConfigDict(frozen=True)

    id: str
    x: float
    y: float
    z: float = Field(description="Mounting height above the canopy plane")
    ppf: float = Field(description="Rated photosynthetic photon flux (μmol/s)")
    beam_angle: float = Field(120.0, description="Full beam angle in degrees")
    dimming: float = Field(100.0, description="Output level in percent")
    enabled: bool = True
    wattage: Optional[float] = None
    spectrum: Optional[dict[str, float]] = None

    @property
    def effective_ppf(self) -> float:
        """PPF after dimming; zero when the source is switched off."""
        if not self.enabled:
            return 0.0
        return self.ppf * self.dimming / 100.0


class PlaneSpec(BaseModel):
    """Rectangular canopy footprint and its sampling resolution."""

    model_config = ConfigDict(frozen=True)

    width: float
    length: float
    resolution: float = 0.5
    units: Units = Units.METRES


class CalcOptions(BaseModel):
    """Photoperiod, reflectance, and the tunable calibration constants."""

    model_config = ConfigDict(frozen=True)

    photoperiod_hours: float = 12.0
    reflectance: float = Field(
        0.0,
        description="Multiplicative bonus (1 + reflectance); an approximation, not radiosity",
    )
    reference_beam_angle: float = 120.0
    reference_concentration: float = 2.4
    concentration_exponent: float = 1.0
    max_half_angle: float = Field(85.0, description="Half-angle cap (degrees) for the cone radius")
    falloff: FalloffModel = FalloffModel.INVERSE_SQUARE
    gaussian_width: float = Field(0.5, description="Gaussian skirt sigma as a fraction of the radius")
    wide_beam_limit: float = 140.0
    narrow_beam_limit: float = 90.0


# ── outputs ──────────────────────────────────────────────────────────
class ConfigurationWarning(BaseModel):
    """Advisory note: a source sits in a known-inaccurate calibration range."""

    source_id: str
    beam_angle: float
    bias: str = Field(description="'underestimate' or 'overestimate'")
    message: str


class SampleGrid(BaseModel):
    """Sampled PPFD field, flattened x-fastest (index ``j * nx + i``)."""

    nx: int
    ny: int
    spacing_x: float
    spacing_y: float
    x: list[float] = Field(default_factory=list)
    y: list[float] = Field(default_factory=list)
    ppfd: list[float] = Field(default_factory=list)

    @property
    def point_count(self) -> int:
        return self.nx * self.ny

    def as_array(self) -> np.ndarray:
        """Return the PPFD field as an ``(ny, nx)`` NumPy array."""
        return np.asarray(self.ppfd, dtype=np.float64).reshape(self.ny, self.nx)


class CalculationResult(BaseModel):
    """Aggregate PPFD statistics and DLI for one estimator run."""

    units: Units = Units.METRES
    min_ppfd: float
    max_ppfd: float
    average_ppfd: float
    uniformity: float = Field(description="min / average, in [0, 1]")
    uniformity_min_max: float = Field(description="min / max, in [0, 1]")
    photoperiod_hours: float
    dli: float = Field(description="mol/m²/day")
    grid: SampleGrid
    warnings: list[ConfigurationWarning] = Field(default_factory=list)
    confidence: Confidence = Confidence.HIGH


# ── catalog / layout documents ───────────────────────────────────────
class FixtureModel(BaseModel):
    """A catalog entry describing a fixture product."""

    ppf: float
    beam_angle: float = 120.0
    wattage: Optional[float] = None
    spectrum: Optional[dict[str, float]] = None


class FixturePlacement(BaseModel):
    """A fixture placed in the room, either inline or by catalog reference."""

    id: str
    x: float
    y: float
    z: float
    fixture: Optional[str] = None
    ppf: Optional[float] = None
    beam_angle: Optional[float] = None
    wattage: Optional[float] = None
    dimming: float = 100.0
    enabled: bool = True
    spectrum: Optional[dict[str, float]] = None


class Targets(BaseModel):
    ppfd: Optional[float] = None
    dli: Optional[float] = None
    min_uniformity: float = 0.7


class Layout(BaseModel):
    """Top-level layout document: plane, placements, catalog, and options."""

    name: str = ""
    plane: PlaneSpec
    sources: list[FixturePlacement] = Field(default_factory=list)
    fixtures: dict[str, FixtureModel] = Field(default_factory=dict)
    options: CalcOptions = Field(default_factory=CalcOptions)
    targets: Targets = Field(default_factory=Targets)


# ── report ───────────────────────────────────────────────────────────
class RecommendationKind(str, Enum):
    WARNING = "warning"
    SUGGESTION = "suggestion"
    OPTIMIZATION = "optimization"


class Impact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Recommendation(BaseModel):
    kind: RecommendationKind
    message: str
    impact: Impact


class EnergySummary(BaseModel):
    """Electrical load and efficacy of the enabled sources."""

    total_wattage: float
    total_ppf: float
    efficacy: float = Field(description="μmol/J; 0 when no wattage is known")
    daily_kwh: float
    annual_kwh: float


class CoverageReport(BaseModel):
    """Estimator result bundled with target checks and the energy summary."""

    name: str = ""
    result: CalculationResult
    recommendations: list[Recommendation] = Field(default_factory=list)
    energy: EnergySummary
