"""Flag sources whose beam angle falls outside the calibrated range.

The concentration factor was tuned against 120° fixtures.  Wide beams
(>= ``wide_beam_limit``) come out low and narrow beams
(<= ``narrow_beam_limit``) come out high; the bias is kept as-is and
reported so results stay comparable with earlier estimates.
"""

from __future__ import annotations

from collections.abc import Sequence

from packages.core.types import CalcOptions, Confidence, ConfigurationWarning, LightSource


def check_calibration(
    sources: Sequence[LightSource], options: CalcOptions
) -> list[ConfigurationWarning]:
    warnings: list[ConfigurationWarning] = []
    for source in sources:
        if source.beam_angle >= options.wide_beam_limit:
            warnings.append(
                ConfigurationWarning(
                    source_id=source.id,
                    beam_angle=source.beam_angle,
                    bias="underestimate",
                    message=(
                        f"Beam angle {source.beam_angle:g}° is at or above "
                        f"{options.wide_beam_limit:g}°; PPFD is likely underestimated"
                    ),
                )
            )
        elif source.beam_angle <= options.narrow_beam_limit:
            warnings.append(
                ConfigurationWarning(
                    source_id=source.id,
                    beam_angle=source.beam_angle,
                    bias="overestimate",
                    message=(
                        f"Beam angle {source.beam_angle:g}° is at or below "
                        f"{options.narrow_beam_limit:g}°; PPFD is likely overestimated"
                    ),
                )
            )
    return warnings


def confidence_for(warnings: Sequence[ConfigurationWarning]) -> Confidence:
    return Confidence.REDUCED if warnings else Confidence.HIGH
