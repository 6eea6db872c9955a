"""Zone classification of a day's actual value against a goal."""

import math

from nomnom.domain.goals import Direction
from nomnom.domain.progress import Zone, ZoneResult


def round1(value: float) -> float:
    """Round half-up to one decimal, the precision totals are stored at."""
    return math.floor(value * 10 + 0.5) / 10


def classify(
    actual: float, target: float, direction: Direction, tolerance: float
) -> ZoneResult:
    """Classify an actual value into met, near or a miss.

    The band is the edge of the grace zone on the wrong side of the target.
    With zero tolerance the band equals the target and ``near`` cannot occur.
    """
    if direction == Direction.UNDER:
        band = round1(target * (1 + tolerance / 100))
        if actual <= target:
            return ZoneResult(zone=Zone.MET, band=band)
        if actual <= band:
            return ZoneResult(zone=Zone.NEAR, band=band)
        return ZoneResult(zone=Zone.OVER, band=band)

    band = round1(target * (1 - tolerance / 100))
    if actual >= target:
        return ZoneResult(zone=Zone.MET, band=band)
    if actual >= band:
        return ZoneResult(zone=Zone.NEAR, band=band)
    return ZoneResult(zone=Zone.UNDER, band=band)
