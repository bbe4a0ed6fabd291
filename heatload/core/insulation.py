from __future__ import annotations

from dataclasses import dataclass
from heatload import Quantity


Q_ = Quantity


@dataclass(frozen=True)
class InsulationQuality:
    """Qualitative rating of the thermal insulation of a building element.

    Parameters
    ----------
    tier:
        Quality tier, from 'excellent' to 'very-poor'.
    severity:
        Display severity of the tier ('success', 'info', 'warning' or
        'danger').
    label:
        Reference standard or building state the U-value corresponds with.
    """
    tier: str
    severity: str
    label: str


# inclusive upper bounds of the U-value in W/(m².K), in increasing order
INSULATION_CLASSES: tuple[tuple[float, InsulationQuality], ...] = (
    (0.15, InsulationQuality('excellent', 'success', 'Passivhaus')),
    (0.24, InsulationQuality('very-good', 'success', 'KfW 40')),
    (0.28, InsulationQuality('good', 'info', 'KfW 55')),
    (0.35, InsulationQuality('moderate', 'warning', 'EnEV 2014')),
    (0.50, InsulationQuality('poor', 'warning', 'Renovated pre-1980s'))
)

UNRENOVATED = InsulationQuality('very-poor', 'danger', 'Unrenovated')


def classify_insulation(U: Quantity | float) -> InsulationQuality:
    """Returns the insulation quality that corresponds with U-value `U`.

    A U-value right on a class boundary belongs to the better class. A bare
    number is taken to be in W/(m².K).
    """
    if isinstance(U, Quantity):
        U = U.to('W / (m ** 2 * K)').m
    for U_max, quality in INSULATION_CLASSES:
        if U <= U_max:
            return quality
    return UNRENOVATED
