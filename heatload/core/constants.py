"""
Fixed numbers of the room-by-room heat load calculation (DIN EN 12831,
simplified for funding applications).

All of them are gathered in a single read-only `DesignConstants` object. The
calculation functions use `DEFAULT_CONSTANTS` unless another instance is
passed to them.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping
from dataclasses import dataclass, field
from heatload import Quantity
from .building_element import Adjacency


Q_ = Quantity


def _air_change_rates() -> Mapping[str, Quantity]:
    # minimum air change rate per room usage
    n = {
        'Wohnzimmer': 0.5,
        'Schlafzimmer': 0.5,
        'Kinderzimmer': 0.5,
        'Büro': 0.5,
        'Küche': 1.5,
        'Bad': 1.5,
        'WC': 1.5,
        'Flur': 0.5,
        'Keller': 0.5,
        'Abstellraum': 0.3
    }
    return MappingProxyType({k: Q_(v, '1 / hr') for k, v in n.items()})


def _temperature_reduction_factors() -> Mapping[Adjacency, Quantity]:
    f_T = {
        Adjacency.GROUND: 0.6,
        Adjacency.UNHEATED_BASEMENT: 0.5,
        Adjacency.UNHEATED_ATTIC: 0.9,
        Adjacency.GARAGE: 0.8,
        Adjacency.UNHEATED_STAIRWELL: 0.5
    }
    return MappingProxyType({k: Q_(v, 'frac') for k, v in f_T.items()})


@dataclass(frozen=True)
class DesignConstants:
    """Holds the fixed values used by the heat load calculation.

    Parameters
    ----------
    rho_cp: Quantity, default 0.34 Wh/(m³.K)
        Volumetric heat capacity of air at about 20 °C.
    rho_air: float, default 1.2
        Density of air in kg/m³, applied as a plain factor on top of `rho_cp`
        (HV = airflow * rho_air * rho_cp).
    f_inf: float, default 0.05
        Ratio between the infiltration air change rate and the air change
        rate n50 measured at 50 Pa (n_inf = n50 / 20).
    n_usage: mapping
        Minimum air change rate per room usage.
    n_default: Quantity, default 0.5 1/hr
        Air change rate of a room whose usage is not in `n_usage`.
    f_T: mapping
        Temperature reduction factor per kind of adjacent unheated space.
    f_T_default: Quantity, default 0.5 frac
        Temperature reduction factor of an adjacent space that is not in
        `f_T`.
    U_window_default: Quantity, default 2.0 W/(m².K)
        U-value of a window without a U-value.
    U_door_default: Quantity, default 2.5 W/(m².K)
        U-value of an exterior door without a U-value.
    height_default: Quantity, default 2.5 m
        Room height used to derive the room volume if the height is missing.
    f_safety: float, default 1.1
        Safety margin on the building heat load for sizing a heat pump.
    """
    rho_cp: Quantity = Q_(0.34, 'W * hr / (m ** 3 * K)')
    rho_air: float = 1.2
    f_inf: float = 0.05
    n_usage: Mapping[str, Quantity] = field(default_factory=_air_change_rates)
    n_default: Quantity = Q_(0.5, '1 / hr')
    f_T: Mapping[Adjacency, Quantity] = field(default_factory=_temperature_reduction_factors)
    f_T_default: Quantity = Q_(0.5, 'frac')
    U_window_default: Quantity = Q_(2.0, 'W / (m ** 2 * K)')
    U_door_default: Quantity = Q_(2.5, 'W / (m ** 2 * K)')
    height_default: Quantity = Q_(2.5, 'm')
    f_safety: float = 1.1

    def get_air_change_rate(self, usage: str) -> Quantity | None:
        """Returns the minimum air change rate of a room with `usage`, or
        None if `usage` is not listed.
        """
        return self.n_usage.get(usage)

    def get_temperature_reduction_factor(self, adjacency: Adjacency) -> Quantity | None:
        """Returns the temperature reduction factor for an adjacent space of
        kind `adjacency`, or None if it is not listed.
        """
        return self.f_T.get(adjacency)


DEFAULT_CONSTANTS = DesignConstants()
