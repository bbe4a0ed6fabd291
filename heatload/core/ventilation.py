"""
Ventilation heat loss of a single room.

The air change rate of the room is the larger of the minimum air change rate
for its usage (or the airflow of a controlled mechanical ventilation system)
and the infiltration rate that follows from the airtightness of the building.
Heat recovery of a mechanical ventilation system reduces the airflow that has
to be heated.
"""
from __future__ import annotations

from typing import TYPE_CHECKING
from dataclasses import dataclass, field
from heatload import Quantity
from heatload.logging import ModuleLogger
from .constants import DesignConstants, DEFAULT_CONSTANTS

if TYPE_CHECKING:
    from heatload.building.room import Room


Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


WINDOW_AIRING = 'Stoßlüftung'


@dataclass
class Ventilation:
    """Ventilation set-up of a room.

    Parameters
    ----------
    kind:
        Type of ventilation, e.g. 'Stoßlüftung' (airing through windows) or
        'KWL mit WRG' (controlled mechanical ventilation with heat recovery).
    eta_hr:
        Efficiency of the heat recovery. Only taken into account with
        controlled mechanical ventilation.
    V_flow: optional
        Design airflow of the mechanical ventilation system in the room.
    model:
        Make and model of the ventilation unit.
    """
    kind: str = WINDOW_AIRING
    eta_hr: Quantity = field(default_factory=lambda: Q_(0.0, 'pct'))
    V_flow: Quantity | None = None
    model: str = ''

    @property
    def is_mechanical(self) -> bool:
        """True if the room has controlled mechanical ventilation (German
        "kontrollierte Wohnraumlüftung", KWL).
        """
        return 'kwl' in self.kind.lower()


@dataclass
class VentilationHeatLoss:
    """Result of the ventilation heat loss calculation of a room.

    Attributes
    ----------
    H_V:
        Ventilation heat transfer coefficient.
    n:
        Air change rate the calculation is based on.
    n_inf:
        Infiltration air change rate.
    eta_hr:
        Heat recovery efficiency that was applied.
    V_flow:
        Airflow through the room (n * volume).
    V_flow_eff:
        Airflow that remains to be heated after heat recovery.
    volume:
        Volume of the room.
    usage:
        Room usage that determined the minimum air change rate.
    ventilation_kind:
        Type of ventilation of the room.
    n50:
        Airtightness of the building the infiltration rate is based on.
    """
    H_V: Quantity
    n: Quantity
    n_inf: Quantity
    eta_hr: Quantity
    V_flow: Quantity
    V_flow_eff: Quantity
    volume: Quantity
    usage: str
    ventilation_kind: str
    n50: Quantity


def get_base_air_change_rate(usage: str, constants: DesignConstants = DEFAULT_CONSTANTS) -> Quantity:
    """Returns the minimum air change rate of a room with `usage`."""
    n = constants.get_air_change_rate(usage)
    if n is None:
        logger.debug(
            f"Usage '{usage}' not listed: "
            f"air change rate {constants.n_default:~P} is used."
        )
        n = constants.n_default
    return n


def compute_ventilation_heat_loss(
    room: Room,
    n50: Quantity = Q_(3.0, '1 / hr'),
    constants: DesignConstants = DEFAULT_CONSTANTS
) -> VentilationHeatLoss:
    """Computes the ventilation heat transfer coefficient of `room`.

    Parameters
    ----------
    room:
        The room.
    n50:
        Air change rate of the building at a pressure difference of 50 Pa.
    constants:
        Fixed values of the calculation.

    Returns
    -------
    VentilationHeatLoss
        The ventilation heat loss in W is obtained by multiplying `H_V` with
        the design temperature difference of the room.
    """
    V = room.get_volume(constants)
    n = get_base_air_change_rate(room.usage, constants)
    eta_hr = 0.0
    ventilation = room.ventilation
    if ventilation is not None and ventilation.is_mechanical:
        eta_hr = ventilation.eta_hr.to('frac').m
        V_flow = ventilation.V_flow
        if V_flow is not None and V_flow.m > 0.0 and V.m > 0.0:
            n = (V_flow / V).to('1 / hr')
    n_inf = (n50 * constants.f_inf).to('1 / hr')
    if n_inf > n:
        logger.debug(
            f"Room '{room.ID}': infiltration rate {n_inf:~P} exceeds "
            f"ventilation rate {n:~P}."
        )
        n = n_inf
    V_flow = (n * V).to('m ** 3 / hr')
    V_flow_eff = V_flow * (1.0 - eta_hr)
    H_V = V_flow_eff * constants.rho_air * constants.rho_cp
    return VentilationHeatLoss(
        H_V=H_V.to('W / K'),
        n=n.to('1 / hr'),
        n_inf=n_inf,
        eta_hr=Q_(eta_hr, 'frac'),
        V_flow=V_flow,
        V_flow_eff=V_flow_eff,
        volume=V,
        usage=room.usage,
        ventilation_kind=ventilation.kind if ventilation is not None else WINDOW_AIRING,
        n50=n50
    )
