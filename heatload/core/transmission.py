"""
Transmission heat loss of a single room.

Heat leaves the room either directly to the outdoor air (exterior walls,
roofs, windows and exterior doors) or indirectly through an unheated space
(basement, attic, garage, stairwell, ground). Direct paths get a blanket
thermal bridge surcharge. Indirect paths are reduced with the temperature
reduction factor of the unheated space.
"""
from __future__ import annotations

from typing import TYPE_CHECKING
from dataclasses import dataclass, field
from heatload import Quantity
from heatload.logging import ModuleLogger
from .constants import DesignConstants, DEFAULT_CONSTANTS
from .building_element import EnvelopeElement, ElementKind
from .insulation import InsulationQuality, classify_insulation

if TYPE_CHECKING:
    from heatload.building.room import Room


Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


@dataclass
class TransmissionDetail:
    """Contribution of one building element to the transmission heat
    transfer coefficient of a room.

    Attributes
    ----------
    ID:
        Description of the element.
    area:
        Area of the element used in the calculation (for exterior walls the
        net area without windows and exterior doors).
    U:
        Thermal transmittance used in the calculation.
    f:
        Factor applied to A * U: (1 + thermal bridge surcharge) for a direct
        path, the temperature reduction factor for an indirect path.
    H:
        Resulting heat transfer coefficient.
    direct:
        True for a direct path to the outdoor air.
    quality:
        Insulation quality of the element.
    """
    ID: str
    area: Quantity
    U: Quantity
    f: Quantity
    H: Quantity
    direct: bool
    quality: InsulationQuality


@dataclass
class TransmissionHeatLoss:
    """Result of the transmission heat loss calculation of a room.

    Attributes
    ----------
    H_T:
        Transmission heat transfer coefficient of the room.
    H_T_dir:
        Part of `H_T` through direct paths to the outdoor air.
    H_T_ind:
        Part of `H_T` through unheated spaces.
    details:
        One entry per contributing element, in the order envelope elements,
        windows, exterior doors.
    """
    H_T: Quantity = field(default_factory=lambda: Q_(0.0, 'W / K'))
    H_T_dir: Quantity = field(default_factory=lambda: Q_(0.0, 'W / K'))
    H_T_ind: Quantity = field(default_factory=lambda: Q_(0.0, 'W / K'))
    details: list[TransmissionDetail] = field(default_factory=list)


def get_net_area(element: EnvelopeElement, room: Room) -> Quantity:
    """Returns the area of `element` that is used in the transmission heat
    loss calculation.

    Windows and exterior doors of the room are taken to sit in its exterior
    walls: their area is subtracted from the area of an exterior wall, down
    to zero. The area of other elements is returned unchanged.
    """
    A = element.area.to('m ** 2')
    if element.kind is ElementKind.EXTERIOR_WALL and A.m > 0.0:
        A_win = sum(w.A for w in room.windows) or Q_(0.0, 'm ** 2')
        A_door = sum(d.A for d in room.doors if d.is_exterior) or Q_(0.0, 'm ** 2')
        A_net = A - A_win - A_door
        if A_net.m < 0.0:
            logger.debug(
                f"Room '{room.ID}': windows and doors ({(A_win + A_door):~P}) "
                f"are larger than exterior wall '{element.ID}' ({A:~P}); "
                f"net wall area set to zero."
            )
            A_net = Q_(0.0, 'm ** 2')
        return A_net
    return A


def _get_temperature_reduction_factor(
    element: EnvelopeElement,
    constants: DesignConstants
) -> Quantity:
    f_T = constants.get_temperature_reduction_factor(element.adjacency)
    if f_T is None:
        logger.debug(
            f"Adjacent space '{element.adjacency_label}' not listed: "
            f"temperature reduction factor {constants.f_T_default.m} is used."
        )
        f_T = constants.f_T_default
    return f_T


def compute_transmission_heat_loss(
    room: Room,
    dU_tb: Quantity = Q_(0.05, 'frac'),
    constants: DesignConstants = DEFAULT_CONSTANTS
) -> TransmissionHeatLoss:
    """Computes the transmission heat transfer coefficient of `room`.

    Parameters
    ----------
    room:
        The room.
    dU_tb:
        Thermal bridge surcharge as a fraction of the heat transfer
        coefficient of the direct paths to the outdoor air.
    constants:
        Fixed values of the calculation.

    Returns
    -------
    TransmissionHeatLoss
        The transmission heat loss in W is obtained by multiplying `H_T` with
        the design temperature difference of the room.
    """
    f_tb = Q_(1.0 + dU_tb.to('frac').m, 'frac')
    res = TransmissionHeatLoss()

    def _add(ID: str, A: Quantity, U: Quantity, f: Quantity, direct: bool) -> None:
        H = (A * U * f).to('W / K')
        if direct:
            res.H_T_dir += H
        else:
            res.H_T_ind += H
        res.details.append(TransmissionDetail(
            ID=ID, area=A, U=U, f=f, H=H,
            direct=direct,
            quality=classify_insulation(U)
        ))

    for element in room.envelope_elements:
        if element.is_direct:
            _add(element.ID, get_net_area(element, room), element.U, f_tb, True)
        else:
            f_T = _get_temperature_reduction_factor(element, constants)
            _add(element.ID, element.area.to('m ** 2'), element.U, f_T, False)

    for i, window in enumerate(room.windows, start=1):
        U_w = window.U_w
        if U_w is None or U_w.m <= 0.0:
            logger.debug(
                f"Room '{room.ID}': window {i} has no U-value; "
                f"{constants.U_window_default:~P} is used."
            )
            U_w = constants.U_window_default
        _add(f'Fenster {i}', window.A, U_w, f_tb, True)

    for i, door in enumerate(room.doors, start=1):
        if not door.is_exterior:
            continue
        U_d = door.U_d
        if U_d is None or U_d.m <= 0.0:
            logger.debug(
                f"Room '{room.ID}': exterior door {i} has no U-value; "
                f"{constants.U_door_default:~P} is used."
            )
            U_d = constants.U_door_default
        _add(f'Außentür {i}', door.A, U_d, f_tb, True)

    res.H_T = res.H_T_dir + res.H_T_ind
    return res
