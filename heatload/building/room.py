from __future__ import annotations

from dataclasses import dataclass, field
from heatload import Quantity
from heatload.logging import ModuleLogger
from ..core import (
    DesignConstants,
    DEFAULT_CONSTANTS,
    EnvelopeElement,
    Window,
    Door,
    Ventilation,
    HeatEmitter,
    TransmissionHeatLoss,
    VentilationHeatLoss,
    compute_transmission_heat_loss,
    compute_ventilation_heat_loss
)
from .parameters import BuildingParameters


Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)

STANDARD = 'DIN EN 12831:2017-09'
CALCULATION_METHOD = 'Raumweise Heizlastberechnung'

T_INT_D_DEFAULT = Q_(20.0, 'degC')


@dataclass
class Room:
    """Heated room of a building.

    Parameters
    ----------
    ID:
        Name of the room.
    floor:
        Storey the room is on. Only used to group rooms in reports.
    usage:
        Usage of the room (e.g. 'Wohnzimmer', 'Bad'). Determines the minimum
        air change rate.
    area:
        Floor area of the room.
    height: optional
        Mean height of the room. If not given, a default height is used to
        derive the volume (see `DesignConstants.height_default`).
    volume: optional
        Volume of the room. If not given (or zero), the volume is calculated
        as the product of `area` and `height`.
    T_int_d: Quantity, default 20 °C
        Design value of the indoor air temperature of the room. None means
        the default value.
    envelope_elements:
        Walls, floors and ceilings bordering the outdoor air or an unheated
        space.
    windows:
        Windows of the room.
    doors:
        Doors of the room.
    ventilation: optional
        Ventilation set-up of the room. None means airing through windows.
    heaters:
        Heat emitters installed in the room.
    """
    ID: str = ''
    floor: str = ''
    usage: str = ''
    area: Quantity = field(default_factory=lambda: Q_(0.0, 'm ** 2'))
    height: Quantity | None = None
    volume: Quantity | None = None
    T_int_d: Quantity | None = field(default_factory=lambda: T_INT_D_DEFAULT)
    envelope_elements: list[EnvelopeElement] = field(default_factory=list)
    windows: list[Window] = field(default_factory=list)
    doors: list[Door] = field(default_factory=list)
    ventilation: Ventilation | None = None
    heaters: list[HeatEmitter] = field(default_factory=list)

    def get_volume(self, constants: DesignConstants = DEFAULT_CONSTANTS) -> Quantity:
        """Returns the volume of the room. A given volume takes precedence
        over floor area times height.
        """
        if self.volume is not None and self.volume.m > 0.0:
            return self.volume.to('m ** 3')
        height = self.height
        if height is None or height.m <= 0.0:
            height = constants.height_default
        return (self.area * height).to('m ** 3')

    @property
    def V(self) -> Quantity:
        """Volume of the room."""
        return self.get_volume()

    @property
    def Q_exist(self) -> Quantity:
        """Total heat output of the heat emitters installed in the room."""
        return sum(h.capacity for h in self.heaters) or Q_(0.0, 'W')


@dataclass
class RoomHeatLoad:
    """Result of the heat load calculation of a room.

    Attributes
    ----------
    room_ID, floor:
        Name and storey of the room.
    area:
        Floor area of the room.
    T_int_d, T_ext_d:
        Design indoor and outdoor temperature.
    dT_d:
        Design temperature difference.
    transmission:
        Transmission heat transfer coefficients and per-element details.
    ventilation:
        Ventilation heat transfer coefficient and air change figures.
    Q_trm:
        Transmission heat loss.
    Q_ven:
        Ventilation heat loss.
    Q_tot:
        Design heat load of the room.
    q_spec:
        Heat load per unit floor area.
    Q_exist:
        Heat output of the installed heat emitters.
    coverage:
        Ratio of `Q_exist` to `Q_tot`.
    Q_deficit:
        Heat load that the installed emitters cannot cover.
    """
    room_ID: str
    floor: str
    area: Quantity
    T_int_d: Quantity
    T_ext_d: Quantity
    dT_d: Quantity
    transmission: TransmissionHeatLoss
    ventilation: VentilationHeatLoss
    Q_trm: Quantity
    Q_ven: Quantity
    Q_tot: Quantity
    q_spec: Quantity
    Q_exist: Quantity
    coverage: Quantity
    Q_deficit: Quantity
    standard: str = STANDARD
    calculation_method: str = CALCULATION_METHOD

    @property
    def H_T(self) -> Quantity:
        return self.transmission.H_T

    @property
    def H_V(self) -> Quantity:
        return self.ventilation.H_V


def compute_room_heat_load(
    room: Room,
    params: BuildingParameters | None = None,
    constants: DesignConstants = DEFAULT_CONSTANTS
) -> RoomHeatLoad:
    """Computes the design heat load of `room` and compares it with the heat
    output of the emitters installed in the room.

    Parameters
    ----------
    room:
        The room.
    params: optional
        Building-wide boundary conditions. If None, the default values of
        `BuildingParameters` are used. Fields set to None take their
        default value as well.
    constants:
        Fixed values of the calculation.
    """
    params = (params or BuildingParameters()).with_defaults()
    T_int_d = room.T_int_d if room.T_int_d is not None else T_INT_D_DEFAULT
    dT_d = (T_int_d - params.T_ext_d).to('K')

    transmission = compute_transmission_heat_loss(room, params.dU_tb, constants)
    Q_trm = (transmission.H_T * dT_d).to('W')

    ventilation = compute_ventilation_heat_loss(room, params.n50, constants)
    Q_ven = (ventilation.H_V * dT_d).to('W')

    Q_tot = Q_trm + Q_ven

    area = room.area.to('m ** 2')
    if area.m > 0.0:
        q_spec = (Q_tot / area).to('W / m ** 2')
    else:
        logger.debug(f"Room '{room.ID}' has no floor area: specific heat load set to zero.")
        q_spec = Q_(0.0, 'W / m ** 2')

    Q_exist = room.Q_exist.to('W')
    if Q_exist.m > 0.0 and Q_tot.m > 0.0:
        coverage = Q_((Q_exist / Q_tot).to('frac').m * 100.0, 'pct')
    else:
        coverage = Q_(0.0, 'pct')
    Q_deficit = max(Q_(0.0, 'W'), Q_tot - Q_exist)

    return RoomHeatLoad(
        room_ID=room.ID,
        floor=room.floor,
        area=area,
        T_int_d=T_int_d,
        T_ext_d=params.T_ext_d,
        dT_d=dT_d,
        transmission=transmission,
        ventilation=ventilation,
        Q_trm=Q_trm,
        Q_ven=Q_ven,
        Q_tot=Q_tot,
        q_spec=q_spec,
        Q_exist=Q_exist,
        coverage=coverage,
        Q_deficit=Q_deficit
    )
