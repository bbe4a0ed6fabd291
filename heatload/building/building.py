from __future__ import annotations

import math
from functools import partial
from concurrent.futures import Executor
from dataclasses import dataclass, field
from typing import Sequence
import pandas as pd
from heatload import Quantity
from heatload.logging import ModuleLogger
from ..core import DesignConstants, DEFAULT_CONSTANTS
from .parameters import BuildingParameters
from .room import Room, RoomHeatLoad, compute_room_heat_load, STANDARD


Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


@dataclass
class HeatPumpSizing:
    """Heat pump capacity recommended for the building.

    Attributes
    ----------
    P_rec:
        Building heat load rounded up to whole kW.
    P_rec_margin:
        Building heat load with the safety margin, rounded up to whole kW.
    """
    P_rec: Quantity
    P_rec_margin: Quantity


@dataclass
class BuildingHeatLoad:
    """Result of the heat load calculation of a building.

    Attributes
    ----------
    rooms:
        Heat load results of the rooms, in the order the rooms were given.
    params:
        Building-wide boundary conditions used in the calculation.
    Q_tot:
        Design heat load of the building (sum of the room heat loads).
    area:
        Total floor area of the rooms.
    volume:
        Total volume of the rooms.
    Q_exist:
        Total heat output of the installed heat emitters.
    q_spec:
        Average heat load per unit floor area.
    coverage:
        Ratio of `Q_exist` to `Q_tot`.
    heat_pump:
        Recommended heat pump capacity.
    """
    rooms: list[RoomHeatLoad]
    params: BuildingParameters
    Q_tot: Quantity
    area: Quantity
    volume: Quantity
    Q_exist: Quantity
    q_spec: Quantity
    coverage: Quantity
    heat_pump: HeatPumpSizing
    standard: str = STANDARD

    def get_summary(self, unit: str = 'W', n_digits: int = 1) -> pd.DataFrame:
        """Returns a Pandas DataFrame with the heat load figures of each room
        in the building.

        Parameters
        ----------
        unit: str
            Desired unit of thermal power.
        n_digits: int
            The number of decimals displayed in the numeric results.
        """
        col_1 = 'room'
        col_2 = 'floor'
        col_3 = 'area [m²]'
        col_4 = f'Q transmission [{unit}]'
        col_5 = f'Q ventilation [{unit}]'
        col_6 = f'Q total [{unit}]'
        col_7 = f'q specific [{unit}/m²]'
        col_8 = f'Q existing [{unit}]'
        col_9 = 'coverage [%]'
        col_10 = f'Q deficit [{unit}]'
        d = {col: [] for col in (
            col_1, col_2, col_3, col_4, col_5,
            col_6, col_7, col_8, col_9, col_10
        )}
        for r in self.rooms:
            d[col_1].append(r.room_ID)
            d[col_2].append(r.floor)
            d[col_3].append(round(r.area.to('m ** 2').m, n_digits))
            d[col_4].append(round(r.Q_trm.to(unit).m, n_digits))
            d[col_5].append(round(r.Q_ven.to(unit).m, n_digits))
            d[col_6].append(round(r.Q_tot.to(unit).m, n_digits))
            d[col_7].append(round(r.q_spec.to(f'{unit} / m ** 2').m, n_digits))
            d[col_8].append(round(r.Q_exist.to(unit).m, n_digits))
            d[col_9].append(round(r.coverage.to('pct').m, n_digits))
            d[col_10].append(round(r.Q_deficit.to(unit).m, n_digits))
        df = pd.DataFrame(d)
        return df


@dataclass
class Building:
    """Heated rooms of a building and the building-wide boundary conditions.

    Parameters
    ----------
    rooms:
        Heated rooms of the building.
    params:
        Building-wide boundary conditions.
    ID:
        Name of the building.
    """
    rooms: list[Room] = field(default_factory=list)
    params: BuildingParameters = field(default_factory=BuildingParameters)
    ID: str = ''

    @property
    def floors(self) -> dict[str, list[Room]]:
        """Rooms of the building grouped by storey, in order of appearance."""
        floors: dict[str, list[Room]] = {}
        for room in self.rooms:
            floors.setdefault(room.floor, []).append(room)
        return floors

    def get_heat_load(
        self,
        constants: DesignConstants = DEFAULT_CONSTANTS,
        executor: Executor | None = None
    ) -> BuildingHeatLoad:
        """Returns the heat load of the building (see
        `compute_building_heat_load`).
        """
        return compute_building_heat_load(self.rooms, self.params, constants, executor)


def compute_building_heat_load(
    rooms: Sequence[Room],
    params: BuildingParameters | None = None,
    constants: DesignConstants = DEFAULT_CONSTANTS,
    executor: Executor | None = None
) -> BuildingHeatLoad:
    """Computes the heat load of every room and the totals of the building.

    Parameters
    ----------
    rooms:
        Heated rooms of the building.
    params: optional
        Building-wide boundary conditions. If None, the default values of
        `BuildingParameters` are used. Fields set to None take their
        default value as well.
    constants:
        Fixed values of the calculation.
    executor: optional
        If given, the room calculations are distributed with
        `executor.map()`. The rooms are independent of each other, so the
        outcome is the same as without executor.

    Returns
    -------
    BuildingHeatLoad
        For an empty sequence of rooms all totals are zero.
    """
    params = (params or BuildingParameters()).with_defaults()
    func = partial(compute_room_heat_load, params=params, constants=constants)
    if executor is not None:
        results = list(executor.map(func, rooms))
    else:
        results = [func(room) for room in rooms]

    Q_tot = sum(r.Q_tot for r in results) or Q_(0.0, 'W')
    area = sum(r.area for r in results) or Q_(0.0, 'm ** 2')
    volume = sum(r.ventilation.volume for r in results) or Q_(0.0, 'm ** 3')
    Q_exist = sum(r.Q_exist for r in results) or Q_(0.0, 'W')

    if area.m > 0.0:
        q_spec = (Q_tot / area).to('W / m ** 2')
    else:
        q_spec = Q_(0.0, 'W / m ** 2')
    if Q_tot.m > 0.0 and Q_exist.m > 0.0:
        coverage = Q_((Q_exist / Q_tot).to('frac').m * 100.0, 'pct')
    else:
        coverage = Q_(0.0, 'pct')

    Q = Q_tot.to('W').m
    heat_pump = HeatPumpSizing(
        P_rec=Q_(math.ceil(Q / 1000), 'kW'),
        P_rec_margin=Q_(math.ceil(Q * constants.f_safety / 1000), 'kW')
    )
    logger.debug(
        f"{len(results)} rooms: heat load {Q_tot.to('W').m:.1f} W, "
        f"recommended heat pump {heat_pump.P_rec:~P}."
    )
    return BuildingHeatLoad(
        rooms=results,
        params=params,
        Q_tot=Q_tot.to('W'),
        area=area.to('m ** 2'),
        volume=volume.to('m ** 3'),
        Q_exist=Q_exist.to('W'),
        q_spec=q_spec,
        coverage=coverage,
        heat_pump=heat_pump
    )
