"""
Heat emitters installed in a room. Their heat output is compared with the
calculated heat load of the room.

Radiators are rated at flow/return/room temperatures of 55/45/20 °C. Floor
heating circuits are rated at the low-temperature condition 40/33/20 °C.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from heatload import Quantity


Q_ = Quantity


class HeatEmitter(ABC):
    """Installed heat emitter of a room."""

    category: str
    note: str

    @property
    @abstractmethod
    def capacity(self) -> Quantity:
        """Heat output of the emitter that counts towards the existing
        heating capacity of the room.
        """
        ...

    @staticmethod
    def is_floor_heating(category: str) -> bool:
        category = category.lower()
        return 'fussbodenheizung' in category or 'fußbodenheizung' in category


@dataclass
class Radiator(HeatEmitter):
    """Radiator, convector or any other emitter that is not a floor heating.

    Parameters
    ----------
    category:
        Kind of emitter as recorded.
    Q_nom: optional
        Heat output at 55/45/20 °C.
    dimensions: optional
        Width, height and depth of the emitter.
    note:
        Free-text remark.
    """
    category: str = ''
    Q_nom: Quantity | None = None
    dimensions: tuple[Quantity, Quantity, Quantity] | None = None
    note: str = ''

    @property
    def capacity(self) -> Quantity:
        return self.Q_nom.to('W') if self.Q_nom is not None else Q_(0.0, 'W')


@dataclass
class FloorHeating(HeatEmitter):
    """Floor heating circuit.

    Parameters
    ----------
    category:
        Kind of emitter as recorded.
    Q_low_temp: optional
        Heat output at 40/33/20 °C.
    note:
        Free-text remark.
    """
    category: str = 'Fussbodenheizung'
    Q_low_temp: Quantity | None = None
    note: str = ''

    @property
    def capacity(self) -> Quantity:
        return self.Q_low_temp.to('W') if self.Q_low_temp is not None else Q_(0.0, 'W')
