"""
Building envelope elements of a room: the surfaces that separate it from the
outdoor air or from an unheated space, and the windows and doors in them.
"""
from __future__ import annotations

from enum import Enum
from dataclasses import dataclass, field
from heatload import Quantity


Q_ = Quantity


class ElementKind(Enum):
    EXTERIOR_WALL = 'Außenwand'
    INTERIOR_WALL = 'Innenwand'
    FLOOR = 'Boden'
    CEILING = 'Decke'

    @classmethod
    def parse(cls, label: str | None) -> ElementKind | None:
        """Returns the element kind with `label`, or None if `label` is empty
        or not one of the known kinds.
        """
        for kind in cls:
            if label == kind.value:
                return kind
        return None


class Adjacency(Enum):
    """What lies on the other side of an envelope element.

    `OUTDOOR_AIR` and `ROOF_OUTDOOR_AIR` are the direct transmission paths.
    All other members are unheated intermediate spaces (indirect paths).
    Labels that are not listed map to `OTHER_UNHEATED`.
    """
    OUTDOOR_AIR = 'Außenluft'
    ROOF_OUTDOOR_AIR = 'Dach/Außenluft'
    GROUND = 'Erdreich'
    UNHEATED_BASEMENT = 'Keller unbeheizt'
    UNHEATED_ATTIC = 'Dachboden unbeheizt'
    GARAGE = 'Garage'
    UNHEATED_STAIRWELL = 'Treppenhaus unbeheizt'
    OTHER_UNHEATED = ''

    @classmethod
    def parse(cls, label: str | None) -> Adjacency:
        for adj in cls:
            if label == adj.value:
                return adj
        return cls.OTHER_UNHEATED

    @property
    def is_direct(self) -> bool:
        return self in (Adjacency.OUTDOOR_AIR, Adjacency.ROOF_OUTDOOR_AIR)


@dataclass
class EnvelopeElement:
    """Wall, floor or ceiling of a room that borders the exterior or an
    unheated space.

    Parameters
    ----------
    kind:
        Kind of element. None if the kind was left open.
    area:
        Gross area of the element. For exterior walls this still includes the
        windows and exterior doors of the room.
    U:
        Thermal transmittance of the element. A missing U-value is zero: the
        element does not contribute to the heat loss.
    adjacency:
        Kind of space on the other side of the element.
    adjacency_label:
        The free-text label the adjacency was parsed from, kept for reports.
    note:
        Free-text remark.
    """
    kind: ElementKind | None = None
    area: Quantity = field(default_factory=lambda: Q_(0.0, 'm ** 2'))
    U: Quantity = field(default_factory=lambda: Q_(0.0, 'W / (m ** 2 * K)'))
    adjacency: Adjacency = Adjacency.OTHER_UNHEATED
    adjacency_label: str = ''
    note: str = ''

    @property
    def is_direct(self) -> bool:
        """True if heat flows from the room straight to the outdoor air."""
        return self.kind is ElementKind.EXTERIOR_WALL or self.adjacency.is_direct

    @property
    def ID(self) -> str:
        kind = self.kind.value if self.kind is not None else ''
        label = self.adjacency_label or self.adjacency.value
        if kind and label:
            return f'{kind} ({label})'
        return kind or label


def _opening_area(
    area: Quantity | None,
    height: Quantity | None,
    width: Quantity | None
) -> Quantity:
    # a given area wins; otherwise height x width, rounded to 2 decimals
    if area is not None and area.to('m ** 2').m > 0.0:
        return area.to('m ** 2')
    if height is not None and width is not None:
        A = round((height * width).to('m ** 2').m, 2)
        return Q_(A, 'm ** 2')
    return Q_(0.0, 'm ** 2')


@dataclass
class Window:
    """Window in the envelope of a room.

    Parameters
    ----------
    height, width:
        Dimensions of the window. Only used if `area` is not given.
    area: optional
        Area of the window.
    U_w: optional
        Thermal transmittance of the window. If not given, the calculation
        uses a default value (see `DesignConstants.U_window_default`).
    kind:
        Type of window.
    glazing:
        Kind of glazing.
    description:
        Free-text description.
    """
    height: Quantity | None = None
    width: Quantity | None = None
    area: Quantity | None = None
    U_w: Quantity | None = None
    kind: str = ''
    glazing: str = ''
    description: str = ''

    @property
    def A(self) -> Quantity:
        return _opening_area(self.area, self.height, self.width)


@dataclass
class Door:
    """Door of a room. Only exterior doors take part in the transmission heat
    loss; doors to other heated rooms are ignored.

    Parameters
    ----------
    height, width:
        Dimensions of the door. Only used if `area` is not given.
    area: optional
        Area of the door.
    U_d: optional
        Thermal transmittance of the door. If not given, the calculation uses
        a default value (see `DesignConstants.U_door_default`).
    kind:
        Type of door, e.g. 'Innentür' or 'Außentür'.
    note:
        Free-text remark.
    """
    height: Quantity | None = None
    width: Quantity | None = None
    area: Quantity | None = None
    U_d: Quantity | None = None
    kind: str = ''
    note: str = ''

    @property
    def A(self) -> Quantity:
        return _opening_area(self.area, self.height, self.width)

    @property
    def is_exterior(self) -> bool:
        kind = self.kind.lower()
        return 'außen' in kind or 'aussen' in kind
