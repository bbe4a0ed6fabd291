"""
Example of the room-by-room heat load calculation of a small house.
"""
import pandas as pd
from heatload import Quantity
from heatload.logging import ModuleLogger
from heatload.core import (
    ElementKind,
    Adjacency,
    EnvelopeElement,
    Window,
    Door,
    Ventilation,
    Radiator,
    FloorHeating
)
from heatload.building import Building, BuildingParameters, Room

Q_ = Quantity


def _element(kind: ElementKind, area: float, U: float, adjacency: Adjacency) -> EnvelopeElement:
    return EnvelopeElement(
        kind=kind,
        area=Q_(area, 'm ** 2'),
        U=Q_(U, 'W / (m ** 2 * K)'),
        adjacency=adjacency,
        adjacency_label=adjacency.value
    )


class House:

    def __init__(self):
        self.params = BuildingParameters(
            T_ext_d=Q_(-12, 'degC'),
            n50=Q_(4.0, '1 / hr'),
            dU_tb=Q_(0.10, 'frac')
        )
        self.living_room = self._create_living_room()
        self.kitchen = self._create_kitchen()
        self.bathroom = self._create_bathroom()
        self.bedroom = self._create_bedroom()
        self.building = Building(
            rooms=[self.living_room, self.kitchen, self.bathroom, self.bedroom],
            params=self.params,
            ID='Musterhaus'
        )

    @staticmethod
    def _create_living_room() -> Room:
        return Room(
            ID='Wohnzimmer',
            floor='EG',
            usage='Wohnzimmer',
            area=Q_(28.5, 'm ** 2'),
            height=Q_(2.6, 'm'),
            envelope_elements=[
                _element(ElementKind.EXTERIOR_WALL, 24.0, 0.45, Adjacency.OUTDOOR_AIR),
                _element(ElementKind.FLOOR, 28.5, 0.8, Adjacency.UNHEATED_BASEMENT)
            ],
            windows=[
                Window(height=Q_(1.4, 'm'), width=Q_(2.0, 'm'), U_w=Q_(1.1, 'W / (m ** 2 * K)')),
                Window(height=Q_(2.1, 'm'), width=Q_(1.0, 'm'), U_w=Q_(1.1, 'W / (m ** 2 * K)'))
            ],
            heaters=[
                Radiator(category='Plattenheizkörper Typ 22', Q_nom=Q_(1450, 'W')),
                Radiator(category='Plattenheizkörper Typ 22', Q_nom=Q_(980, 'W'))
            ]
        )

    @staticmethod
    def _create_kitchen() -> Room:
        return Room(
            ID='Küche',
            floor='EG',
            usage='Küche',
            area=Q_(11.0, 'm ** 2'),
            height=Q_(2.6, 'm'),
            envelope_elements=[
                _element(ElementKind.EXTERIOR_WALL, 9.5, 0.45, Adjacency.OUTDOOR_AIR),
                _element(ElementKind.FLOOR, 11.0, 0.8, Adjacency.UNHEATED_BASEMENT)
            ],
            windows=[Window(height=Q_(1.2, 'm'), width=Q_(1.0, 'm'))],
            doors=[Door(height=Q_(2.1, 'm'), width=Q_(1.0, 'm'), U_d=Q_(1.8, 'W / (m ** 2 * K)'), kind='Außentür')],
            heaters=[Radiator(category='Plattenheizkörper Typ 21', Q_nom=Q_(1100, 'W'))]
        )

    @staticmethod
    def _create_bathroom() -> Room:
        return Room(
            ID='Bad',
            floor='OG',
            usage='Bad',
            area=Q_(7.5, 'm ** 2'),
            height=Q_(2.5, 'm'),
            T_int_d=Q_(24, 'degC'),
            envelope_elements=[
                _element(ElementKind.EXTERIOR_WALL, 7.9, 0.45, Adjacency.OUTDOOR_AIR),
                _element(ElementKind.CEILING, 7.5, 0.35, Adjacency.UNHEATED_ATTIC)
            ],
            windows=[Window(height=Q_(0.6, 'm'), width=Q_(0.6, 'm'), U_w=Q_(1.3, 'W / (m ** 2 * K)'))],
            heaters=[FloorHeating(Q_low_temp=Q_(420, 'W'))]
        )

    @staticmethod
    def _create_bedroom() -> Room:
        return Room(
            ID='Schlafzimmer',
            floor='OG',
            usage='Schlafzimmer',
            area=Q_(14.0, 'm ** 2'),
            height=Q_(2.5, 'm'),
            T_int_d=Q_(18, 'degC'),
            envelope_elements=[
                _element(ElementKind.EXTERIOR_WALL, 11.2, 0.45, Adjacency.OUTDOOR_AIR),
                _element(ElementKind.CEILING, 14.0, 0.35, Adjacency.UNHEATED_ATTIC),
                _element(ElementKind.INTERIOR_WALL, 8.0, 1.2, Adjacency.UNHEATED_STAIRWELL)
            ],
            windows=[Window(height=Q_(1.2, 'm'), width=Q_(1.2, 'm'), U_w=Q_(1.1, 'W / (m ** 2 * K)'))],
            ventilation=Ventilation(
                kind='KWL mit WRG',
                eta_hr=Q_(80, 'pct'),
                V_flow=Q_(30, 'm ** 3 / hr')
            ),
            heaters=[Radiator(category='Plattenheizkörper Typ 11', Q_nom=Q_(520, 'W'))]
        )


def main():
    ModuleLogger.set_level(ModuleLogger.DEBUG)
    house = House()
    heat_load = house.building.get_heat_load()
    with pd.option_context(
        'display.max_rows', None,
        'display.max_columns', None,
        'display.width', 800
    ):
        print(heat_load.get_summary())
    print()
    print(f"building heat load: {heat_load.Q_tot.to('kW'):.2f~P}")
    print(f"recommended heat pump: {heat_load.heat_pump.P_rec:~P}")
    print(f"... with safety margin: {heat_load.heat_pump.P_rec_margin:~P}")


if __name__ == '__main__':
    main()
