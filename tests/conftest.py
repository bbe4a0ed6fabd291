"""
Pytest configuration and fixtures for the heat load tests.

Provides reusable test fixtures for:
- Rooms (the living room reference case and a bathroom)
- Building parameters
- A building record with German field names
"""

import pytest

from heatload import Quantity
from heatload.core import ElementKind, Adjacency, EnvelopeElement, Window
from heatload.building import Room, BuildingParameters

Q_ = Quantity


def exterior_wall(area: float, U: float, adjacency: Adjacency = Adjacency.OUTDOOR_AIR) -> EnvelopeElement:
    return EnvelopeElement(
        kind=ElementKind.EXTERIOR_WALL,
        area=Q_(area, 'm ** 2'),
        U=Q_(U, 'W / (m ** 2 * K)'),
        adjacency=adjacency,
        adjacency_label=adjacency.value
    )


# =============================================================================
# ROOM FIXTURES
# =============================================================================

@pytest.fixture
def living_room() -> Room:
    """20 m² living room, 2.5 m high, one 12 m² exterior wall (U = 0.3),
    no windows, doors, ventilation device or heaters.
    """
    return Room(
        ID='Wohnzimmer',
        floor='EG',
        usage='Wohnzimmer',
        area=Q_(20.0, 'm ** 2'),
        height=Q_(2.5, 'm'),
        T_int_d=Q_(20.0, 'degC'),
        envelope_elements=[exterior_wall(12.0, 0.3)]
    )


@pytest.fixture
def bathroom() -> Room:
    """6 m² bathroom at 24 °C with an 8 m² exterior wall and a small window."""
    return Room(
        ID='Bad',
        floor='OG',
        usage='Bad',
        area=Q_(6.0, 'm ** 2'),
        height=Q_(2.5, 'm'),
        T_int_d=Q_(24.0, 'degC'),
        envelope_elements=[exterior_wall(8.0, 0.3)],
        windows=[Window(area=Q_(0.8, 'm ** 2'), U_w=Q_(1.3, 'W / (m ** 2 * K)'))]
    )


# =============================================================================
# BUILDING FIXTURES
# =============================================================================

@pytest.fixture
def params() -> BuildingParameters:
    """Default boundary conditions: -10 °C, n50 = 3 1/h, 5 % thermal bridges."""
    return BuildingParameters()


@pytest.fixture
def building_record() -> dict:
    """Building record as exported by the data collection form."""
    return {
        'gebaeude': {
            'adresse': 'Musterstraße 1, 12345 Musterstadt',
            'baujahr': 1978,
            'rahmenbedingungen_heizlast': {
                'norm_aussentemperatur_c': -10,
                'gebaeudedichtheit_n50': 3,
                'waermebrueckenzuschlag_uwb': 0.05
            }
        },
        'raeume': [
            {
                'stockwerk': 'EG',
                'raumbezeichnung': 'Wohnzimmer',
                'raumnutzung': 'Wohnzimmer',
                'norm_innentemperatur_c': 20,
                'raumgroesse_m2': 20,
                'raumhoehe_m': 2.5,
                'raumvolumen_m3': 50,
                'heizkoerper': [
                    {
                        'Art': 'Plattenheizkörper Typ 22',
                        'waermeleistung_55_45_20_watt': 0,
                        'leistung_w': 350,
                        'baubreite_mm': 1000,
                        'bauhoehe_mm': 600,
                        'bautiefe_mm': 100
                    }
                ],
                'lueftung': {'typ': 'Stosslueftung'},
                'fenster': [],
                'tueren': [{'typ': 'Innentür', 'hoehe_m': 2.0, 'breite_m': 0.9}],
                'angrenzende_unbeheizte_bereiche': [
                    {'typ': 'Außenwand', 'u_wert': '0.3', 'flaeche_m2': 12, 'art': 'Außenluft', 'hinweis': ''}
                ]
            },
            {
                'stockwerk': 'OG',
                'raumbezeichnung': 'Bad',
                'raumnutzung': 'Bad',
                'norm_innentemperatur_c': 24,
                'raumgroesse_m2': 6,
                'raumhoehe_m': 2.5,
                'heizkoerper': [
                    {'Art': 'Fussbodenheizung', 'waermeleistung_40_33_20_watt': 250,
                     'waermeleistung_55_45_20_watt': 900}
                ],
                'fenster': [
                    {'typ': 'Kipp', 'uw_wert': 1.3, 'hoehe_m': 0.8, 'breite_m': 1.0, 'flaeche_m2': 0}
                ],
                'angrenzende_unbeheizte_bereiche': [
                    {'typ': 'Außenwand', 'u_wert': 0.3, 'flaeche_m2': 8, 'art': 'Außenluft'}
                ]
            }
        ]
    }
