"""
Tests for the transmission heat loss of a room.

Run with: pytest tests/test_transmission.py -v
"""

import dataclasses

import pytest

from heatload import Quantity
from heatload.core import (
    ElementKind,
    Adjacency,
    EnvelopeElement,
    Window,
    Door,
    DEFAULT_CONSTANTS,
    compute_transmission_heat_loss
)
from heatload.core.transmission import get_net_area
from heatload.building import Room

Q_ = Quantity

U_UNIT = 'W / (m ** 2 * K)'


def _element(kind: ElementKind | None, area: float, U: float, label: str) -> EnvelopeElement:
    return EnvelopeElement(
        kind=kind,
        area=Q_(area, 'm ** 2'),
        U=Q_(U, U_UNIT),
        adjacency=Adjacency.parse(label),
        adjacency_label=label
    )


def _H_T(room: Room, dU_tb: float = 0.05) -> float:
    return compute_transmission_heat_loss(room, Q_(dU_tb, 'frac')).H_T.to('W / K').m


class TestDirectPaths:
    """Tests for elements losing heat straight to the outdoor air."""

    def test_reference_exterior_wall(self, living_room):
        res = compute_transmission_heat_loss(living_room, Q_(0.05, 'frac'))
        assert res.H_T.to('W / K').m == pytest.approx(3.78)
        assert res.H_T_dir.to('W / K').m == pytest.approx(3.78)
        assert res.H_T_ind.to('W / K').m == 0.0

    def test_windows_and_exterior_doors_are_subtracted_from_wall(self, living_room):
        living_room.windows = [
            Window(height=Q_(1.2, 'm'), width=Q_(1.5, 'm'), U_w=Q_(1.1, U_UNIT))
        ]
        living_room.doors = [
            Door(area=Q_(2.0, 'm ** 2'), U_d=Q_(1.5, U_UNIT), kind='Außentür'),
            Door(area=Q_(1.8, 'm ** 2'), U_d=Q_(2.0, U_UNIT), kind='Innentür')
        ]
        res = compute_transmission_heat_loss(living_room, Q_(0.05, 'frac'))
        # net wall 12 - 1.8 - 2.0 = 8.2 m²
        assert res.details[0].area.to('m ** 2').m == pytest.approx(8.2)
        expected = (8.2 * 0.3 + 1.8 * 1.1 + 2.0 * 1.5) * 1.05
        assert res.H_T.to('W / K').m == pytest.approx(expected)
        assert [d.ID for d in res.details] == ['Außenwand (Außenluft)', 'Fenster 1', 'Außentür 1']

    def test_net_wall_area_never_negative(self, living_room):
        living_room.envelope_elements = [_element(ElementKind.EXTERIOR_WALL, 2.0, 0.3, 'Außenluft')]
        living_room.windows = [Window(area=Q_(3.0, 'm ** 2'))]
        net = get_net_area(living_room.envelope_elements[0], living_room)
        assert net.to('m ** 2').m == 0.0
        # only the window (default U of 2.0) contributes
        assert _H_T(living_room) == pytest.approx(3.0 * 2.0 * 1.05)

    def test_roof_to_outdoor_air_is_direct_without_subtraction(self, living_room):
        living_room.envelope_elements = [_element(ElementKind.CEILING, 20.0, 0.2, 'Dach/Außenluft')]
        living_room.windows = [Window(area=Q_(1.8, 'm ** 2'), U_w=Q_(1.0, U_UNIT))]
        res = compute_transmission_heat_loss(living_room, Q_(0.05, 'frac'))
        assert res.details[0].area.to('m ** 2').m == pytest.approx(20.0)
        assert res.H_T_dir.to('W / K').m == pytest.approx((20.0 * 0.2 + 1.8 * 1.0) * 1.05)
        assert res.H_T_ind.to('W / K').m == 0.0

    def test_exterior_wall_to_unheated_space_is_still_direct(self, living_room):
        living_room.envelope_elements = [_element(ElementKind.EXTERIOR_WALL, 10.0, 0.5, 'Garage')]
        res = compute_transmission_heat_loss(living_room, Q_(0.05, 'frac'))
        assert res.details[0].direct
        assert res.H_T_dir.to('W / K').m == pytest.approx(10.0 * 0.5 * 1.05)

    def test_thermal_bridge_surcharge(self, living_room):
        assert _H_T(living_room, 0.0) == pytest.approx(3.6)
        assert _H_T(living_room, 0.10) == pytest.approx(3.96)


class TestIndirectPaths:
    """Tests for elements losing heat through an unheated space."""

    @pytest.mark.parametrize('label, f_T', [
        ('Erdreich', 0.6),
        ('Keller unbeheizt', 0.5),
        ('Dachboden unbeheizt', 0.9),
        ('Garage', 0.8),
        ('Treppenhaus unbeheizt', 0.5),
        ('Halle (EG)', 0.5),
        ('', 0.5),
    ])
    def test_temperature_reduction_factor(self, label, f_T):
        room = Room(envelope_elements=[_element(ElementKind.FLOOR, 20.0, 0.5, label)])
        res = compute_transmission_heat_loss(room, Q_(0.05, 'frac'))
        assert res.H_T_ind.to('W / K').m == pytest.approx(20.0 * 0.5 * f_T)
        assert res.H_T_dir.to('W / K').m == 0.0
        assert res.details[0].f.to('frac').m == pytest.approx(f_T)
        assert not res.details[0].direct

    def test_indirect_area_not_reduced_by_windows(self):
        room = Room(
            envelope_elements=[_element(ElementKind.INTERIOR_WALL, 10.0, 1.0, 'Treppenhaus unbeheizt')],
            windows=[Window(area=Q_(2.0, 'm ** 2'), U_w=Q_(1.0, U_UNIT))]
        )
        res = compute_transmission_heat_loss(room, Q_(0.05, 'frac'))
        assert res.H_T_ind.to('W / K').m == pytest.approx(5.0)
        assert res.H_T_dir.to('W / K').m == pytest.approx(2.1)

    def test_mixed_room_sums_both_paths(self):
        room = Room(
            envelope_elements=[
                _element(ElementKind.EXTERIOR_WALL, 15.0, 0.3, 'Außenluft'),
                _element(ElementKind.FLOOR, 20.0, 0.4, 'Erdreich'),
                _element(ElementKind.CEILING, 20.0, 0.3, 'Dachboden unbeheizt')
            ]
        )
        res = compute_transmission_heat_loss(room, Q_(0.05, 'frac'))
        H_dir = 15.0 * 0.3 * 1.05
        H_ind = 20.0 * 0.4 * 0.6 + 20.0 * 0.3 * 0.9
        assert res.H_T_dir.to('W / K').m == pytest.approx(H_dir)
        assert res.H_T_ind.to('W / K').m == pytest.approx(H_ind)
        assert res.H_T.to('W / K').m == pytest.approx(H_dir + H_ind)
        assert len(res.details) == 3


class TestWindowsAndDoors:
    """Tests for windows and doors."""

    def test_window_default_u_value(self):
        room = Room(windows=[Window(area=Q_(1.5, 'm ** 2'))])
        res = compute_transmission_heat_loss(room, Q_(0.05, 'frac'))
        assert res.details[0].U.to(U_UNIT).m == pytest.approx(2.0)
        assert res.H_T.to('W / K').m == pytest.approx(1.5 * 2.0 * 1.05)

    def test_window_area_from_dimensions_is_rounded(self):
        window = Window(height=Q_(1.234, 'm'), width=Q_(1.111, 'm'))
        assert window.A.to('m ** 2').m == pytest.approx(1.37)

    def test_given_window_area_takes_precedence(self):
        window = Window(height=Q_(1.0, 'm'), width=Q_(1.0, 'm'), area=Q_(1.7, 'm ** 2'))
        assert window.A.to('m ** 2').m == pytest.approx(1.7)

    def test_exterior_door_default_u_value(self):
        room = Room(doors=[Door(height=Q_(2.0, 'm'), width=Q_(1.0, 'm'), kind='Außentür')])
        res = compute_transmission_heat_loss(room, Q_(0.05, 'frac'))
        assert res.H_T.to('W / K').m == pytest.approx(2.0 * 2.5 * 1.05)

    @pytest.mark.parametrize('kind, exterior', [
        ('Außentür', True),
        ('Aussentür', True),
        ('Haustür (außen)', True),
        ('Innentür', False),
        ('Innentür (Bad)', False),
        ('', False),
    ])
    def test_only_exterior_doors_count(self, kind, exterior):
        door = Door(area=Q_(2.0, 'm ** 2'), U_d=Q_(1.8, U_UNIT), kind=kind)
        assert door.is_exterior is exterior
        res = compute_transmission_heat_loss(Room(doors=[door]), Q_(0.05, 'frac'))
        assert len(res.details) == (1 if exterior else 0)

    def test_door_numbering_counts_all_doors(self):
        room = Room(doors=[
            Door(area=Q_(1.8, 'm ** 2'), kind='Innentür'),
            Door(area=Q_(2.0, 'm ** 2'), kind='Außentür')
        ])
        res = compute_transmission_heat_loss(room, Q_(0.05, 'frac'))
        assert [d.ID for d in res.details] == ['Außentür 2']


class TestEdgeCases:
    """Tests for missing data."""

    def test_empty_room(self):
        res = compute_transmission_heat_loss(Room(), Q_(0.05, 'frac'))
        assert res.H_T.to('W / K').m == 0.0
        assert res.details == []

    def test_missing_u_value_contributes_nothing(self):
        room = Room(envelope_elements=[EnvelopeElement(kind=ElementKind.EXTERIOR_WALL, area=Q_(12.0, 'm ** 2'))])
        res = compute_transmission_heat_loss(room, Q_(0.05, 'frac'))
        assert res.H_T.to('W / K').m == 0.0
        assert len(res.details) == 1

    def test_detail_carries_insulation_quality(self, living_room):
        res = compute_transmission_heat_loss(living_room, Q_(0.05, 'frac'))
        assert res.details[0].quality.label == 'EnEV 2014'

    def test_constants_can_be_overridden(self):
        room = Room(windows=[Window(area=Q_(1.0, 'm ** 2'))])
        constants = dataclasses.replace(DEFAULT_CONSTANTS, U_window_default=Q_(3.0, U_UNIT))
        res = compute_transmission_heat_loss(room, Q_(0.0, 'frac'), constants)
        assert res.H_T.to('W / K').m == pytest.approx(3.0)

    def test_input_room_is_not_modified(self, living_room):
        living_room.windows = [Window(area=Q_(3.0, 'm ** 2'))]
        before = dataclasses.replace(living_room.envelope_elements[0])
        compute_transmission_heat_loss(living_room, Q_(0.05, 'frac'))
        assert living_room.envelope_elements[0] == before
