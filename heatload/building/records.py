"""
Conversion between the JSON building record and the objects of the heat
load calculation.

The building record uses the German field names of the data collection for
the hydraulic balancing ("hydraulischer Abgleich") of a building:

```
{
  "gebaeude": {
    "adresse": "...",
    "rahmenbedingungen_heizlast": {
      "norm_aussentemperatur_c": -12,
      "gebaeudedichtheit_n50": 3,
      "waermebrueckenzuschlag_uwb": 0.05
    }
  },
  "raeume": [
    {
      "raumbezeichnung": "Wohnzimmer", "stockwerk": "EG",
      "raumnutzung": "Wohnzimmer", "raumgroesse_m2": 20, ...
    }
  ]
}
```

On the way in, numbers become quantities with their unit; on the way out,
quantities become plain numbers in the unit named in the key.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping
from heatload import Quantity
from heatload.logging import ModuleLogger
from ..core import (
    ElementKind,
    Adjacency,
    EnvelopeElement,
    Window,
    Door,
    Ventilation,
    HeatEmitter,
    Radiator,
    FloorHeating,
    TransmissionDetail
)
from ..core.ventilation import WINDOW_AIRING
from .parameters import BuildingParameters
from .room import Room, RoomHeatLoad
from .building import Building, BuildingHeatLoad


Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


class RecordError(ValueError):
    """Raised when a field of the building record cannot be read."""
    pass


def _is_given(value: Any) -> bool:
    return value is not None and value != '' and value != 0


def resolve_field(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Returns the value of the first key in `keys` that is given in
    `record`.

    The first key is the current field name, the next ones are older names of
    the same field. A field that is missing, None, an empty string or zero
    counts as not given. If none of the keys is given, `default` is returned.
    """
    for key in keys:
        value = record.get(key)
        if _is_given(value):
            return value
    return default


def _to_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise RecordError(f"field '{key}': expected a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise RecordError(f"field '{key}': expected a number, got {value!r}") from None


def _get_number(record: Mapping[str, Any], key: str) -> float | None:
    # None if the field is missing or empty; zero is a value
    value = record.get(key)
    if value is None or value == '':
        return None
    return _to_float(key, value)


def _get_quantity(record: Mapping[str, Any], *keys: str, unit: str) -> Quantity | None:
    # None if none of `keys` is given (zero counts as not given)
    value = resolve_field(record, *keys)
    if value is None:
        return None
    x = _to_float('|'.join(keys), value)
    return Q_(x, unit) if x != 0.0 else None


def _get_text(record: Mapping[str, Any], key: str) -> str:
    # empty string if the field is missing or None
    value = record.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise RecordError(f"field '{key}': expected a text, got {value!r}")
    return value


def _get_mapping(record: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    # None if the field is missing or None
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise RecordError(f"field '{key}': expected an object, got {type(value).__name__}")
    return value


def _get_list(record: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    items = record.get(key) or []
    if not isinstance(items, list):
        raise RecordError(f"field '{key}': expected a list, got {type(items).__name__}")
    for i, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise RecordError(f"field '{key}', item {i + 1}: expected an object")
    return items


def envelope_element_from_record(record: Mapping[str, Any]) -> EnvelopeElement:
    label = _get_text(record, 'typ')
    kind = ElementKind.parse(label)
    if kind is None and label:
        logger.warning(f"Unknown kind of building element '{label}'.")
    art = _get_text(record, 'art')
    return EnvelopeElement(
        kind=kind,
        area=Q_(_get_number(record, 'flaeche_m2') or 0.0, 'm ** 2'),
        U=Q_(_get_number(record, 'u_wert') or 0.0, 'W / (m ** 2 * K)'),
        adjacency=Adjacency.parse(art),
        adjacency_label=art,
        note=_get_text(record, 'hinweis')
    )


def window_from_record(record: Mapping[str, Any]) -> Window:
    return Window(
        height=_get_quantity(record, 'hoehe_m', unit='m'),
        width=_get_quantity(record, 'breite_m', unit='m'),
        area=_get_quantity(record, 'flaeche_m2', unit='m ** 2'),
        U_w=_get_quantity(record, 'uw_wert', unit='W / (m ** 2 * K)'),
        kind=_get_text(record, 'typ'),
        glazing=_get_text(record, 'verglasung'),
        description=_get_text(record, 'beschreibung')
    )


def door_from_record(record: Mapping[str, Any]) -> Door:
    return Door(
        height=_get_quantity(record, 'hoehe_m', unit='m'),
        width=_get_quantity(record, 'breite_m', unit='m'),
        area=_get_quantity(record, 'flaeche_m2', unit='m ** 2'),
        U_d=_get_quantity(record, 'uw_wert', 'u_wert', unit='W / (m ** 2 * K)'),
        kind=_get_text(record, 'typ'),
        note=_get_text(record, 'hinweis')
    )


def ventilation_from_record(record: Mapping[str, Any]) -> Ventilation:
    return Ventilation(
        kind=_get_text(record, 'typ') or WINDOW_AIRING,
        eta_hr=Q_(_get_number(record, 'waermerueckgewinnung_prozent') or 0.0, 'pct'),
        V_flow=_get_quantity(record, 'luftvolumenstrom_m3h', unit='m ** 3 / hr'),
        model=_get_text(record, 'modell')
    )


def heat_emitter_from_record(record: Mapping[str, Any]) -> HeatEmitter:
    category = _get_text(record, 'Art')
    note = _get_text(record, 'hinweis')
    if HeatEmitter.is_floor_heating(category):
        return FloorHeating(
            category=category,
            Q_low_temp=_get_quantity(record, 'waermeleistung_40_33_20_watt', unit='W'),
            note=note
        )
    dims = [_get_quantity(record, key, unit='mm') for key in ('baubreite_mm', 'bauhoehe_mm', 'bautiefe_mm')]
    return Radiator(
        category=category,
        Q_nom=_get_quantity(record, 'waermeleistung_55_45_20_watt', 'leistung_w', unit='W'),
        dimensions=tuple(dims) if all(d is not None for d in dims) else None,
        note=note
    )


def room_from_record(record: Mapping[str, Any]) -> Room:
    """Creates a `Room` from a room record of the building record."""
    room = Room(
        ID=_get_text(record, 'raumbezeichnung'),
        floor=_get_text(record, 'stockwerk'),
        usage=_get_text(record, 'raumnutzung'),
        area=Q_(_get_number(record, 'raumgroesse_m2') or 0.0, 'm ** 2'),
        height=_get_quantity(record, 'raumhoehe_m', unit='m'),
        volume=_get_quantity(record, 'raumvolumen_m3', unit='m ** 3'),
        envelope_elements=[
            envelope_element_from_record(r)
            for r in _get_list(record, 'angrenzende_unbeheizte_bereiche')
        ],
        windows=[window_from_record(r) for r in _get_list(record, 'fenster')],
        doors=[door_from_record(r) for r in _get_list(record, 'tueren')],
        heaters=[heat_emitter_from_record(r) for r in _get_list(record, 'heizkoerper')]
    )
    T_int_d = _get_number(record, 'norm_innentemperatur_c')
    if T_int_d is not None:
        room.T_int_d = Q_(T_int_d, 'degC')
    lueftung = _get_mapping(record, 'lueftung')
    if lueftung is not None:
        room.ventilation = ventilation_from_record(lueftung)
    return room


def building_parameters_from_record(record: Mapping[str, Any]) -> BuildingParameters:
    """Creates `BuildingParameters` from the record
    `gebaeude.rahmenbedingungen_heizlast`. Missing fields keep their default
    value.
    """
    params = BuildingParameters()
    T_ext_d = _get_number(record, 'norm_aussentemperatur_c')
    if T_ext_d is not None:
        params.T_ext_d = Q_(T_ext_d, 'degC')
    n50 = _get_number(record, 'gebaeudedichtheit_n50')
    if n50 is not None:
        params.n50 = Q_(n50, '1 / hr')
    dU_tb = _get_number(record, 'waermebrueckenzuschlag_uwb')
    if dU_tb is not None:
        params.dU_tb = Q_(dU_tb, 'frac')
    return params


def building_from_record(record: Mapping[str, Any]) -> Building:
    """Creates a `Building` from a complete building record.

    Raises `RecordError` if a field of the record has the wrong type or a
    number cannot be read.
    """
    if not isinstance(record, Mapping):
        raise RecordError(f"building record: expected an object, got {type(record).__name__}")
    gebaeude = _get_mapping(record, 'gebaeude') or {}
    rooms = [room_from_record(r) for r in _get_list(record, 'raeume')]
    params = building_parameters_from_record(
        _get_mapping(gebaeude, 'rahmenbedingungen_heizlast') or {}
    )
    logger.info(f"Building record read: {len(rooms)} rooms.")
    return Building(rooms=rooms, params=params, ID=_get_text(gebaeude, 'adresse'))


def load_building(file_path: Path | str) -> Building:
    """Reads a building record from the JSON file at `file_path`."""
    with open(file_path, 'r', encoding='utf-8') as fh:
        record = json.load(fh)
    return building_from_record(record)


def _transmission_detail_to_record(detail: TransmissionDetail) -> dict[str, Any]:
    return {
        'element': detail.ID,
        'area_m2': detail.area.to('m ** 2').m,
        'u_value': detail.U.to('W / (m ** 2 * K)').m,
        'factor': detail.f.to('frac').m,
        'direct': detail.direct,
        'coefficient_W_per_K': detail.H.to('W / K').m,
        'insulation': {
            'tier': detail.quality.tier,
            'severity': detail.quality.severity,
            'label': detail.quality.label
        }
    }


def room_heat_load_to_record(result: RoomHeatLoad) -> dict[str, Any]:
    """Returns the heat load of a room as a JSON-serializable dictionary."""
    trm = result.transmission
    ven = result.ventilation
    return {
        'temperatures': {
            'inside_c': result.T_int_d.to('degC').m,
            'outside_c': result.T_ext_d.to('degC').m,
            'delta_t_k': result.dT_d.to('K').m
        },
        'transmission': {
            'coefficient_W_per_K': trm.H_T.to('W / K').m,
            'direct_W_per_K': trm.H_T_dir.to('W / K').m,
            'indirect_W_per_K': trm.H_T_ind.to('W / K').m,
            'loss_W': result.Q_trm.to('W').m,
            'details': [_transmission_detail_to_record(d) for d in trm.details]
        },
        'ventilation': {
            'coefficient_W_per_K': ven.H_V.to('W / K').m,
            'loss_W': result.Q_ven.to('W').m,
            'volume_m3': ven.volume.to('m ** 3').m,
            'air_exchange_rate_per_h': ven.n.to('1 / hr').m,
            'infiltration_rate_per_h': ven.n_inf.to('1 / hr').m,
            'heat_recovery_fraction': ven.eta_hr.to('frac').m,
            'airflow_m3h': ven.V_flow.to('m ** 3 / hr').m,
            'effective_airflow_m3h': ven.V_flow_eff.to('m ** 3 / hr').m,
            'room_usage': ven.usage,
            'ventilation_type': ven.ventilation_kind,
            'n50': ven.n50.to('1 / hr').m
        },
        'total': {
            'heat_load_W': result.Q_tot.to('W').m,
            'specific_heat_load_W_per_m2': result.q_spec.to('W / m ** 2').m,
            'existing_capacity_W': result.Q_exist.to('W').m,
            'capacity_coverage_percent': result.coverage.to('pct').m,
            'capacity_deficit_W': result.Q_deficit.to('W').m
        },
        'standard': result.standard,
        'calculation_method': result.calculation_method
    }


def building_heat_load_to_record(result: BuildingHeatLoad) -> dict[str, Any]:
    """Returns the heat load of a building as a JSON-serializable
    dictionary.
    """
    params = result.params
    return {
        'rooms': [
            {
                'room': r.room_ID,
                'floor': r.floor,
                'calculation': room_heat_load_to_record(r)
            }
            for r in result.rooms
        ],
        'summary': {
            'total_heat_load_W': result.Q_tot.to('W').m,
            'total_area_m2': result.area.to('m ** 2').m,
            'total_volume_m3': result.volume.to('m ** 3').m,
            'average_specific_heat_load_W_per_m2': result.q_spec.to('W / m ** 2').m,
            'total_existing_capacity_W': result.Q_exist.to('W').m,
            'overall_capacity_coverage_percent': result.coverage.to('pct').m,
            'heat_pump_sizing': {
                'recommended_kW': result.heat_pump.P_rec.to('kW').m,
                'with_safety_margin_kW': result.heat_pump.P_rec_margin.to('kW').m
            }
        },
        'parameters': {
            'norm_aussentemperatur_c': params.T_ext_d.to('degC').m,
            'gebaeudedichtheit_n50': params.n50.to('1 / hr').m,
            'waermebrueckenzuschlag_uwb': params.dU_tb.to('frac').m
        },
        'standard': result.standard
    }
