from .parameters import BuildingParameters
from .room import Room, RoomHeatLoad, compute_room_heat_load
from .building import (
    Building,
    BuildingHeatLoad,
    HeatPumpSizing,
    compute_building_heat_load
)
from .records import (
    RecordError,
    resolve_field,
    room_from_record,
    building_parameters_from_record,
    building_from_record,
    load_building,
    room_heat_load_to_record,
    building_heat_load_to_record
)
