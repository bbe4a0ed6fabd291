from .building_element import (
    ElementKind,
    Adjacency,
    EnvelopeElement,
    Window,
    Door
)
from .constants import DesignConstants, DEFAULT_CONSTANTS
from .insulation import InsulationQuality, classify_insulation
from .heat_emitter import HeatEmitter, Radiator, FloorHeating
from .transmission import (
    TransmissionDetail,
    TransmissionHeatLoss,
    compute_transmission_heat_loss
)
from .ventilation import (
    Ventilation,
    VentilationHeatLoss,
    compute_ventilation_heat_loss
)
