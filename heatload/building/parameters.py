from __future__ import annotations

from dataclasses import dataclass, field
from heatload import Quantity


Q_ = Quantity

T_EXT_D_DEFAULT = Q_(-10.0, 'degC')
N50_DEFAULT = Q_(3.0, '1 / hr')
DU_TB_DEFAULT = Q_(0.05, 'frac')


@dataclass
class BuildingParameters:
    """Building-wide boundary conditions of the heat load calculation.

    A field set to None takes its default value in the calculation. Zero is a
    value, not a missing one.

    Parameters
    ----------
    T_ext_d: Quantity, default -10 °C
        Design value of the outdoor air temperature at the location of the
        building.
    n50: Quantity, default 3 1/hr
        Air change rate of the building at a pressure difference of 50 Pa
        (result or estimate of a blower door test).
    dU_tb: Quantity, default 0.05 frac
        Thermal bridge surcharge on the direct transmission paths to the
        outdoor air.
    """
    T_ext_d: Quantity | None = field(default_factory=lambda: T_EXT_D_DEFAULT)
    n50: Quantity | None = field(default_factory=lambda: N50_DEFAULT)
    dU_tb: Quantity | None = field(default_factory=lambda: DU_TB_DEFAULT)

    def with_defaults(self) -> BuildingParameters:
        """Returns a copy in which every field that is None holds its default
        value.
        """
        return BuildingParameters(
            T_ext_d=self.T_ext_d if self.T_ext_d is not None else T_EXT_D_DEFAULT,
            n50=self.n50 if self.n50 is not None else N50_DEFAULT,
            dU_tb=self.dU_tb if self.dU_tb is not None else DU_TB_DEFAULT
        )
