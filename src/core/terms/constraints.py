"""Transformation regularization terms."""

from src.core.attributes import Switch
from src.core.energy_measure import EnergyMeasure
from src.core.parameters import ParameterList
from src.core.terms.base import TransformationConstraint


class BendingEnergy(TransformationConstraint):
    """Thin-plate spline bending energy of a transformation."""

    MEASURE = EnergyMeasure.BENDING_ENERGY

    world_coordinates = Switch(False, doc="Evaluate derivatives w.r.t. world coordinates")

    def set(self, name: str, value: str) -> bool:
        if name == "World coordinates":
            return self._parse_into("world_coordinates", value, bool)
        return super().set(name, value)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        params.insert("World coordinates", self.world_coordinates)
        return params
