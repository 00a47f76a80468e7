"""Internal point set forces."""

from src.core.attributes import Attribute, Switch
from src.core.energy_measure import EnergyMeasure
from src.core.parameters import ParameterList
from src.core.terms.base import InternalForce


class SpringForce(InternalForce):
    """
    Spring force pulling each node towards the centroid of its neighbors.

    The force is split into a normal and a tangential component; the normal
    component is weighted separately depending on whether it points inwards
    or outwards.
    """

    MEASURE = EnergyMeasure.SPRING_FORCE

    inward_normal_weight = Attribute(0.5)
    outward_normal_weight = Attribute(0.5)

    def set(self, name: str, value: str) -> bool:
        if name == "Inward normal weight":
            return self._parse_into("inward_normal_weight", value, float)
        if name == "Outward normal weight":
            return self._parse_into("outward_normal_weight", value, float)
        return super().set(name, value)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        params.insert("Inward normal weight", self.inward_normal_weight)
        params.insert("Outward normal weight", self.outward_normal_weight)
        return params


class CurvatureForce(InternalForce):
    MEASURE = EnergyMeasure.CURVATURE

    signed_curvature = Switch(False, doc="Whether to use signed mean curvature")

    def set(self, name: str, value: str) -> bool:
        if name == "Signed curvature":
            return self._parse_into("signed_curvature", value, bool)
        return super().set(name, value)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        params.insert("Signed curvature", self.signed_curvature)
        return params
