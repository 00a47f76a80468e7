"""External point set forces."""

from typing import Optional

from src.core.attributes import Aggregate, Attribute, Component, Switch
from src.core.energy_measure import EnergyMeasure
from src.core.parameters import ParameterList
from src.core.terms.base import ExternalForce
from src.core.terms.internal_forces import SpringForce


class BalloonForce(ExternalForce):
    """Inflation/deflation force driving a surface towards image boundaries."""

    MEASURE = EnergyMeasure.BALLOON_FORCE

    image = Aggregate(doc="Input image, not owned by the force")
    deflate_surface = Switch(False)
    lower_intensity = Attribute(float("-inf"))
    upper_intensity = Attribute(float("inf"))

    def set(self, name: str, value: str) -> bool:
        if name == "Deflate surface":
            return self._parse_into("deflate_surface", value, bool)
        if name == "Lower intensity":
            return self._parse_into("lower_intensity", value, float)
        if name == "Upper intensity":
            return self._parse_into("upper_intensity", value, float)
        return super().set(name, value)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        params.insert("Deflate surface", self.deflate_surface)
        params.insert("Lower intensity", self.lower_intensity)
        params.insert("Upper intensity", self.upper_intensity)
        return params


class ImplicitSurfaceSpringForce(ExternalForce):
    """
    Force towards an implicit surface, smoothed by an owned spring force.

    The spring parameters are listed under the "Spring" prefix, e.g. the
    spring weight is configured as "Spring weight".
    """

    MEASURE = EnergyMeasure.IMPLICIT_SURFACE_SPRING_FORCE

    SPRING_PREFIX = "Spring"

    spring = Component(default_factory=SpringForce)
    maximum_distance = Attribute(0.0, doc="Maximum distance of surface, 0 if unlimited")

    def _spring_parameter_name(self, name: str) -> Optional[str]:
        """Name of a spring parameter without prefix, None if not a spring parameter."""
        head = self.SPRING_PREFIX + " "
        if name.startswith(head) and len(name) > len(head):
            sub = name[len(head):]
            return sub[:1].upper() + sub[1:]
        return None

    def set(self, name: str, value: str) -> bool:
        if name == "Maximum distance":
            return self._parse_into("maximum_distance", value, float)
        spring_name = self._spring_parameter_name(name)
        if spring_name is not None:
            # No spring, no spring parameters
            return self.spring is not None and self.spring.set(spring_name, value)
        return super().set(name, value)

    def has_parameter(self, name: str) -> bool:
        spring_name = self._spring_parameter_name(name)
        if spring_name is not None and self.spring is not None:
            return self.spring.has_parameter(spring_name)
        return super().has_parameter(name)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        params.insert("Maximum distance", self.maximum_distance)
        if self.spring is not None:
            params.merge(self.spring.parameter(), self.SPRING_PREFIX)
        return params
