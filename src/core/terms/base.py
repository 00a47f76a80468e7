"""
Base Energy Term Class

This is the base class for all energy term components.
In order to implement a new energy term, extend this class (or one of the
category base classes), set `MEASURE` and extend `set` / `parameter` with the
term's own parameters. Register the class in `src.utils.algorithm_registry`
so that it can be created by name.
"""

from src.core.attributes import Attribute
from src.core.energy_measure import EnergyMeasure, energy_measure_to_string
from src.core.object import ConfigurableObject
from src.core.parameters import ParameterList
from src.utils.text import from_string


class EnergyTerm(ConfigurableObject):
    """
    Abstract base class of all energy terms.

    Every term has a `name` identifying it within an energy function and a
    `weight` scaling its contribution, configured as parameter "Weight".
    """

    MEASURE = EnergyMeasure.UNKNOWN

    name = Attribute("", doc="Name of this term within the energy function")
    weight = Attribute(1.0, doc="Weight of this term")

    def __init__(self, name: str = "", weight: float = 1.0):
        self.name = name
        self.weight = weight

    @classmethod
    def measure_name(cls) -> str:
        """Canonical name of the energy measure implemented by this class."""
        return energy_measure_to_string(cls.MEASURE)

    def set(self, name: str, value: str) -> bool:
        if name == "Weight":
            return self._parse_into("weight", value, float)
        return super().set(name, value)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        params.insert("Weight", self.weight)
        return params

    def _parse_into(self, attr: str, value: str, cls: type) -> bool:
        """Parse `value` as `cls` and assign it to attribute `attr` if valid."""
        parsed, ok = from_string(value, cls)
        if ok:
            setattr(self, attr, parsed)
        return ok


class ImageSimilarity(EnergyTerm):
    """Base class of image (dis-)similarity measures."""


class PointSetDistance(EnergyTerm):
    """Base class of point set distance measures."""


class PointSetForce(EnergyTerm):
    """Base class of external and internal point set forces."""


class ExternalForce(PointSetForce):
    """Base class of forces driving a point set towards image or surface data."""


class InternalForce(PointSetForce):
    """Base class of forces regularizing the shape of a point set."""


class TransformationConstraint(EnergyTerm):
    """Base class of transformation regularization terms."""
