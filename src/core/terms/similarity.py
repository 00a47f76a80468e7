"""Image (dis-)similarity measures."""

from src.core.attributes import Attribute
from src.core.energy_measure import EnergyMeasure
from src.core.parameters import ParameterList
from src.core.terms.base import ImageSimilarity


class SumOfSquaredDifferences(ImageSimilarity):
    MEASURE = EnergyMeasure.SSD


class NormalizedCrossCorrelation(ImageSimilarity, mutable=True):
    """
    Normalized cross-correlation of image intensities.

    With a zero window radius the correlation is global; otherwise it is
    evaluated within local windows and the class name changes accordingly.
    """

    MEASURE = EnergyMeasure.LNCC

    window_radius = Attribute(0, doc="Radius of local window in voxels, 0 for global")

    def name_of_class(self) -> str:
        if self.window_radius > 0:
            return "LocalNormalizedCrossCorrelation"
        return "NormalizedCrossCorrelation"

    def set(self, name: str, value: str) -> bool:
        if name == "Local window radius":
            return self._parse_into("window_radius", value, int)
        return super().set(name, value)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        params.insert("Local window radius", self.window_radius)
        return params


class NormalizedMutualInformation(ImageSimilarity):
    MEASURE = EnergyMeasure.NMI

    BINS_NAMES = ("No. of bins", "No. of histogram bins")

    bins = Attribute(64, doc="Number of joint histogram bins per dimension")

    def set(self, name: str, value: str) -> bool:
        if name in self.BINS_NAMES:
            return self._parse_into("bins", value, int)
        return super().set(name, value)

    def has_parameter(self, name: str) -> bool:
        return name in self.BINS_NAMES or super().has_parameter(name)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        params.insert("No. of bins", self.bins)
        return params
