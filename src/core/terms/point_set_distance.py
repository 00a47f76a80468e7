"""Point set distance measures."""

from src.core.energy_measure import EnergyMeasure
from src.core.terms.base import PointSetDistance


class FiducialRegistrationError(PointSetDistance):
    """Mean squared distance between corresponding landmarks."""

    MEASURE = EnergyMeasure.FRE
