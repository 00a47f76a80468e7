"""
Energy Measure Registry

Closed enumeration of all energy term kinds together with their canonical
names and the alternative spellings accepted when reading a configuration.

New kinds are added between the begin/end markers of their category, and a
canonical name must be added to `_CANONICAL_NAMES` at the same time. Renamed
or deprecated spellings belong in the alias table so that existing
configurations keep resolving.
"""

from enum import Enum, IntEnum, auto
from typing import Dict, List, Optional, Tuple

from src.utils.text import pad, register_formatter, register_parser


class EnergyMeasure(IntEnum):
    """Enumeration of all available energy terms."""

    UNKNOWN = 0

    # Image (dis-)similarity measures
    SIM_BEGIN = auto()
    JE = auto()  # Joint entropy
    CC = auto()  # Cross-correlation
    MI = auto()  # Mutual information
    NMI = auto()  # Normalized mutual information
    SSD = auto()  # Sum of squared differences
    CR_XY = auto()  # Correlation ratio
    CR_YX = auto()  # Correlation ratio
    LC = auto()
    K = auto()
    ML = auto()
    NGF_COS = auto()  # Cosine of normalized gradient field
    LNCC = auto()  # Normalized/local cross-correlation
    SIM_END = auto()

    # Point set distance measures
    PDM_BEGIN = auto()
    FRE = auto()  # Fiducial registration error
    CORRESPONDENCE_DISTANCE = auto()
    CURRENTS_DISTANCE = auto()
    VARIFOLD_DISTANCE = auto()
    PDM_END = auto()

    # External point set forces
    EFT_BEGIN = auto()
    BALLOON_FORCE = auto()
    IMAGE_EDGE_FORCE = auto()
    IMPLICIT_SURFACE_DISTANCE = auto()
    IMPLICIT_SURFACE_SPRING_FORCE = auto()
    EFT_END = auto()

    # Internal point set forces
    IFT_BEGIN = auto()
    METRIC_DISTORTION = auto()
    STRETCHING = auto()  # Rest edge length
    CURVATURE = auto()
    QUADRATIC_CURVATURE = auto()  # Quadratic fit of neighbors to tangent plane
    NON_SELF_INTERSECTION = auto()  # Repels too close non-neighboring triangles
    REPULSIVE_FORCE = auto()  # Repels too close non-neighboring nodes
    INFLATION_FORCE = auto()
    SPRING_FORCE = auto()
    IFT_END = auto()

    # Transformation regularization terms
    CM_BEGIN = auto()
    VOLUME_PRESERVATION = auto()
    TOPOLOGY_PRESERVATION = auto()
    SPARSITY = auto()
    BENDING_ENERGY = auto()  # Thin-plate spline bending energy
    L0_NORM = auto()
    L1_NORM = auto()
    L2_NORM = auto()
    SQ_LOG_DET_JAC = auto()  # Squared logarithm of the Jacobian determinant
    MIN_DET_JAC = auto()  # Constrain minimum Jacobian determinant
    CM_END = auto()

    LAST = auto()  # Number of enumeration values + 1


class EnergyMeasureCategory(Enum):
    """Named sub-ranges of the energy measure enumeration."""

    SIMILARITY = (EnergyMeasure.SIM_BEGIN, EnergyMeasure.SIM_END)
    POINT_SET_DISTANCE = (EnergyMeasure.PDM_BEGIN, EnergyMeasure.PDM_END)
    EXTERNAL_FORCE = (EnergyMeasure.EFT_BEGIN, EnergyMeasure.EFT_END)
    INTERNAL_FORCE = (EnergyMeasure.IFT_BEGIN, EnergyMeasure.IFT_END)
    CONSTRAINT = (EnergyMeasure.CM_BEGIN, EnergyMeasure.CM_END)

    @property
    def begin(self) -> EnergyMeasure:
        return self.value[0]

    @property
    def end(self) -> EnergyMeasure:
        return self.value[1]

    def __contains__(self, measure) -> bool:
        return self.begin < measure < self.end


UNKNOWN_NAME = "Unknown"

_CANONICAL_NAMES: Dict[EnergyMeasure, str] = {
    # Image (dis-)similarity measures
    EnergyMeasure.JE: "JE",
    EnergyMeasure.CC: "CC",
    EnergyMeasure.MI: "MI",
    EnergyMeasure.NMI: "NMI",
    EnergyMeasure.SSD: "SSD",
    EnergyMeasure.CR_XY: "CR_XY",
    EnergyMeasure.CR_YX: "CR_YX",
    EnergyMeasure.LC: "LC",
    EnergyMeasure.K: "K",
    EnergyMeasure.ML: "ML",
    EnergyMeasure.NGF_COS: "NGF_COS",
    EnergyMeasure.LNCC: "LNCC",
    # Point set distance measures
    EnergyMeasure.FRE: "FRE",
    EnergyMeasure.CORRESPONDENCE_DISTANCE: "PCD",
    EnergyMeasure.CURRENTS_DISTANCE: "CurrentsDistance",
    EnergyMeasure.VARIFOLD_DISTANCE: "VarifoldDistance",
    # External point set forces
    EnergyMeasure.BALLOON_FORCE: "BalloonForce",
    EnergyMeasure.IMAGE_EDGE_FORCE: "ImageEdgeForce",
    EnergyMeasure.IMPLICIT_SURFACE_DISTANCE: "ImplicitSurfaceDistance",
    EnergyMeasure.IMPLICIT_SURFACE_SPRING_FORCE: "ImplicitSurfaceSpringForce",
    # Internal point set forces
    EnergyMeasure.METRIC_DISTORTION: "MetricDistortion",
    EnergyMeasure.STRETCHING: "Stretching",
    EnergyMeasure.CURVATURE: "Curvature",
    EnergyMeasure.QUADRATIC_CURVATURE: "QuadraticCurvature",
    EnergyMeasure.NON_SELF_INTERSECTION: "NSI",
    EnergyMeasure.REPULSIVE_FORCE: "Repulsion",
    EnergyMeasure.INFLATION_FORCE: "Inflation",
    EnergyMeasure.SPRING_FORCE: "Spring",
    # Transformation constraints
    EnergyMeasure.VOLUME_PRESERVATION: "VP",
    EnergyMeasure.TOPOLOGY_PRESERVATION: "TP",
    EnergyMeasure.SPARSITY: "Sparsity",
    EnergyMeasure.BENDING_ENERGY: "BE",
    EnergyMeasure.L0_NORM: "L0",
    EnergyMeasure.L1_NORM: "L1",
    EnergyMeasure.L2_NORM: "L2",
    EnergyMeasure.SQ_LOG_DET_JAC: "SqLogDetJac",
    EnergyMeasure.MIN_DET_JAC: "MinDetJac",
}

# Alternative names, checked before the canonical names
_ALIASES: Dict[str, EnergyMeasure] = {
    # Image (dis-)similarity measures
    "NCC": EnergyMeasure.LNCC,
    "LCC": EnergyMeasure.LNCC,
    # Point set distance measures
    "Fiducial Registration Error": EnergyMeasure.FRE,
    "Fiducial registration error": EnergyMeasure.FRE,
    "Fiducial Error": EnergyMeasure.FRE,
    "Fiducial error": EnergyMeasure.FRE,
    "Landmark Registration Error": EnergyMeasure.FRE,
    "Landmark registration error": EnergyMeasure.FRE,
    "Landmark Error": EnergyMeasure.FRE,
    "Landmark error": EnergyMeasure.FRE,
    "Point Correspondence Distance": EnergyMeasure.CORRESPONDENCE_DISTANCE,
    "Point correspondence distance": EnergyMeasure.CORRESPONDENCE_DISTANCE,
    "Correspondence Distance": EnergyMeasure.CORRESPONDENCE_DISTANCE,
    "Correspondence distance": EnergyMeasure.CORRESPONDENCE_DISTANCE,
    "Currents distance": EnergyMeasure.CURRENTS_DISTANCE,
    "Currents Distance": EnergyMeasure.CURRENTS_DISTANCE,
    "Varifold distance": EnergyMeasure.VARIFOLD_DISTANCE,
    "Varifold Distance": EnergyMeasure.VARIFOLD_DISTANCE,
    # External point set forces
    "EdgeForce": EnergyMeasure.IMAGE_EDGE_FORCE,
    # Internal point set forces
    "EdgeLength": EnergyMeasure.STRETCHING,
    "MetricDistortion": EnergyMeasure.METRIC_DISTORTION,
    "Bending": EnergyMeasure.CURVATURE,
    "SurfaceBending": EnergyMeasure.CURVATURE,
    "SurfaceCurvature": EnergyMeasure.CURVATURE,
    "RepulsiveForce": EnergyMeasure.REPULSIVE_FORCE,
    "NonSelfIntersection": EnergyMeasure.NON_SELF_INTERSECTION,
    "InflationForce": EnergyMeasure.INFLATION_FORCE,
    "SurfaceInflation": EnergyMeasure.INFLATION_FORCE,
    # Transformation regularization terms
    "JAC": EnergyMeasure.SQ_LOG_DET_JAC,
    "MinJac": EnergyMeasure.MIN_DET_JAC,
}


def is_valid(measure) -> bool:
    """Whether `measure` is a usable energy term kind (not a sentinel or marker)."""
    if not isinstance(measure, int):
        return False
    return any(measure in category for category in EnergyMeasureCategory)


def category_of(measure) -> Optional[EnergyMeasureCategory]:
    """Get the category a valid energy measure belongs to, None otherwise."""
    if not isinstance(measure, int):
        return None
    for category in EnergyMeasureCategory:
        if measure in category:
            return category
    return None


def energy_measures(
    category: Optional[EnergyMeasureCategory] = None,
) -> List[EnergyMeasure]:
    """List valid energy measures in declaration order, optionally of one category."""
    return [
        measure
        for measure in EnergyMeasure
        if (measure in category if category else is_valid(measure))
    ]


def energy_measure_to_string(
    measure, width: int = 0, fill: str = " ", left: bool = False
) -> str:
    """
    Get canonical name of an energy measure.

    Any value that is not a valid energy measure, including the unknown
    sentinel and the category markers, yields "Unknown".
    """
    name = _CANONICAL_NAMES.get(measure) if is_valid(measure) else None
    return pad(name or UNKNOWN_NAME, width, fill, left)


def _build_name_lookup() -> Dict[str, EnergyMeasure]:
    # Ascending insertion lets a larger enumerator replace a smaller one
    # sharing its name, same result as scanning down from LAST - 1.
    lookup = {}
    for measure in energy_measures():
        name = _CANONICAL_NAMES.get(measure)
        if name:
            lookup[name] = measure
    return lookup


_NAME_LOOKUP = _build_name_lookup()


def energy_measure_from_string(text: str) -> Tuple[EnergyMeasure, bool]:
    """
    Convert text to an energy measure.

    Aliases are consulted first, then the canonical names. Matching is exact
    and case-sensitive.

    Args:
        text: Name of the energy measure.

    Returns:
        Tuple[EnergyMeasure, bool]: The measure and True if the name is known,
        (EnergyMeasure.UNKNOWN, False) otherwise.
    """
    measure = _ALIASES.get(text)
    if measure is None:
        measure = _NAME_LOOKUP.get(text, EnergyMeasure.UNKNOWN)
    return measure, measure != EnergyMeasure.UNKNOWN


def register_alias(alias: str, measure: EnergyMeasure) -> None:
    """
    Add an alternative name for an energy measure.

    Raises:
        ValueError: If `measure` is not a valid energy measure, or `alias` is
            already bound to a different one.
    """
    if not isinstance(measure, EnergyMeasure) or not is_valid(measure):
        raise ValueError(f"Cannot register alias '{alias}' for invalid measure {measure!r}")
    current = _ALIASES.get(alias)
    if current is not None and current != measure:
        raise ValueError(
            f"Alias '{alias}' already refers to {energy_measure_to_string(current)}"
        )
    _ALIASES[alias] = measure


def aliases_of(measure: EnergyMeasure) -> List[str]:
    """Get all alternative names of an energy measure."""
    return [alias for alias, target in _ALIASES.items() if target == measure]


def duplicate_names() -> Dict[str, List[EnergyMeasure]]:
    """Get canonical names shared by more than one energy measure."""
    owners: Dict[str, List[EnergyMeasure]] = {}
    for measure in energy_measures():
        owners.setdefault(energy_measure_to_string(measure), []).append(measure)
    return {name: kinds for name, kinds in owners.items() if len(kinds) > 1}


@register_formatter(EnergyMeasure)
def _format_energy_measure(measure) -> str:
    return energy_measure_to_string(measure)


@register_parser(EnergyMeasure)
def _parse_energy_measure(text: str) -> Tuple[EnergyMeasure, bool]:
    return energy_measure_from_string(text)
