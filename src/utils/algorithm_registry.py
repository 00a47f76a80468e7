"""Registry for mapping energy measures to the classes implementing them."""

import importlib
from typing import Dict, List, Optional, Union

from src.core.energy_measure import (
    EnergyMeasure,
    energy_measure_from_string,
    energy_measure_to_string,
)
from src.core.errors import UnknownEnergyMeasureError
from src.core.parameters import ParameterList
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Energy measures with an implementation, imported on first use
TERM_REGISTRY: Dict[EnergyMeasure, Dict[str, str]] = {
    # Image (dis-)similarity measures
    EnergyMeasure.NMI: {
        "module": "src.core.terms.similarity",
        "class": "NormalizedMutualInformation",
    },
    EnergyMeasure.SSD: {
        "module": "src.core.terms.similarity",
        "class": "SumOfSquaredDifferences",
    },
    EnergyMeasure.LNCC: {
        "module": "src.core.terms.similarity",
        "class": "NormalizedCrossCorrelation",
    },
    # Point set distance measures
    EnergyMeasure.FRE: {
        "module": "src.core.terms.point_set_distance",
        "class": "FiducialRegistrationError",
    },
    # External point set forces
    EnergyMeasure.BALLOON_FORCE: {
        "module": "src.core.terms.external_forces",
        "class": "BalloonForce",
    },
    EnergyMeasure.IMPLICIT_SURFACE_SPRING_FORCE: {
        "module": "src.core.terms.external_forces",
        "class": "ImplicitSurfaceSpringForce",
    },
    # Internal point set forces
    EnergyMeasure.CURVATURE: {
        "module": "src.core.terms.internal_forces",
        "class": "CurvatureForce",
    },
    EnergyMeasure.SPRING_FORCE: {
        "module": "src.core.terms.internal_forces",
        "class": "SpringForce",
    },
    # Transformation constraints
    EnergyMeasure.BENDING_ENERGY: {
        "module": "src.core.terms.constraints",
        "class": "BendingEnergy",
    },
}


def resolve_measure(measure: Union[EnergyMeasure, str]) -> EnergyMeasure:
    """
    Convert an energy measure name to its enumeration value.

    Args:
        measure: Energy measure or its canonical/alternative name.

    Returns:
        EnergyMeasure: The resolved energy measure.

    Raises:
        UnknownEnergyMeasureError: If the name is not known.
    """
    if isinstance(measure, EnergyMeasure):
        return measure
    resolved, found = energy_measure_from_string(measure)
    if not found:
        raise UnknownEnergyMeasureError(measure)
    return resolved


def get_registered_measures() -> List[EnergyMeasure]:
    """Get list of all energy measures with a registered implementation."""
    return sorted(TERM_REGISTRY.keys())


def get_term_info(measure: Union[EnergyMeasure, str]) -> Optional[Dict]:
    """
    Get implementation info of an energy measure.

    Args:
        measure: Energy measure or its name (case sensitive)

    Returns:
        Info dict with "module" and "class" if registered, None otherwise
    """
    if not isinstance(measure, EnergyMeasure):
        measure, _ = energy_measure_from_string(measure)
    return TERM_REGISTRY.get(measure)


def get_term_class(measure: Union[EnergyMeasure, str]) -> type:
    """
    Get the class implementing an energy measure.

    Args:
        measure: Energy measure or its name, e.g. 'NCC', 'LNCC' and
                 EnergyMeasure.LNCC all map to NormalizedCrossCorrelation

    Returns:
        type: The energy term class

    Raises:
        ValueError: If the measure is unknown, has no implementation, or its
                    module cannot be imported
    """
    resolved = resolve_measure(measure)
    term_info = TERM_REGISTRY.get(resolved)
    if not term_info:
        available = ", ".join(energy_measure_to_string(m) for m in get_registered_measures())
        logger.warning(
            f"Energy measure '{energy_measure_to_string(resolved)}' has no implementation. "
            f"Available energy measures: {available}"
        )
        raise ValueError(
            f"Energy measure '{energy_measure_to_string(resolved)}' not registered. "
            "Please add it to algorithm_registry.py first."
        )

    try:
        module = importlib.import_module(term_info["module"])
        return getattr(module, term_info["class"])
    except (ImportError, AttributeError) as e:
        logger.error(
            f"Failed to import {term_info['class']} from {term_info['module']}: {e!s}"
        )
        raise ValueError(
            f"Failed to load energy term '{energy_measure_to_string(resolved)}'. "
            "Please check if the module and class exist."
        ) from e


def create_energy_term(
    measure: Union[EnergyMeasure, str],
    params: Optional[ParameterList] = None,
    name: str = "",
):
    """
    Create an energy term and apply the given parameters.

    Rejected parameters are ignored, as by `ConfigurableObject.set_parameters`.
    """
    term = get_term_class(measure)(name=name)
    if params is not None:
        term.set_parameters(params)
    return term
