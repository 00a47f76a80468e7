"""Module for creating and configuring the energy terms of a configuration."""

from typing import List

from src.config.config_parser import get_term_configs
from src.core.errors import ParameterError
from src.core.object import SetResult
from src.core.terms.base import EnergyTerm
from src.reporting.report import format_term_report
from src.utils.algorithm_registry import create_energy_term
from src.utils.logger import get_logger

logger = get_logger(__name__)


def configure_term(term: EnergyTerm, params, strict: bool = False) -> List[tuple]:
    """
    Apply parameters to an energy term one at a time.

    Args:
        term: Energy term to configure.
        params: ParameterList to apply, in order.
        strict: Raise after applying all parameters if any was rejected.

    Returns:
        list: (name, value, reason) of each rejected parameter.

    Raises:
        ParameterError: If `strict` and any parameter was rejected.
    """
    rejected = []
    for name, value in params:
        result = term.try_set(name, value)
        if result is SetResult.OK:
            logger.debug(f"{term.name_of_class()}: {name} = {value}")
            continue
        rejected.append((name, value, result.value))
        if not strict:
            logger.warning(
                f"{term.name_of_class()} ignored parameter '{name}' = '{value}' "
                f"({result.value})"
            )
    if strict and rejected:
        raise ParameterError(term.name_of_class(), rejected)
    return rejected


def build_energy_terms(config: dict) -> List[EnergyTerm]:
    """
    Create and configure all energy terms of a configuration.

    Args:
        config (dict): Merged configuration dictionary.

    Returns:
        list: Configured energy terms in configuration order.

    Raises:
        UnknownEnergyMeasureError: If a measure name cannot be resolved.
        ValueError: If a measure has no implementation.
        ParameterError: In strict mode, if a term rejects a parameter.
    """
    strict = config["energy"].get("strict", False)
    terms = []
    for term_config in get_term_configs(config):
        term = create_energy_term(term_config["measure"], name=term_config["name"])
        logger.info(
            f"Created {term.name_of_class()} for '{term_config['measure']}'"
        )
        configure_term(term, term_config["parameters"], strict=strict)
        terms.append(term)
    return terms


def run_configuration_pipeline(config: dict) -> List[EnergyTerm]:
    """
    Run the complete configuration pipeline.

    This function:
    1. Creates an energy term for each configured measure
    2. Applies the configured parameters to each term
    3. Logs a report of the resulting term parameters

    Args:
        config (dict): Merged configuration dictionary.

    Returns:
        list: Configured energy terms.
    """
    logger.info("=== Configuring Energy Terms ===")
    terms = build_energy_terms(config)
    report = format_term_report(
        terms, width=config["report"]["width"], fill=config["report"]["fill"]
    )
    logger.info(f"Configured {len(terms)} energy term(s):\n{report}")
    return terms
