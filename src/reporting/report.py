"""Module for column-aligned parameter reports."""

from typing import Iterable, List

from src.core.energy_measure import (
    EnergyMeasureCategory,
    aliases_of,
    energy_measure_to_string,
    energy_measures,
)
from src.core.object import ConfigurableObject
from src.utils.text import to_string


def format_parameters(
    obj: ConfigurableObject, width: int = 32, fill: str = " "
) -> List[str]:
    """
    Format the parameters of a configurable object, one line per parameter.

    Args:
        obj: Object whose current parameters are listed.
        width: Width of the left-aligned name column.
        fill: Pad character of the name column.

    Returns:
        list: Lines of the form "<name padded to width> = <value>".
    """
    return [
        f"{to_string(name, width, fill, left=True)} = {value}"
        for name, value in obj.parameter()
    ]


def format_term_report(terms: Iterable, width: int = 32, fill: str = " ") -> str:
    """Format name, class and parameters of each energy term as a text block."""
    lines = []
    for term in terms:
        title = f"{term.name_of_class()} ({term.measure_name()})"
        if term.name:
            title = f"{term.name}: {title}"
        lines.append(title)
        lines.extend("  " + line for line in format_parameters(term, width, fill))
    return "\n".join(lines)


def format_measure_table(width: int = 28) -> str:
    """Format all energy measures by category, with their alternative names."""
    lines = []
    for category in EnergyMeasureCategory:
        lines.append(category.name.replace("_", " ").title())
        for measure in energy_measures(category):
            name = energy_measure_to_string(measure, width, left=True)
            aliases = ", ".join(aliases_of(measure))
            lines.append(f"  {name}{aliases}".rstrip())
    return "\n".join(lines)
