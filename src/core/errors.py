"""Exceptions raised when a configuration cannot be applied."""

from typing import List, Tuple


class UnknownEnergyMeasureError(ValueError):
    """Raised when an energy term name matches neither an alias nor a canonical name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown energy measure: '{name}'")
        self.name = name


class ParameterError(ValueError):
    """
    Raised when a component rejects one or more parameters.

    :param class_name: Class name of the component that rejected the parameters
    :param rejected: (name, value, reason) for each rejected parameter
    """

    def __init__(self, class_name: str, rejected: List[Tuple[str, str, str]]):
        details = ", ".join(
            f"'{name}' = '{value}' ({reason})" for name, value, reason in rejected
        )
        super().__init__(f"{class_name} rejected parameters: {details}")
        self.class_name = class_name
        self.rejected = rejected
