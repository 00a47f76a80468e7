"""
Configurable Object

This is the base class for all configurable components.
In order to make a component configurable by name, extend this class, override
`set` to recognise the component's parameter names and `parameter` to report
their current values.
"""

from abc import ABC
from enum import Enum
from typing import Any, Iterable, Tuple, Union

from src.core.parameters import ParameterList
from src.utils.text import to_string


class SetResult(Enum):
    """Outcome of applying a single named parameter."""

    OK = "ok"
    UNKNOWN_PARAMETER = "unknown parameter"
    INVALID_VALUE = "invalid value"

    def __bool__(self) -> bool:
        return self is SetResult.OK


class ConfigurableObject(ABC):
    """
    Base class of all components configured through name/value pairs.

    Subclasses may pass class keywords:

    - ``type_name``: type identifier returned by `name_of_type`, defaults to
      the class name.
    - ``mutable``: the class computes `name_of_class` from its state and must
      define that method itself.
    """

    _type_name = "ConfigurableObject"

    def __init_subclass__(cls, type_name: str = None, mutable: bool = False, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._type_name = type_name or cls.__name__
        if mutable and "name_of_class" not in cls.__dict__:
            raise TypeError(
                f"Mutable class {cls.__name__} must define its own name_of_class()"
            )

    @classmethod
    def name_of_type(cls) -> str:
        """Get name of this class type."""
        return cls._type_name

    def name_of_class(self) -> str:
        """Get name of the class this object is an instance of."""
        return type(self).name_of_type()

    def set(self, name: str, value: str) -> bool:
        """
        Set parameter value from text.

        :param name: Parameter name
        :param value: Parameter value as text
        :return: Whether the parameter is known and its value was accepted
        """
        return False

    def parameter(self) -> ParameterList:
        """Get parameter name/value pairs."""
        return ParameterList()

    def set_parameters(
        self, params: Union[ParameterList, Iterable[Tuple[str, Any]]]
    ) -> None:
        """
        Set parameters from name/value pairs, in order.

        Rejected parameters are ignored; values accepted before a rejection
        stay in effect.
        """
        for name, value in params:
            self.set(name, to_string(value))

    def has_parameter(self, name: str) -> bool:
        """
        Whether `set` recognises the parameter name.

        Subclasses whose `set` accepts names not listed by `parameter()`, such
        as alternative spellings, override this.
        """
        return name in self.parameter()

    def try_set(self, name: str, value: str) -> SetResult:
        """
        Set parameter value and report why it was rejected, if it was.

        A rejected name that `has_parameter` recognises is taken to have an
        invalid value; any other rejected name is unknown.
        """
        if self.set(name, value):
            return SetResult.OK
        if self.has_parameter(name):
            return SetResult.INVALID_VALUE
        return SetResult.UNKNOWN_PARAMETER

    def __repr__(self) -> str:
        return f"<{self.name_of_class()} {self.parameter().to_dict()!r}>"
