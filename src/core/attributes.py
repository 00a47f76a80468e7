"""
Attribute Accessors

Declarative class attributes that generate `get_<name>` / `set_<name>`
accessors on the owning class. Assigning to the attribute always goes through
`set_<name>`, so a subclass overriding the setter sees every assignment.

    class SpringForce(InternalForce):
        inward_weight = Attribute(0.5)
        fixed = Switch(False)           # also generates fixed_on() / fixed_off()
        image = Aggregate()             # not owned, replacing it has no effect
        spring = Component()            # owned, replacing it closes the old one
"""

import copy
from typing import Any, Callable, Optional

_MISSING = object()


class Attribute:
    """
    Data descriptor storing its value on the instance as `_<name>`.

    :param default: Initial value (copied per instance)
    :param default_factory: Callable creating the initial value, used instead of `default`
    :param read_only: Only generate a getter; assignment raises AttributeError
    :param doc: Docstring of the attribute
    """

    def __init__(
        self,
        default: Any = None,
        *,
        default_factory: Optional[Callable[[], Any]] = None,
        read_only: bool = False,
        doc: Optional[str] = None,
    ):
        self.default = default
        self.default_factory = default_factory
        self.read_only = read_only
        self.__doc__ = doc
        self.name = None
        self.storage = None

    def __set_name__(self, owner, name):
        self.name = name
        self.storage = "_" + name
        self._add_method(owner, f"get_{name}", self._make_getter())
        if not self.read_only:
            self._add_method(owner, f"set_{name}", self._make_setter())

    @staticmethod
    def _add_method(owner, method_name, method):
        if method_name not in owner.__dict__:
            method.__name__ = method_name
            method.__qualname__ = f"{owner.__qualname__}.{method_name}"
            setattr(owner, method_name, method)

    def _make_getter(self):
        descriptor = self

        def getter(obj):
            return descriptor.load(obj)

        getter.__doc__ = f"Get value of {self.name} attribute."
        return getter

    def _make_setter(self):
        descriptor = self

        def setter(obj, value):
            descriptor.store(obj, value)

        setter.__doc__ = f"Set value of {self.name} attribute."
        return setter

    def initial_value(self):
        if self.default_factory is not None:
            return self.default_factory()
        return copy.copy(self.default)

    def load(self, obj):
        value = obj.__dict__.get(self.storage, _MISSING)
        if value is _MISSING:
            value = self.initial_value()
            obj.__dict__[self.storage] = value
        return value

    def store(self, obj, value):
        obj.__dict__[self.storage] = value

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return self.load(obj)

    def __set__(self, obj, value):
        if self.read_only:
            raise AttributeError(f"Attribute '{self.name}' is read-only")
        getattr(obj, f"set_{self.name}")(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, default={self.default!r})"


class Switch(Attribute):
    """Boolean attribute with generated `<name>_on()` / `<name>_off()` methods."""

    def __init__(self, default: bool = False, **kwargs):
        super().__init__(bool(default), **kwargs)

    def __set_name__(self, owner, name):
        super().__set_name__(owner, name)
        if not self.read_only:
            self._add_method(owner, f"{name}_on", self._make_switch(True))
            self._add_method(owner, f"{name}_off", self._make_switch(False))

    def _make_switch(self, state: bool):
        name = self.name

        def switch(obj):
            getattr(obj, f"set_{name}")(state)

        switch.__doc__ = f"Turn {name} {'on' if state else 'off'}."
        return switch


class Aggregate(Attribute):
    """
    Reference to an object that is not owned.

    Replacing the reference leaves the previous object untouched.
    """

    def __init__(self, **kwargs):
        super().__init__(None, **kwargs)


class Component(Attribute):
    """
    Reference to an owned object.

    Replacing the reference closes the previous object, if it has a
    `close()` method and is not the object being assigned.
    """

    def __init__(self, *, default_factory: Optional[Callable[[], Any]] = None, **kwargs):
        super().__init__(None, default_factory=default_factory, **kwargs)

    def store(self, obj, value):
        previous = obj.__dict__.get(self.storage)
        super().store(obj, value)
        if previous is not None and previous is not value:
            close = getattr(previous, "close", None)
            if callable(close):
                close()
