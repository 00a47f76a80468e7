"""
Parameter List

Ordered list of parameter name/value pairs. This is the common currency for
configuring any component: values are always stored as text, converted by
`src.utils.text.to_string` on insertion.
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from src.utils.text import to_string

ParameterEntry = Tuple[str, str]


def _lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


def _upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]


class ParameterList:
    """
    Ordered sequence of (name, value) text pairs with unique names.

    Updating an existing name keeps its position; new names are appended.
    """

    def __init__(
        self, entries: Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None] = None
    ):
        self._entries: List[ParameterEntry] = []
        if entries is None:
            return
        if isinstance(entries, Mapping):
            entries = entries.items()
        for name, value in entries:
            self.insert(name, value)

    def find(self, name: str) -> Optional[int]:
        """Get position of the first entry with the given name, None if absent."""
        for pos, (key, _) in enumerate(self._entries):
            if key == name:
                return pos
        return None

    def contains(self, name: str) -> bool:
        return self.find(name) is not None

    def get(self, name: str, default: str = "") -> str:
        """Get parameter value, or `default` if the parameter is not in the list."""
        pos = self.find(name)
        if pos is None:
            return default
        return self._entries[pos][1]

    def insert(self, name: str, value: Any) -> "ParameterList":
        """
        Insert or replace a parameter value.

        Args:
            name: Parameter name.
            value: Parameter value, converted to text by `to_string`.

        Returns:
            ParameterList: This list.
        """
        entry = (name, to_string(value))
        pos = self.find(name)
        if pos is None:
            self._entries.append(entry)
        else:
            self._entries[pos] = entry
        return self

    def merge(self, other: "ParameterList", prefix: Optional[str] = None) -> "ParameterList":
        """
        Insert or replace all parameters of another list, in its order.

        With a prefix, each name is rewritten to "<prefix> <name>" with the
        first character of the original name in lower case, e.g. "Weight"
        under prefix "Spring" becomes "Spring weight". An empty prefix still
        applies, giving " weight".
        """
        for name, value in other:
            if prefix is not None:
                name = f"{prefix} {_lower_first(name)}"
            self.insert(name, value)
        return self

    def subset(self, prefix: str) -> "ParameterList":
        """
        Get the parameters namespaced under `prefix`, with the prefix removed.

        This undoes a prefixed `merge`: "Spring weight" under prefix "Spring"
        yields "Weight".
        """
        head = prefix + " "
        params = ParameterList()
        for name, value in self._entries:
            if name.startswith(head) and len(name) > len(head):
                params.insert(_upper_first(name[len(head):]), value)
        return params

    def remove(self, name: str) -> "ParameterList":
        """Remove a parameter from the list, if present."""
        pos = self.find(name)
        if pos is not None:
            del self._entries[pos]
        return self

    def names(self) -> List[str]:
        return [name for name, _ in self._entries]

    def values(self) -> List[str]:
        return [value for _, value in self._entries]

    def to_dict(self) -> Dict[str, str]:
        return dict(self._entries)

    def copy(self) -> "ParameterList":
        params = ParameterList()
        params._entries = list(self._entries)
        return params

    def __contains__(self, name) -> bool:
        return self.contains(name)

    def __iter__(self) -> Iterator[ParameterEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, pos: int) -> ParameterEntry:
        return self._entries[pos]

    def __eq__(self, other) -> bool:
        if isinstance(other, ParameterList):
            return self._entries == other._entries
        if isinstance(other, list):
            return self._entries == [tuple(entry) for entry in other]
        return NotImplemented

    def __repr__(self) -> str:
        return f"ParameterList({self._entries!r})"
