"""src/paylink/http/query.py

Multi-valued query parameter set for Paylink.
"""

import urllib.parse
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

__all__ = ["QueryParams"]


class QueryParams(Mapping[str, str]):
    """
    Insertion-ordered mapping of query parameters with support for multiple values.

    Behaves like a dictionary where the value of a key is its first value.
    Access raw lists via get_all(), and every pair via multi_items().
    """

    __slots__ = ("_params",)

    def __init__(self, params: Optional[Dict[str, Union[str, List[str]]]] = None):
        self._params: Dict[str, List[str]] = {}
        if params:
            for k, v in params.items():
                # Support both single values and lists
                if isinstance(v, list):
                    self._params[k] = list(v)
                else:
                    self._params[k] = [v]

    def __getitem__(self, key: str) -> str:
        """Get the first value of a parameter."""
        values = self._params.get(key)
        if not values:
            raise KeyError(key)
        return values[0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, QueryParams):
            return self._params == other._params
        return NotImplemented

    def __repr__(self) -> str:
        return f"QueryParams({self._params!r})"

    def get_all(self, key: str) -> List[str]:
        """
        Get all values of a parameter.

        Args:
            key: Parameter name.

        Returns:
            List of all values for the parameter, empty list if not found.
        """
        return list(self._params.get(key, []))

    def set(self, key: str, value: str) -> None:
        """Replace every value of ``key`` with ``value``."""
        self._params[key] = [value]

    def add(self, key: str, value: str) -> None:
        """Append ``value`` to the values of ``key``."""
        self._params.setdefault(key, []).append(value)

    def remove(self, key: str) -> None:
        """Remove ``key`` and all its values. Missing keys are ignored."""
        self._params.pop(key, None)

    def multi_items(self) -> List[Tuple[str, str]]:
        """Return every (key, value) pair, in insertion order."""
        return [(k, v) for k, values in self._params.items() for v in values]

    def to_dict(self) -> Dict[str, List[str]]:
        """Return a copy of the underlying key to values mapping."""
        return {k: list(values) for k, values in self._params.items()}

    def encode(self) -> str:
        """
        Encode the parameters as ``application/x-www-form-urlencoded`` text.

        Pairs keep insertion order, so repeated keys are emitted once per value.
        """
        return urllib.parse.urlencode(self.multi_items())
