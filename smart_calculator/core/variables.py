"""In-memory variable store of a calculator session."""
from typing import Dict, Optional


class VariableStore:
    """
    Case-sensitive mapping of variable names to integer values.

    A store is created empty with its session and lives as long as it.
    Assignment creates or overwrites entries; entries are never deleted.
    """

    def __init__(self, initial: Optional[Dict[str, int]] = None) -> None:
        self._values: Dict[str, int] = dict(initial or {})

    def get(self, name: str) -> Optional[int]:
        return self._values.get(name)

    def set(self, name: str, value: int) -> None:
        self._values[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        # Values may be too long for repr(), so only names are shown
        return f"VariableStore(names={sorted(self._values)!r})"
