"""Shell variables visible to the compiler."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Environment:
    """Mapping of shell variable names to values; unset names read as ''."""

    variables: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        return self.variables.get(key, "")

    def set(self, key: str, value: str) -> None:
        self.variables[key] = value

    def copy(self) -> Environment:
        return Environment(dict(self.variables))