"""Language alias table: maps fence tags to canonical highlighter names."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

# JSON has no grammar of its own and is highlighted as JavaScript.
BUILTIN_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "js": "javascript",
        "html": "html5",
        "json": "javascript",
    }
)


class LanguageAliasTable(Mapping[str, str]):
    """Read-only mapping of authored fence tags to canonical languages."""

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases = MappingProxyType(dict(BUILTIN_ALIASES if aliases is None else aliases))

    def __getitem__(self, tag: str) -> str:
        return self._aliases[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def __repr__(self) -> str:
        return f"LanguageAliasTable({dict(self._aliases)!r})"

    def resolve(self, tag: str) -> str:
        """Return the canonical language for ``tag``, or ``tag`` itself."""
        return self._aliases.get(tag, tag)

    def with_overrides(self, overrides: Mapping[str, str]) -> LanguageAliasTable:
        """Return a new table with ``overrides`` layered on top of this one."""
        if not overrides:
            return self
        merged = dict(self._aliases)
        merged.update(overrides)
        return LanguageAliasTable(merged)


DEFAULT_ALIASES = LanguageAliasTable()
