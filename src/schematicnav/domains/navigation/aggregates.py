"""Navigation Domain Aggregate Root.

The SymbolicConfiguration is the aggregate root for the navigation
bounded context. It owns the page and element name tables that make
intents portable across a site's implementation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping

from .errors import ConfigurationError


@dataclass(frozen=True)
class SymbolicConfiguration:
    """Named pages and elements for one site.

    Attributes:
        base_url: Substituted for ``{base}`` in page templates
        pages: page name -> URL template
        elements: element name -> selector

    Invariants:
        - Immutable after construction; the mappings are read-only views
          over private copies
        - Lookups are case-sensitive exact matches

    Concurrency:
        Shared by reference and never written after load, so no locking
        is needed.
    """
    base_url: str
    pages: Mapping[str, str] = field(default_factory=dict)
    elements: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str):
            raise ConfigurationError("base URL must be a string")
        object.__setattr__(self, "pages", _frozen_table("pages", self.pages))
        object.__setattr__(self, "elements", _frozen_table("elements", self.elements))

    def has_page(self, name: str) -> bool:
        return name in self.pages

    def has_element(self, name: str) -> bool:
        return name in self.elements

    def page_names(self) -> List[str]:
        return list(self.pages)

    def element_names(self) -> List[str]:
        return list(self.elements)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SymbolicConfiguration":
        """Build a configuration from a loaded settings document.

        Accepts the PascalCase keys of the persisted settings format
        (``BaseUrl``, ``Pages``, ``Elements``) as well as camelCase and
        snake_case spellings.

        Raises:
            ConfigurationError: If the base URL is missing or blank, or a
                section is not a string-to-string mapping
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        base_url = _lookup(data, "baseUrl", "BaseUrl", "base_url")
        if not isinstance(base_url, str) or not base_url.strip():
            raise ConfigurationError("Configuration is missing a non-empty baseUrl")

        pages = _lookup(data, "pages", "Pages") or {}
        elements = _lookup(data, "elements", "Elements") or {}
        return cls(base_url=base_url.strip(), pages=pages, elements=elements)


def _lookup(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _frozen_table(section: str, table: Any) -> Mapping[str, str]:
    if not isinstance(table, Mapping):
        raise ConfigurationError(
            f"'{section}' must be a mapping of names to strings, "
            f"got {type(table).__name__}"
        )
    copied = {}
    for name, value in table.items():
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"'{section}' has an invalid name: {name!r}")
        if not isinstance(value, str):
            raise ConfigurationError(
                f"'{section}' entry '{name}' must be a string, got {type(value).__name__}"
            )
        copied[name] = value
    return MappingProxyType(copied)
