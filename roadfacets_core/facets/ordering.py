"""RoadFacets Ordering - Explicit Facet Ordering Document.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from roadfacets_core.errors import OrderingSpecError
from roadfacets_core.facets.tags import text_of


@dataclass(frozen=True)
class GroupSpec:
    """A named display grouping of facet keys."""
    name: str
    keys: Tuple[str, ...] = ()


@dataclass(frozen=True)
class OrderingSpec:
    """Explicit key, group and button ordering.

    Attributes:
        keys_order: Facet key sequence (``keysOrder``)
        groups: Display groups (``groups``)
        buttons_order: Explicit value sequence per key (``buttonsOrder``)
    """

    keys_order: Tuple[str, ...] = ()
    groups: Tuple[GroupSpec, ...] = ()
    buttons_order: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    def values_for(self, key: str) -> Optional[Tuple[str, ...]]:
        """Explicit button order for key, or None when not given."""
        return self.buttons_order.get(key)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON document layout."""
        return {
            "keysOrder": list(self.keys_order),
            "groups": [{"name": g.name, "keys": list(g.keys)} for g in self.groups],
            "buttonsOrder": {k: list(v) for k, v in self.buttons_order.items()},
        }

    @classmethod
    def from_dict(cls, data: Any) -> "OrderingSpec":
        """Create from a decoded ordering document.

        Raises:
            OrderingSpecError: If the document does not have the expected shape
        """
        if not isinstance(data, Mapping):
            raise OrderingSpecError(f"expected object, got {type(data).__name__}")

        keys_order = _string_list(data.get("keysOrder", []), "keysOrder")

        raw_groups = data.get("groups", [])
        if not isinstance(raw_groups, list):
            raise OrderingSpecError("groups must be a list")
        groups: List[GroupSpec] = []
        for i, group in enumerate(raw_groups):
            if not isinstance(group, Mapping):
                raise OrderingSpecError(f"groups[{i}] must be an object")
            name = group.get("name", "")
            if name is None:
                name = ""
            if not isinstance(name, str):
                raise OrderingSpecError(f"groups[{i}].name must be a string")
            groups.append(GroupSpec(name, _string_list(group.get("keys", []), f"groups[{i}].keys")))

        raw_buttons = data.get("buttonsOrder", {})
        if raw_buttons is None:
            raw_buttons = {}
        if not isinstance(raw_buttons, Mapping):
            raise OrderingSpecError("buttonsOrder must be an object")
        buttons_order = {
            str(key): _string_list(values, f"buttonsOrder[{key!r}]")
            for key, values in raw_buttons.items()
        }

        return cls(keys_order=keys_order, groups=tuple(groups), buttons_order=buttons_order)


def _string_list(value: Any, where: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise OrderingSpecError(f"{where} must be a list")
    out = []
    for item in value:
        if isinstance(item, (dict, list)) or item is None:
            raise OrderingSpecError(f"{where} must hold scalar values")
        out.append(text_of(item))
    return tuple(out)


__all__ = ["GroupSpec", "OrderingSpec"]
