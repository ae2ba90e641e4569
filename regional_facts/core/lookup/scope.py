"""Output scope and lookup table contracts, plus an in-memory implementation.

The in-memory scope renders the same CloudFormation fragments a CDK stack would
(``Mappings``, ``Fn::FindInMap``, ``Fn::Join``) without needing a construct tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union

from regional_facts.core.lookup.facts import FactRegistry, FactSource
from regional_facts.core.lookup.identity import DEFAULT_ROW_KEY_FILLER
from regional_facts.core.lookup.tokens import (
    PSEUDO_PARAMETER_PATTERN,
    PSEUDO_TOKENS,
    DeferredTokens,
    contains_marker,
)


@dataclass(frozen=True)
class FindInTable:
    """Deferred ``table[identity][index][row_key]`` lookup."""

    table_identity: str
    index_expression: str
    row_key: str


Expression = Union[str, FindInTable]


class LookupTable(Protocol):
    def set_cell(self, key: str, row_key: str, literal: str) -> None: ...

    def find_in_table(self, index_expression: str, row_key: str) -> Expression: ...


class LookupScope(Protocol):
    """What the lookup engine needs from the scope that owns the tables."""

    tokens: DeferredTokens
    facts: FactSource
    row_key_filler: str

    @property
    def region(self) -> Optional[str]: ...

    @property
    def target_partitions(self) -> Optional[Sequence[str]]: ...

    def find_child(self, identity: str) -> Optional[object]: ...

    def create_table(self, identity: str) -> LookupTable: ...

    def as_table(self, child: object) -> Optional[LookupTable]: ...


def _join_markers(value: str) -> Any:
    """Split on pseudo-parameter markers: ``svc.${AWS::Region}`` -> ``Fn::Join`` of literal and ``Ref`` parts.

    Other ``${...}`` text stays literal.
    """
    parts: List[Any] = []
    last = 0
    for match in PSEUDO_PARAMETER_PATTERN.finditer(value):
        if match.start() > last:
            parts.append(value[last : match.start()])
        parts.append({"Ref": match.group(1)})
        last = match.end()
    if last < len(value):
        parts.append(value[last:])
    if len(parts) == 1:
        return parts[0]
    return {"Fn::Join": ["", parts]}


class MappingTable:
    """Two-level ``key -> row key -> literal`` table owned by an ``OutputScope``."""

    def __init__(self, scope: "OutputScope", identity: str) -> None:
        self.identity = identity
        self._rows: Dict[str, Dict[str, str]] = {}
        scope.add_child(identity, self)

    def set_cell(self, key: str, row_key: str, literal: str) -> None:
        self._rows.setdefault(key, {})[row_key] = literal

    def get_cell(self, key: str, row_key: str) -> Optional[str]:
        return self._rows.get(key, {}).get(row_key)

    def find_in_table(self, index_expression: str, row_key: str) -> FindInTable:
        return FindInTable(self.identity, index_expression, row_key)

    @property
    def keys(self) -> List[str]:
        return sorted(self._rows)

    def to_template(self) -> Dict[str, Dict[str, str]]:
        return {key: dict(sorted(rows.items())) for key, rows in sorted(self._rows.items())}


class OutputScope:
    """In-memory output scope keeping an explicit ``identity -> child`` registry."""

    row_key_filler = DEFAULT_ROW_KEY_FILLER

    def __init__(
        self,
        name: str = "Default",
        *,
        facts: Optional[FactSource] = None,
        tokens: DeferredTokens = PSEUDO_TOKENS,
        region: Optional[str] = None,
        target_partitions: Optional[Sequence[str]] = None,
    ) -> None:
        self.name = name
        self.facts: FactSource = facts if facts is not None else FactRegistry()
        self.tokens = tokens
        self._region = region
        self._target_partitions = target_partitions
        self._children: Dict[str, object] = {}

    @property
    def region(self) -> Optional[str]:
        return self._region

    @property
    def target_partitions(self) -> Optional[Sequence[str]]:
        return self._target_partitions

    def find_child(self, identity: str) -> Optional[object]:
        return self._children.get(identity)

    def add_child(self, identity: str, child: object) -> None:
        if identity in self._children:
            raise ValueError(f"There is already a construct with name '{identity}' in {self.name}")
        self._children[identity] = child

    def create_table(self, identity: str) -> MappingTable:
        return MappingTable(self, identity)

    def as_table(self, child: object) -> Optional[MappingTable]:
        return child if isinstance(child, MappingTable) else None

    def tables(self) -> List[MappingTable]:
        return [child for child in self._children.values() if isinstance(child, MappingTable)]

    def resolve(self, expression: Expression) -> Any:
        """Render an expression the way it would appear in a CloudFormation template."""
        if isinstance(expression, FindInTable):
            return {
                "Fn::FindInMap": [
                    expression.table_identity,
                    self.resolve(expression.index_expression),
                    expression.row_key,
                ]
            }
        if isinstance(expression, str) and contains_marker(expression):
            return _join_markers(expression)
        return expression

    def to_template(self) -> Dict[str, Any]:
        mappings = {table.identity: table.to_template() for table in self.tables()}
        return {"Mappings": mappings} if mappings else {}
