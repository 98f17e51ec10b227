"""Graph structures: nodes, relationships, paths and spatial points."""

from __future__ import annotations

from dataclasses import dataclass

from .containers import BoltList, BoltMap
from .scalars import BoltFloat, BoltInteger
from .structure import BoltStruct
from .text import BoltString
from .wire import register


@register
@dataclass
class BoltNode(BoltStruct, marker=0xB3, signature=0x4E):
    """A node with an id, its labels and its properties."""

    id: BoltInteger
    labels: BoltList
    properties: BoltMap

    def get(self, key):
        """Return the property stored under ``key``, or None when it is absent."""
        return self.properties.get(key)


@register
@dataclass
class BoltUnboundedRelation(BoltStruct, marker=0xB3, signature=0x72):
    """A relationship without its end points, as found inside a path."""

    id: BoltInteger
    typ: BoltString
    properties: BoltMap

    def get(self, key):
        """Return the property stored under ``key``, or None when it is absent."""
        return self.properties.get(key)


@register
@dataclass
class BoltRelation(BoltStruct, marker=0xB5, signature=0x52):
    """A relationship between a start node and an end node."""

    id: BoltInteger
    start_node_id: BoltInteger
    end_node_id: BoltInteger
    typ: BoltString
    properties: BoltMap

    def get(self, key):
        """Return the property stored under ``key``, or None when it is absent."""
        return self.properties.get(key)


@register
@dataclass
class BoltPath(BoltStruct, marker=0xB3, signature=0x50):
    """A path: its nodes, its relationships and the ids that sequence them."""

    nodes: BoltList
    rels: BoltList
    ids: BoltList

    def path_nodes(self) -> list[BoltNode]:
        """Return the nodes of the path, skipping anything that is not a node."""
        return [item for item in self.nodes if isinstance(item, BoltNode)]

    def path_rels(self) -> list[BoltUnboundedRelation]:
        """Return the relationships of the path."""
        return [item for item in self.rels if isinstance(item, BoltUnboundedRelation)]

    def path_ids(self) -> list[BoltInteger]:
        """Return the integer ids of the path."""
        return [item for item in self.ids if isinstance(item, BoltInteger)]


@register
@dataclass(frozen=True)
class BoltPoint2D(BoltStruct, marker=0xB3, signature=0x58):
    """A point in a two-dimensional coordinate reference system."""

    sr_id: BoltInteger
    x: BoltFloat
    y: BoltFloat


@register
@dataclass(frozen=True)
class BoltPoint3D(BoltStruct, marker=0xB4, signature=0x59):
    """A point in a three-dimensional coordinate reference system."""

    sr_id: BoltInteger
    x: BoltFloat
    y: BoltFloat
    z: BoltFloat