"""Connection points on graph nodes."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from mindweaver.identifiers import UUID


class PinType(enum.Enum):
    """The kind of data or control a pin carries."""

    EXEC = enum.auto()
    INT = enum.auto()
    FLOAT = enum.auto()
    BOOL = enum.auto()
    STRING = enum.auto()
    VECTOR = enum.auto()
    CLASS = enum.auto()


class PinDirection(enum.Enum):
    """Whether a pin receives or sends."""

    INPUT = enum.auto()
    OUTPUT = enum.auto()


@dataclass
class Pin:
    """A single input or output on a node."""

    id: UUID
    name: str
    type: PinType
    direction: PinDirection
    owner_node_id: UUID