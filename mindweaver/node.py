"""Nodes of the visual scripting graph."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from mindweaver.identifiers import UUID
from mindweaver.pin import Pin, PinDirection, PinType
from mindweaver.position import Position


class NodeType(enum.Enum):
    """The role a node plays in a script."""

    EXECUTION_FLOW = enum.auto()
    CONTROL_FLOW = enum.auto()
    FUNCTION = enum.auto()
    VARIABLE = enum.auto()
    OPERATOR = enum.auto()


@dataclass(eq=False)
class Node:
    """A node with named input and output pins, keyed by pin id."""

    id: UUID
    name: str
    type: NodeType
    position: Position = field(default_factory=Position)
    input_pins: dict[UUID, Pin] = field(default_factory=dict)
    output_pins: dict[UUID, Pin] = field(default_factory=dict)

    def _new_pin(self, name: str, pin_type: PinType, direction: PinDirection) -> Pin:
        return Pin(UUID.generate(), name, pin_type, direction, self.id)

    def add_input_pin(self, name: str, pin_type: PinType) -> Pin:
        """Create an input pin on this node and return it."""
        pin = self._new_pin(name, pin_type, PinDirection.INPUT)
        self.input_pins[pin.id] = pin
        return pin

    def add_output_pin(self, name: str, pin_type: PinType) -> Pin:
        """Create an output pin on this node and return it."""
        pin = self._new_pin(name, pin_type, PinDirection.OUTPUT)
        self.output_pins[pin.id] = pin
        return pin

    def get_input_pin(self, pin_id: UUID) -> Pin | None:
        """Return the input pin with this id, or None."""
        return self.input_pins.get(pin_id)

    def get_output_pin(self, pin_id: UUID) -> Pin | None:
        """Return the output pin with this id, or None."""
        return self.output_pins.get(pin_id)

    def owns_pin(self, pin_id: UUID) -> bool:
        """Tell whether a pin with this id belongs to the node."""
        return pin_id in self.input_pins or pin_id in self.output_pins