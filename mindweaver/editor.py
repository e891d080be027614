"""Editor panel logic: keeps a graph in step with an integer-id node editor."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from mindweaver.graph import Graph
from mindweaver.identifiers import UUID
from mindweaver.link import Link
from mindweaver.node import Node
from mindweaver.pin import Pin, PinDirection
from mindweaver.position import Position

_log = logging.getLogger(__name__)


class PinNotFoundError(LookupError):
    """Raised when an editor attribute id matches no pin in the graph."""


class NodeEditorPanel:
    """A named editor panel operating on one graph.

    The editor side refers to nodes, pins and links by small integer ids
    derived from their UUIDs; this panel translates editor events back
    into changes on the graph.
    """

    def __init__(self, name: str = "Node Editor") -> None:
        self.name = name
        self.graph: Graph | None = None

    def set_graph(self, graph: Graph | None) -> None:
        """Attach the graph the panel works on (None detaches it)."""
        self.graph = graph

    @staticmethod
    def _editor_id(uuid: UUID) -> int:
        return uuid.to_imnodes_id()

    def _pins(self, direction: PinDirection) -> Iterable[Pin]:
        assert self.graph is not None
        for node in self.graph.nodes:
            pins = node.output_pins if direction is PinDirection.OUTPUT else node.input_pins
            yield from pins.values()

    def _find_pin_id(self, attr_id: int, direction: PinDirection) -> UUID | None:
        return next(
            (pin.id for pin in self._pins(direction) if self._editor_id(pin.id) == attr_id),
            None,
        )

    def handle_link_created(self, start_attr_id: int, end_attr_id: int) -> Link | None:
        """Add a link for a connection the editor reports; return it.

        The connection is first read as output-to-input, then as
        input-to-output. Returns None when no graph is attached and raises
        PinNotFoundError when the pins cannot be found either way.
        """
        if self.graph is None:
            return None

        start = self._find_pin_id(start_attr_id, PinDirection.OUTPUT)
        end = self._find_pin_id(end_attr_id, PinDirection.INPUT)
        if start is None or end is None:
            start = self._find_pin_id(start_attr_id, PinDirection.INPUT)
            end = self._find_pin_id(end_attr_id, PinDirection.OUTPUT)
        if start is None or end is None:
            raise PinNotFoundError(
                f"could not find pins for new link ({start_attr_id} -> {end_attr_id})"
            )

        link = Link(UUID.generate(), start, end)
        self.graph.add_link(link)
        _log.info("link created: %s", link.id)
        return link

    def handle_link_destroyed(self, link_attr_id: int) -> UUID | None:
        """Remove the link the editor reports as destroyed; return its id.

        Returns None when no graph is attached or no link matches.
        """
        if self.graph is None:
            return None

        link = next(
            (l for l in self.graph.links if self._editor_id(l.id) == link_attr_id),
            None,
        )
        if link is None:
            _log.info("link with editor id %d not found", link_attr_id)
            return None
        self.graph.remove_link(link.id)
        _log.info("link destroyed: %s", link.id)
        return link.id

    def sync_node_positions(self, selected_positions: Mapping[int, Position]) -> list[Node]:
        """Copy editor positions of selected nodes onto the graph.

        ``selected_positions`` maps editor node ids to grid positions.
        Returns the nodes whose stored position changed.
        """
        if self.graph is None:
            return []

        moved: list[Node] = []
        for node_attr_id, raw_position in selected_positions.items():
            position = (
                raw_position if isinstance(raw_position, Position) else Position(*raw_position)
            )
            node = next(
                (n for n in self.graph.nodes if self._editor_id(n.id) == node_attr_id),
                None,
            )
            if node is not None and node.position != position:
                node.position = position
                moved.append(node)
        return moved

    def render(self) -> list[str]:
        """Return a text view of the panel: nodes, their pins and links."""
        if self.graph is None:
            return [self.name, "No graph loaded."]

        lines = [f"{self.name}: {self.graph.name}"]
        pin_names: dict[UUID, str] = {}
        for node in self.graph.nodes:
            pos = node.position
            lines.append(f"[{node.name}] {node.type.name} at ({pos.x:g}, {pos.y:g})")
            for pin in node.input_pins.values():
                lines.append(f"  -> {pin.name} ({pin.type.name})")
                pin_names[pin.id] = f"{node.name}.{pin.name}"
            for pin in node.output_pins.values():
                lines.append(f"  <- {pin.name} ({pin.type.name})")
                pin_names[pin.id] = f"{node.name}.{pin.name}"
        for link in self.graph.links:
            start = pin_names.get(link.start_pin_id, str(link.start_pin_id))
            end = pin_names.get(link.end_pin_id, str(link.end_pin_id))
            lines.append(f"link {start} => {end}")
        return lines