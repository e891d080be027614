"""The node graph: nodes, and the links between their pins."""

from __future__ import annotations

from mindweaver.identifiers import UUID
from mindweaver.link import Link
from mindweaver.node import Node


class Graph:
    """A named collection of nodes and links, kept in insertion order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._node_map: dict[UUID, Node] = {}

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def links(self) -> tuple[Link, ...]:
        return tuple(self._links)

    def add_node(self, node: Node | None) -> None:
        """Append a node; None is ignored."""
        if node is None:
            return
        self._nodes.append(node)
        self._node_map[node.id] = node

    def remove_node(self, node_id: UUID) -> None:
        """Remove every node with this id and the links attached to its pins."""
        removed = [n for n in self._nodes if n.id == node_id]
        self._nodes = [n for n in self._nodes if n.id != node_id]
        self._node_map.pop(node_id, None)

        pin_ids = {
            pin_id
            for node in removed
            for pin_id in (*node.input_pins, *node.output_pins)
        }
        if pin_ids:
            self._links = [link for link in self._links if not link.touches(pin_ids)]

    def get_node(self, node_id: UUID) -> Node | None:
        """Return the node with this id, or None."""
        return self._node_map.get(node_id)

    def add_link(self, link: Link | None) -> None:
        """Append a link; None is ignored."""
        if link is not None:
            self._links.append(link)

    def remove_link(self, link_id: UUID) -> None:
        """Remove every link with this id."""
        self._links = [link for link in self._links if link.id != link_id]

    def find_pin_owner(self, pin_id: UUID) -> Node | None:
        """Return the first node that has a pin with this id, or None."""
        return next((node for node in self._nodes if node.owns_pin(pin_id)), None)