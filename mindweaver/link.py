"""Connections between pins."""

from __future__ import annotations

from dataclasses import dataclass

from mindweaver.identifiers import UUID


@dataclass(frozen=True)
class Link:
    """A connection from a start pin (usually an output) to an end pin."""

    id: UUID
    start_pin_id: UUID
    end_pin_id: UUID

    def touches(self, pin_ids: set[UUID] | frozenset[UUID]) -> bool:
        """Tell whether either end of the link is one of the given pins."""
        return self.start_pin_id in pin_ids or self.end_pin_id in pin_ids