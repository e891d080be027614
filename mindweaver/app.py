"""The node editor application and its command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from mindweaver.editor import NodeEditorPanel
from mindweaver.graph import Graph
from mindweaver.identifiers import UUID
from mindweaver.node import Node, NodeType
from mindweaver.pin import PinType
from mindweaver.position import Position

DEFAULT_TITLE = "MindWeaver Node Editor"


def build_sample_graph() -> Graph:
    """Return the graph the editor starts with: two sample nodes."""
    graph = Graph("MainGraph")

    start = Node(UUID.generate(), "Start Event", NodeType.EXECUTION_FLOW)
    start.position = Position(100.0, 100.0)
    start.add_output_pin("Exec Out", PinType.EXEC)
    start.add_input_pin("Condition", PinType.BOOL)
    graph.add_node(start)

    process = Node(UUID.generate(), "Process Data", NodeType.FUNCTION)
    process.position = Position(350.0, 150.0)
    process.add_input_pin("Exec In", PinType.EXEC)
    process.add_input_pin("Input Value", PinType.INT)
    process.add_output_pin("Next Exec", PinType.EXEC)
    process.add_output_pin("Result", PinType.FLOAT)
    graph.add_node(process)

    return graph


class Application:
    """Owns the graph and the editor panel, and presents the panel."""

    def __init__(
        self,
        title: str,
        width: int = 1280,
        height: int = 720,
        output: TextIO | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise RuntimeError("Failed to initialize window systems.")
        self.title = title
        self.width = width
        self.height = height
        self.graph = build_sample_graph()
        self.panel = NodeEditorPanel("Node Editor")
        self.panel.set_graph(self.graph)
        self._output = output

    def run(self) -> None:
        """Write the panel's current view to the output stream."""
        out = self._output if self._output is not None else sys.stdout
        print(f"{self.title} ({self.width}x{self.height})", file=out)
        for line in self.panel.render():
            print(line, file=out)


def main(argv: list[str] | None = None) -> int:
    """Start the editor; return the process exit status."""
    parser = argparse.ArgumentParser(prog="mindweaver", description="Node graph editor.")
    parser.add_argument("--title", default=DEFAULT_TITLE)
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    args = parser.parse_args(argv)

    try:
        Application(args.title, args.width, args.height).run()
    except Exception as exc:  # noqa: BLE001 - top-level report
        print(f"Unhandled Exception: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())