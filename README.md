# mindweaver

The data model of a node-based visual scripting editor: nodes with typed
input and output pins, links between pins, and a graph that holds them. It
also has the editor logic that keeps a graph in step with what a node editor
reports, such as links that the user creates or destroys and nodes that the
user moves. The editor side refers to things by integer ids.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a graph

```python
from mindweaver.graph import Graph
from mindweaver.identifiers import UUID
from mindweaver.link import Link
from mindweaver.node import Node, NodeType
from mindweaver.pin import PinType
from mindweaver.position import Position

graph = Graph("MainGraph")

start = Node(UUID.generate(), "Start Event", NodeType.EXECUTION_FLOW)
start.position = Position(100.0, 100.0)
exec_out = start.add_output_pin("Exec Out", PinType.EXEC)
graph.add_node(start)

process = Node(UUID.generate(), "Process Data", NodeType.FUNCTION)
exec_in = process.add_input_pin("Exec In", PinType.EXEC)
graph.add_node(process)

graph.add_link(Link(UUID.generate(), exec_out.id, exec_in.id))

graph.find_pin_owner(exec_in.id)   # -> process
graph.remove_node(process.id)      # also drops the link attached to its pins
```

- `mindweaver.identifiers.UUID` is a frozen, ordered, hashable 16-byte
  identifier. `UUID()` is the nil identifier. `UUID.generate()` makes a
  random version 4 identifier. `str(uuid)` gives the 8-4-4-4-12 hexadecimal
  form. `uuid.to_imnodes_id()` gives a signed 32-bit integer for use as an
  editor id. Different identifiers can map to the same integer.
- `mindweaver.position.Position` is an immutable 2D point that defaults to
  `(0.0, 0.0)`. It supports `+` and `-` with another position, and `*` and
  `/` by a number.
- `mindweaver.pin` defines `PinType` (`EXEC`, `INT`, `FLOAT`, `BOOL`,
  `STRING`, `VECTOR`, `CLASS`), `PinDirection` (`INPUT`, `OUTPUT`) and the
  `Pin` dataclass.
- `mindweaver.node` defines `NodeType` (`EXECUTION_FLOW`, `CONTROL_FLOW`,
  `FUNCTION`, `VARIABLE`, `OPERATOR`) and `Node`. Its methods are
  `add_input_pin`, `add_output_pin`, `get_input_pin`, `get_output_pin` and
  `owns_pin`.
- `mindweaver.link.Link` connects a start pin to an end pin.
- `mindweaver.graph.Graph` keeps nodes and links in insertion order. Its
  methods are `add_node`, `remove_node`, `get_node`, `add_link`,
  `remove_link` and `find_pin_owner`. The `nodes` and `links` properties are
  read-only.

## Editor logic

`mindweaver.editor.NodeEditorPanel` works on a graph that you attach with
`set_graph`. Pass it the events that the editor reports:

- `handle_link_created(start_attr_id, end_attr_id)` first reads the ids as
  output pin to input pin. If that fails, it reads them as input pin to
  output pin. It then adds a new link and returns it. If no pins match
  either way, it raises `PinNotFoundError`.
- `handle_link_destroyed(link_attr_id)` removes the matching link and
  returns its `UUID`. It returns `None` if no link matches.
- `sync_node_positions(selected_positions)` takes a mapping from editor node
  ids to positions. It stores those positions on the nodes and returns the
  nodes that moved.
- `render()` returns a text view of the panel as a list of lines: the
  nodes, their pins and the links.

When no graph is attached, each handler does nothing and returns `None`, or
an empty list in the case of `sync_node_positions`.

## Command

```
mindweaver [--title TITLE] [--width W] [--height H]
```

The command builds the sample graph (`mindweaver.app.build_sample_graph`)
and prints the panel's text view to standard output. It uses
`mindweaver.app.Application` to do this. If the width or height is not
positive, the command reports an error and exits with status 1.

## What it does not do

- There is no graphical, interactive editor window. The command only prints
  a text view of the graph.
- Graphs are not saved to or loaded from files.
- Links are not checked for pin type or direction compatibility.