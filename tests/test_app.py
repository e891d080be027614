import io

import pytest

from mindweaver.app import Application, build_sample_graph, main
from mindweaver.node import NodeType
from mindweaver.pin import PinType
from mindweaver.position import Position


def test_sample_graph_nodes():
    graph = build_sample_graph()
    assert graph.name == "MainGraph"
    assert [n.name for n in graph.nodes] == ["Start Event", "Process Data"]
    start, process = graph.nodes
    assert start.type is NodeType.EXECUTION_FLOW
    assert process.type is NodeType.FUNCTION
    assert start.position == Position(100, 100)
    assert process.position == Position(350, 150)


def test_sample_graph_pins():
    start, process = build_sample_graph().nodes
    assert [p.name for p in start.output_pins.values()] == ["Exec Out"]
    assert [p.type for p in start.input_pins.values()] == [PinType.BOOL]
    assert [p.name for p in process.input_pins.values()] == ["Exec In", "Input Value"]
    assert [p.type for p in process.output_pins.values()] == [PinType.EXEC, PinType.FLOAT]
    for pin in process.input_pins.values():
        assert pin.owner_node_id == process.id


def test_sample_graph_has_no_links():
    assert build_sample_graph().links == ()


def test_application_wires_panel_to_graph():
    app = Application("T")
    assert app.panel.graph is app.graph
    assert (app.width, app.height) == (1280, 720)


def test_application_rejects_bad_size():
    with pytest.raises(RuntimeError):
        Application("T", width=0)


def test_run_writes_panel_view():
    out = io.StringIO()
    Application("T", output=out).run()
    text = out.getvalue()
    assert "Start Event" in text
    assert "Process Data" in text


def test_main_success(capsys):
    assert main([]) == 0
    assert "MindWeaver Node Editor" in capsys.readouterr().out


def test_main_failure_reports(capsys):
    assert main(["--height", "-1"]) == 1
    assert "Unhandled Exception" in capsys.readouterr().err