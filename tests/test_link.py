import pytest

from mindweaver.identifiers import UUID
from mindweaver.link import Link


def test_link_holds_its_ends():
    link_id, start, end = UUID.generate(), UUID.generate(), UUID.generate()
    link = Link(link_id, start, end)
    assert link.id == link_id
    assert link.start_pin_id == start
    assert link.end_pin_id == end


def test_links_compare_by_value():
    link_id, start, end = UUID.generate(), UUID.generate(), UUID.generate()
    assert Link(link_id, start, end) == Link(link_id, start, end)
    assert not Link(link_id, start, end) == Link(link_id, end, start)


def test_link_is_immutable():
    link = Link(UUID.generate(), UUID.generate(), UUID.generate())
    with pytest.raises(AttributeError):
        link.start_pin_id = UUID()


def test_touches():
    start, end = UUID.generate(), UUID.generate()
    link = Link(UUID.generate(), start, end)
    assert link.touches({start})
    assert link.touches({end})
    assert not link.touches({UUID.generate()})
    assert not link.touches(set())