import pytest

from novadesk.spatial import (
    MAX_LABEL_LENGTH,
    MAX_SPATIAL_OBJECTS,
    SpatialManager,
    SpatialState,
    SpatialType,
)


@pytest.fixture
def manager():
    return SpatialManager()


def test_create_assigns_sequential_ids_and_defaults(manager):
    first = manager.create(SpatialType.WINDOW, "Main Window", 0.0, 0.0, 0.0)
    second = manager.create(SpatialType.ORB, "Launcher Orb", 1.0, 0.5, 0.2)
    assert [first.id, second.id] == [0, 1]
    assert first.orientation == (1.0, 0.0, 0.0, 0.0)
    assert first.state is SpatialState.IDLE
    assert first.portal_id is None
    assert manager.objects == [first, second]


def test_create_returns_none_when_full(manager):
    for index in range(MAX_SPATIAL_OBJECTS):
        assert manager.create(SpatialType.AGENT, f"a{index}", 0.0, 0.0, 0.0) is not None
    assert manager.create(SpatialType.AGENT, "extra", 0.0, 0.0, 0.0) is None
    assert len(manager.objects) == MAX_SPATIAL_OBJECTS


def test_label_is_truncated(manager):
    obj = manager.create(SpatialType.STREAM, "x" * 100, 0.0, 0.0, 0.0)
    assert obj.label == "x" * MAX_LABEL_LENGTH


def test_move_updates_position_and_state(manager):
    obj = manager.create(SpatialType.WINDOW, "Main Window", 0.0, 0.0, 0.0)
    obj.move(2.0, 1.0, 0.5)
    assert (obj.x, obj.y, obj.z) == (2.0, 1.0, 0.5)
    assert obj.state is SpatialState.MOVING


def test_render_format(manager):
    obj = manager.create(SpatialType.WINDOW, "Main Window", 0.0, 0.0, 0.0)
    assert obj.render() == "[Spatial] window 0 'Main Window' at (0.0,0.0,0.0) state=idle portal=-1"


def test_open_portal_links_source_only(manager):
    source = manager.create(SpatialType.WINDOW, "Main Window", 0.0, 0.0, 0.0)
    target = manager.create(SpatialType.ORB, "Launcher Orb", 1.0, 0.5, 0.2)
    manager.open_portal(source.id, target.id)
    assert source.state is SpatialState.PORTAL_OPEN
    assert source.portal_id == target.id
    assert target.state is SpatialState.IDLE
    assert target.portal_id is None
    assert source.render().endswith("state=portal_open portal=1")


@pytest.mark.parametrize("from_id,to_id", [(-1, 0), (0, 5), (5, 0)])
def test_open_portal_with_unknown_ids_is_ignored(manager, from_id, to_id):
    obj = manager.create(SpatialType.WINDOW, "Main Window", 0.0, 0.0, 0.0)
    manager.open_portal(from_id, to_id)
    assert obj.state is SpatialState.IDLE
    assert obj.portal_id is None