"""
Unit tests for the Collection component.
"""

import pytest
from rowgrid import make_grid, Collection, GridConfig
from rowgrid.primitives import CellEdges
from rowgrid.views import HStack, Identified, Text, VStack


def label(item):
    return Text(item.name)


@pytest.mark.unit
class TestConstruction:
    """Construction defaults and validation."""

    def test_defaults(self, letters):
        grid = make_grid(letters, label)

        assert grid.columns == 2
        assert grid.vertical_spacing == 8
        assert grid.horizontal_spacing == 8
        assert len(grid) == 5

    def test_spacing_defaults_to_configured_small_margin(self, letters):
        grid = make_grid(letters, label, config=GridConfig(small_margin=3))

        assert grid.vertical_spacing == 3
        assert grid.horizontal_spacing == 3

    def test_explicit_spacing(self, letters):
        grid = make_grid(letters, label, vertical_spacing=0, horizontal_spacing=12)

        assert grid.vertical_spacing == 0
        assert grid.horizontal_spacing == 12

    def test_zero_columns_is_configuration_error(self, letters):
        with pytest.raises(ValueError):
            make_grid(letters, label, columns=0)

    @pytest.mark.parametrize("name", ["vertical_spacing", "horizontal_spacing"])
    def test_negative_spacing_rejected(self, letters, name):
        with pytest.raises(ValueError, match=f"{name} must be >= 0"):
            make_grid(letters, label, columns=3, **{name: -50})

    @pytest.mark.parametrize("name", ["vertical_spacing", "horizontal_spacing"])
    @pytest.mark.parametrize("value", ["8", [8], True])
    def test_non_numeric_spacing_rejected(self, letters, name, value):
        with pytest.raises(TypeError, match=f"{name} must be a number"):
            make_grid(letters, label, **{name: value})

    def test_float_spacing_accepted(self, letters):
        grid = make_grid(letters, label, horizontal_spacing=2.5)

        assert grid.horizontal_spacing == 2.5

    def test_render_must_be_callable(self, letters):
        with pytest.raises(TypeError, match="render must be callable"):
            Collection(letters, "not callable")

    def test_items_without_id_rejected(self):
        with pytest.raises(TypeError, match="no 'id' attribute"):
            make_grid(["A", "B"], lambda s: Text(s))

    def test_custom_key(self):
        grid = make_grid(["A", "B"], lambda s: Text(s), key=lambda s: s)

        assert grid.keys == ["A", "B"]

    def test_unhashable_key_rejected(self, mock_item):
        items = [mock_item(id=["not", "hashable"])]

        with pytest.raises(TypeError, match="not hashable"):
            make_grid(items, label)

    def test_duplicate_keys_rejected(self, mock_item):
        items = [mock_item(id=1), mock_item(id=2), mock_item(id=1)]

        with pytest.raises(ValueError, match="duplicate identity key: 1"):
            make_grid(items, label)

    def test_data_snapshot_is_independent_of_source_list(self, letters):
        grid = make_grid(letters, label)
        letters.pop()

        assert len(grid) == 5


@pytest.mark.unit
class TestRows:
    """Partitioning through the collection."""

    def test_rows_in_row_major_order(self, letters):
        grid = make_grid(letters, label, columns=2)

        names = [[item.name for item in row] for row in grid.rows()]

        assert names == [["A", "B"], ["C", "D"], ["E"]]
        assert grid.row_count == 3

    def test_rows_recomputed_each_call(self, letters):
        grid = make_grid(letters, label, columns=2)

        first = grid.rows()
        second = grid.rows()

        assert first == second
        assert first is not second

    def test_empty_collection(self):
        grid = make_grid([], label, columns=3)

        assert grid.row_count == 0
        assert grid.body() == VStack(items=[], spacing=8)


@pytest.mark.unit
class TestBody:
    """View tree construction."""

    def test_body_structure(self, letters):
        grid = make_grid(letters, label, columns=2, horizontal_spacing=4)

        tree = grid.body()

        assert isinstance(tree, VStack)
        assert len(tree.items) == 3
        assert tree.items[0] == HStack(
            items=[Identified("A", Text("A")), Identified("B", Text("B"))],
            spacing=4,
            slots=2,
        )
        assert tree.items[2] == HStack(
            items=[Identified("E", Text("E"))], spacing=4, slots=2
        )

    def test_render_called_once_per_item_in_order(self, letters):
        calls = []

        def render(item):
            calls.append(item.name)
            return Text(item.name)

        make_grid(letters, render, columns=3).body()

        assert calls == ["A", "B", "C", "D", "E"]

    def test_render_result_must_be_view(self, letters):
        grid = make_grid(letters, lambda item: item.name)

        with pytest.raises(TypeError, match="must return a View"):
            grid.body()


@pytest.mark.unit
class TestColumnSize:
    """Column width helper."""

    def test_column_size_subtracts_spacing(self, letters):
        grid = make_grid(letters, label, columns=3, horizontal_spacing=10)

        assert grid.column_size(320) == pytest.approx(100.0)

    def test_single_column_ignores_spacing(self, letters):
        grid = make_grid(letters, label, columns=1, horizontal_spacing=10)

        assert grid.column_size(300) == pytest.approx(300.0)


@pytest.mark.unit
class TestLayout:
    """Cell frames for the collection."""

    def test_five_items_two_columns(self, letters, standard_area):
        grid = make_grid(letters, label, columns=2)

        frames = grid.layout(standard_area)

        assert set(frames) == {"A", "B", "C", "D", "E"}
        assert (frames["A"].x, frames["A"].y) == (0, 0)
        assert (frames["B"].x, frames["B"].y) == (960, 0)
        assert (frames["C"].x, frames["C"].y) == (0, 360)
        assert (frames["E"].x, frames["E"].y) == (0, 720)
        for geom in frames.values():
            assert geom.width == 960
            assert geom.height == 360

        assert frames["A"].edges == CellEdges.TOP | CellEdges.LEFT
        assert frames["B"].edges == CellEdges.TOP | CellEdges.RIGHT
        assert frames["C"].edges == CellEdges.LEFT
        assert frames["D"].edges == CellEdges.RIGHT
        assert frames["E"].edges == CellEdges.BOTTOM | CellEdges.LEFT

    def test_short_row_keeps_column_width(self, mock_item, standard_area):
        items = [mock_item(id=i, name=str(i)) for i in range(2)]
        grid = make_grid(items, label, columns=5)

        frames = grid.layout(standard_area)

        assert frames[0].width == 384
        assert frames[1].width == 384
        assert frames[1].x == 384
        assert not frames[1].edges & CellEdges.RIGHT
