import math
import pytest
from pydantic import ValidationError as PydanticValidationError
from splitter.models import Split, PlanarPoint, TriangleLayout, SplitterState, DEFAULT_LAYOUT
from splitter.constants import DEFAULT_FACTOR_NAMES, FACTOR_NAME_MAX_LENGTH


class TestSplitValidation:

    def test_nan_rejected(self):
        """NaN значения отклоняются"""
        with pytest.raises(PydanticValidationError, match="must be finite"):
            Split(a=float('nan'), b=0, c=0)

    def test_inf_rejected(self):
        """Inf значения отклоняются"""
        with pytest.raises(PydanticValidationError):
            Split(a=0, b=float('-inf'), c=0)

    def test_default_is_centroid(self):
        split = Split()
        assert split.is_close(Split.centroid())
        assert split.is_on_simplex

    def test_negative_values_accepted(self):
        """Отрицательные значения принимаются (проверка симплекса — отдельно)"""
        split = Split(a=-1, b=1, c=1)
        assert split.a == -1.0
        assert not split.is_on_simplex

    def test_not_summing_to_one(self):
        split = Split(a=0.5, b=0.5, c=0.5)
        assert math.isclose(split.total, 1.5)
        assert not split.is_on_simplex

    def test_vertices_on_simplex(self):
        for split in (Split.vertex_a(), Split.vertex_b(), Split.vertex_c()):
            assert split.is_on_simplex
            assert split.total == 1.0

    def test_from_tuple_and_percentages(self):
        split = Split.from_tuple((0.25, 0.25, 0.5))
        assert split.as_tuple() == (0.25, 0.25, 0.5)
        assert split.percentages == (25.0, 25.0, 50.0)

    def test_is_close_tolerance(self):
        assert Split(a=0.5, b=0.5, c=0.0).is_close(Split(a=0.5 + 1e-12, b=0.5, c=0.0))
        assert not Split(a=0.5, b=0.5, c=0.0).is_close(Split(a=0.4, b=0.6, c=0.0))


class TestSplitImmutability:

    def test_split_frozen(self):
        split = Split(a=1, b=0, c=0)
        with pytest.raises(Exception):  # Может быть TypeError или ValidationError
            split.a = 0.5

    def test_layout_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_LAYOUT.side = 10.0


class TestTriangleLayoutValidation:

    def test_side_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            TriangleLayout(side=0)
        with pytest.raises(PydanticValidationError):
            TriangleLayout(side=-100)

    def test_non_finite_center_rejected(self):
        with pytest.raises(PydanticValidationError, match="must be finite"):
            TriangleLayout(center_x=float('nan'))

    def test_height(self):
        layout = TriangleLayout(side=2.0)
        assert math.isclose(layout.height, math.sqrt(3))


class TestPlanarPoint:

    def test_as_tuple(self):
        assert PlanarPoint(x=1, y=2).as_tuple() == (1.0, 2.0)

    def test_nan_rejected(self):
        with pytest.raises(PydanticValidationError):
            PlanarPoint(x=0.0, y=float('nan'))


class TestSplitterStateValidation:

    def test_defaults(self):
        state = SplitterState()
        assert state.names == list(DEFAULT_FACTOR_NAMES)
        assert state.split.is_close(Split.centroid())
        assert state.is_dragging is False

    def test_wrong_name_count(self):
        """Не 3 имени отклоняется"""
        with pytest.raises(PydanticValidationError, match="Expected 3 factor names"):
            SplitterState(names=["A", "B"])

    def test_empty_name_replaced(self):
        state = SplitterState(names=["Cost", "", "Time"])
        assert state.names == ["Cost", DEFAULT_FACTOR_NAMES[1], "Time"]

    def test_long_name_truncated(self):
        state = SplitterState(names=["X" * 500, "B", "C"])
        assert len(state.names[0]) == FACTOR_NAME_MAX_LENGTH

    def test_assignment_validated(self):
        state = SplitterState()
        with pytest.raises(PydanticValidationError):
            state.names = ["only one"]
