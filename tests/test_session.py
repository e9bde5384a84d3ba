import math
import pytest
from splitter import math_utils
from splitter.session import SplitterSession
from splitter.models import Split, PlanarPoint, TriangleLayout, DEFAULT_LAYOUT
from splitter.constants import DEFAULT_FACTOR_NAMES
from splitter.exceptions import ValidationError


class TestSplitterSession:

    def setup_method(self):
        self.changes = 0
        self.session = SplitterSession(on_change=self._on_change)

    def _on_change(self):
        self.changes += 1

    def test_initial_state(self):
        """Старт: центр треугольника, имена по умолчанию, без drag"""
        assert self.session.split.is_close(Split.centroid())
        assert self.session.names == list(DEFAULT_FACTOR_NAMES)
        assert not self.session.is_dragging
        assert self.session.percent_labels() == ["33.3%", "33.3%", "33.3%"]

    def test_move_without_drag_ignored(self):
        changed = self.session.pointer_move(*DEFAULT_LAYOUT.vertex_a)
        assert changed is False
        assert self.session.split.is_close(Split.centroid())
        assert self.changes == 0

    def test_pointer_down_jumps_to_pointer(self):
        self.session.pointer_down(*DEFAULT_LAYOUT.vertex_a)
        assert self.session.is_dragging
        assert self.session.split.is_close(Split.vertex_a())
        assert self.changes == 1

    def test_full_drag_sequence(self):
        """down -> move -> up: каждое изменение уведомляет подписчика"""
        self.session.pointer_down(*DEFAULT_LAYOUT.vertex_b)
        assert self.session.pointer_move(*DEFAULT_LAYOUT.vertex_c) is True
        self.session.pointer_up()

        assert not self.session.is_dragging
        assert self.session.split.is_close(Split.vertex_c())
        assert self.changes == 3

        # После отпускания движение не влияет
        assert self.session.pointer_move(*DEFAULT_LAYOUT.vertex_a) is False
        assert self.session.split.is_close(Split.vertex_c())

    def test_same_position_is_not_a_change(self):
        self.session.pointer_down(600.0, 550.0)
        assert self.session.pointer_move(600.0, 550.0) is False
        assert self.changes == 1

    def test_drag_outside_is_projected(self):
        """Указатель вне треугольника: разбиение остаётся валидным"""
        self.session.pointer_down(500.0, 5000.0)
        split = self.session.split
        assert split.is_on_simplex
        assert split.a == 0.0
        assert math.isclose(split.b, 0.5)
        assert math.isclose(split.c, 0.5)

    def test_marker_follows_split(self):
        self.session.pointer_down(-300.0, -300.0)
        point = self.session.marker_position
        assert isinstance(point, PlanarPoint)
        x, y = point.as_tuple()
        expected = math_utils.to_cartesian(*self.session.split.as_tuple())
        assert (x, y) == expected
        # Маркер на границе, а не под указателем
        a, b, c = math_utils.to_barycentric(x, y)
        assert min(a, b, c) == pytest.approx(0.0, abs=1e-9)

    def test_pointer_cancel_ends_drag(self):
        self.session.pointer_down(500.0, 400.0)
        self.session.pointer_cancel()
        assert not self.session.is_dragging

    def test_pointer_up_without_drag_is_noop(self):
        self.session.pointer_up()
        assert self.changes == 0

    def test_set_split_projects(self):
        assert self.session.set_split(0.5, 0.5, -1.0) is True
        assert self.session.split.as_tuple() == (0.5, 0.5, 0.0)
        assert self.session.percent_labels() == ["50.0%", "50.0%", "0.0%"]

    def test_set_split_non_finite_fails(self):
        with pytest.raises(ValidationError, match="Invalid split"):
            self.session.set_split(float('nan'), 0.0, 1.0)

    def test_rename_factor(self):
        self.session.rename_factor(0, "Speed")
        assert self.session.names[0] == "Speed"
        assert self.changes == 1

    def test_rename_empty_falls_back_to_default(self):
        self.session.rename_factor(2, "Cost")
        self.session.rename_factor(2, "")
        assert self.session.names[2] == DEFAULT_FACTOR_NAMES[2]

    def test_rename_bad_index_fails(self):
        with pytest.raises(ValidationError, match="Factor index"):
            self.session.rename_factor(3, "X")
        with pytest.raises(ValidationError):
            self.session.rename_factor(-1, "X")

    def test_reset(self):
        self.session.rename_factor(1, "Quality")
        self.session.set_split(1.0, 0.0, 0.0)
        self.session.reset()
        assert self.session.names == list(DEFAULT_FACTOR_NAMES)
        assert self.session.split.is_close(Split.centroid())

    def test_fill_color(self):
        self.session.set_split(0.0, 1.0, 0.0)
        assert self.session.fill_color() == (0, 255, 0)

    def test_custom_layout(self):
        layout = TriangleLayout(side=100.0, center_x=50.0, center_y=50.0)
        session = SplitterSession(layout=layout)
        session.pointer_down(*layout.vertex_b)
        assert session.split.is_close(Split.vertex_b())
        x, y = session.marker_position.as_tuple()
        assert math.isclose(x, layout.vertex_b[0], abs_tol=1e-9)
        assert math.isclose(y, layout.vertex_b[1], abs_tol=1e-9)

    def test_non_finite_pointer_fails(self):
        """Отклонённое нажатие не начинает drag"""
        with pytest.raises(ValueError):
            self.session.pointer_down(float("inf"), 0.0)
        with pytest.raises(ValueError):
            self.session.pointer_down(float("nan"), 0.0)
        assert not self.session.is_dragging
        assert self.changes == 0
        assert self.session.pointer_move(*DEFAULT_LAYOUT.vertex_a) is False

    def test_far_pointer_is_projected(self):
        """Указатель очень далеко за вершиной A"""
        self.session.pointer_down(0.0, -1e19)
        split = self.session.split
        assert split.is_on_simplex
        assert split.a == pytest.approx(1.0, abs=1e-9)

    def test_set_split_error_is_chained(self):
        with pytest.raises(ValidationError) as exc_info:
            self.session.set_split(0.0, float("inf"), 1.0)
        assert isinstance(exc_info.value.__cause__, ValueError)
