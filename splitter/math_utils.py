import math
import numpy as np
from typing import List, Sequence, Tuple
from splitter.models import Split, TriangleLayout, DEFAULT_LAYOUT
from splitter.exceptions import NonFiniteCoordinateError, ValidationError
from splitter.constants import GRID_DIVISIONS, PERCENT_DECIMALS

Point = Tuple[float, float]
Weights = Tuple[float, float, float]


def _check_finite(value: float, name: str) -> None:
    """
    Проверка на NaN/Inf для "сырых" float параметров.

    Note:
        Split и PlanarPoint проверяют свои координаты сами.
        Эта функция для координат, приходящих напрямую от указателя.
    """
    if math.isnan(value) or math.isinf(value):
        raise NonFiniteCoordinateError(name, value)


def get_vertices(layout: TriangleLayout = DEFAULT_LAYOUT) -> Tuple[Point, Point, Point]:
    """Возвращает координаты вершин (A, B, C) в декартовой системе"""
    return layout.vertex_a, layout.vertex_b, layout.vertex_c


# =============================================================================
# ДЕКАРТОВЫ <-> БАРИЦЕНТРИЧЕСКИЕ
# =============================================================================

def to_barycentric(x: float, y: float, layout: TriangleLayout = DEFAULT_LAYOUT) -> Weights:
    """
    Перевод точки (x, y) в барицентрические веса (a, b, c).

    Аналитические формулы для равностороннего треугольника
    с вершиной A сверху (ось Y вниз):
        a = (base_y - y) / h           доля высоты над основанием BC
        c = (1 - a + 2*dx/s) / 2       dx = x - center_x
        b = (1 - a - 2*dx/s) / 2

    a + b + c == 1 для любой точки плоскости. Вне треугольника
    отдельные компоненты отрицательны, поэтому результат нужно
    проецировать (project_to_simplex).

    Raises:
        NonFiniteCoordinateError: x или y равны NaN/Inf
    """
    _check_finite(x, "x")
    _check_finite(y, "y")

    s = layout.side
    a = (layout.base_y - y) / layout.height
    dx = x - layout.center_x
    c = (1.0 - a + 2.0 * dx / s) / 2.0
    b = (1.0 - a - 2.0 * dx / s) / 2.0
    return (a, b, c)


def to_cartesian(a: float, b: float, c: float, layout: TriangleLayout = DEFAULT_LAYOUT) -> Point:
    """
    Перевод барицентрических весов в точку (x, y).

    Обратная к to_barycentric. Веса не обязаны лежать на симплексе:
    y зависит только от a, x только от (c - b).

    Raises:
        NonFiniteCoordinateError: один из весов равен NaN/Inf
    """
    _check_finite(a, "a")
    _check_finite(b, "b")
    _check_finite(c, "c")

    y = layout.base_y - a * layout.height
    x = layout.center_x + (c - b) * layout.side / 2.0
    return (x, y)


def split_to_cartesian(split: Split, layout: TriangleLayout = DEFAULT_LAYOUT) -> Point:
    return to_cartesian(split.a, split.b, split.c, layout)


# =============================================================================
# ПРОЕКЦИЯ НА СИМПЛЕКС
# =============================================================================

def project_to_simplex(v: Sequence[float]) -> Weights:
    """
    Евклидова проекция тройки чисел на симплекс {w >= 0, sum(w) = 1}.

    Алгоритм сортировки (Held-Wolfe-Crowder, Duchi et al. 2008):
    0. v сдвигается на max(v), так что наибольшая компонента равна 0.
       Проекция не меняется от добавления константы ко всем компонентам,
       а величины остаются порядка 1 даже при |v| ~ 1e16 и больше.
    1. u — компоненты по убыванию, cumsum — их накопленные суммы.
    2. rho — последний индекс k (с нуля), для которого
       u[k] + (1 - cumsum[k]) / (k + 1) > 0. После сдвига при k = 0
       это 0 + 1 > 0; если условие нигде не выполнено, rho = 0.
    3. theta = (cumsum[rho] - 1) / (rho + 1) — величина сдвига.
    4. w_i = max(v_i - theta, 0) в исходном порядке.

    Результат не зависит от порядка равных компонент при сортировке.

    Examples:
        >>> project_to_simplex((0.5, 0.5, -1.0))
        (0.5, 0.5, 0.0)

    Raises:
        ValidationError: если v содержит не 3 значения
        NonFiniteCoordinateError: если в v есть NaN/Inf
    """
    values = np.asarray(v, dtype=float)
    if values.shape != (3,):
        raise ValidationError(f"Expected exactly 3 weights, got shape {values.shape}")
    for i, val in enumerate(values):
        _check_finite(float(val), f"v[{i}]")

    values = values - values.max()

    u = np.sort(values)[::-1]
    cumsum = np.cumsum(u)
    k = np.arange(1, values.size + 1)

    active = u + (1.0 - cumsum) / k > 0
    rho = int(np.flatnonzero(active)[-1]) if active.any() else 0

    theta = (cumsum[rho] - 1.0) / (rho + 1)
    w = np.maximum(values - theta, 0.0)

    return (float(w[0]), float(w[1]), float(w[2]))


def project_point(x: float, y: float, layout: TriangleLayout = DEFAULT_LAYOUT) -> Split:
    """Точка указателя -> ближайшее валидное разбиение"""
    return Split.from_tuple(project_to_simplex(to_barycentric(x, y, layout)))


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ ОТОБРАЖЕНИЯ
# =============================================================================

def grid_lines(divisions: int = GRID_DIVISIONS,
               layout: TriangleLayout = DEFAULT_LAYOUT) -> List[Tuple[Point, Point]]:
    """
    Отрезки сетки: для каждого уровня v = i/divisions (i = 1..divisions-1)
    три линии, на которых a = v, b = v и c = v соответственно.

    Returns:
        Список пар точек ((x1, y1), (x2, y2)), всего 3 * (divisions - 1)
    """
    if divisions < 1:
        raise ValidationError(f"Grid divisions must be positive, got {divisions}")

    # Генератор вместо np.arange, чтобы не копить ошибку округления
    lines: List[Tuple[Point, Point]] = []
    for i in range(1, divisions):
        v = i / divisions
        inv = 1.0 - v
        lines.append((to_cartesian(v, inv, 0.0, layout), to_cartesian(v, 0.0, inv, layout)))
        lines.append((to_cartesian(inv, v, 0.0, layout), to_cartesian(0.0, v, inv, layout)))
        lines.append((to_cartesian(inv, 0.0, v, layout), to_cartesian(0.0, inv, v, layout)))
    return lines


def fill_color(split: Split) -> Tuple[int, int, int]:
    """Цвет заливки: каналы R, G, B пропорциональны весам A, B, C"""
    return tuple(
        int(min(255, max(0, round(w * 255))))
        for w in split.as_tuple()
    )


def format_percent(value: float, decimals: int = PERCENT_DECIMALS) -> str:
    """0.3333 -> '33.3%'"""
    return f"{value * 100:.{decimals}f}%"
