"""
Standalone-рендеринг разделителя без GUI.

Использует matplotlib напрямую (Figure без pyplot).
"""

import io

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Polygon
from loguru import logger

from splitter import math_utils
from splitter.models import SplitterState, TriangleLayout, DEFAULT_LAYOUT
from splitter.constants import (
    VIEWPORT_SIZE, GRID_DIVISIONS, FILL_OPACITY,
    COLOR_BACKGROUND, COLOR_TRIANGLE_FILL, COLOR_TRIANGLE_BORDER, COLOR_GRID,
    COLOR_CENTER, COLOR_MARKER, COLOR_PERCENT,
    COLOR_FACTOR_A, COLOR_FACTOR_B, COLOR_FACTOR_C,
    BORDER_WIDTH, GRID_LINE_WIDTH, CENTER_RADIUS, MARKER_RADIUS, MARKER_DOT_RADIUS,
    VERTEX_LABEL_OFFSET_A, VERTEX_LABEL_OFFSET_B, VERTEX_LABEL_OFFSET_C,
    PERCENT_LABEL_SPACING,
    ZORDER_TRIANGLE, ZORDER_GRID, ZORDER_FILL, ZORDER_CENTER, ZORDER_LABELS, ZORDER_MARKER,
)

FONT_SIZE_NAME = 14
FONT_SIZE_PERCENT = 12


class SplitterRenderer:
    """Отрисовка состояния разделителя на Axes"""

    def __init__(self, ax: Axes, layout: TriangleLayout = DEFAULT_LAYOUT):
        self.ax = ax
        self.layout = layout

    def draw(self, state: SplitterState) -> None:
        """Полная перерисовка"""
        self.ax.clear()
        self.ax.set_aspect('equal')
        self.ax.set_facecolor(COLOR_BACKGROUND)

        vertices = list(math_utils.get_vertices(self.layout))

        # 1. Треугольник
        self.ax.add_patch(Polygon(
            vertices, closed=True,
            facecolor=COLOR_TRIANGLE_FILL, edgecolor=COLOR_TRIANGLE_BORDER,
            lw=BORDER_WIDTH, joinstyle='round', zorder=ZORDER_TRIANGLE
        ))

        # 2. Сетка
        for (x1, y1), (x2, y2) in math_utils.grid_lines(GRID_DIVISIONS, self.layout):
            self.ax.plot([x1, x2], [y1, y2], color=COLOR_GRID, lw=GRID_LINE_WIDTH, zorder=ZORDER_GRID)

        # 3. Цветовой слой
        r, g, b = math_utils.fill_color(state.split)
        self.ax.add_patch(Polygon(
            vertices, closed=True,
            facecolor=(r / 255, g / 255, b / 255), alpha=FILL_OPACITY,
            edgecolor='none', zorder=ZORDER_FILL
        ))

        # 4. Центр
        self.ax.add_patch(Circle(self.layout.centroid, CENTER_RADIUS, color=COLOR_CENTER, zorder=ZORDER_CENTER))

        # 5. Подписи вершин
        self._draw_vertex_labels(state)

        # 6. Маркер
        mx, my = math_utils.split_to_cartesian(state.split, self.layout)
        self.ax.add_patch(Circle((mx, my), MARKER_RADIUS, facecolor='white',
                                 edgecolor=COLOR_MARKER, lw=3, zorder=ZORDER_MARKER))
        self.ax.add_patch(Circle((mx, my), MARKER_DOT_RADIUS, color=COLOR_MARKER, zorder=ZORDER_MARKER + 1))

        # 7. Границы: ось Y направлена вниз, как в области отрисовки
        self.ax.set_xlim(0, VIEWPORT_SIZE)
        self.ax.set_ylim(VIEWPORT_SIZE, 0)
        self.ax.axis('off')

    def _draw_vertex_labels(self, state: SplitterState) -> None:
        vertices = math_utils.get_vertices(self.layout)
        offsets = (VERTEX_LABEL_OFFSET_A, VERTEX_LABEL_OFFSET_B, VERTEX_LABEL_OFFSET_C)
        colors = (COLOR_FACTOR_A, COLOR_FACTOR_B, COLOR_FACTOR_C)
        aligns = ('center', 'right', 'left')
        percents = [math_utils.format_percent(w) for w in state.split.as_tuple()]

        for (vx, vy), (dx, dy), color, ha, name, pct in zip(
            vertices, offsets, colors, aligns, state.names, percents
        ):
            x, y = vx + dx, vy + dy
            self.ax.text(x, y, name, ha=ha, va='baseline', color=color,
                         fontsize=FONT_SIZE_NAME, fontweight='bold',
                         zorder=ZORDER_LABELS, clip_on=False)
            self.ax.text(x, y + PERCENT_LABEL_SPACING, pct, ha=ha, va='baseline',
                         color=COLOR_PERCENT, fontsize=FONT_SIZE_PERCENT,
                         zorder=ZORDER_LABELS, clip_on=False)


def _build_figure(state: SplitterState, layout: TriangleLayout,
                  figsize: tuple[float, float]) -> Figure:
    fig = Figure(figsize=figsize, facecolor=COLOR_BACKGROUND)
    ax = fig.add_subplot(111)
    SplitterRenderer(ax, layout).draw(state)
    fig.subplots_adjust(left=0.02, right=0.98, top=0.98, bottom=0.02)
    return fig


def render_to_file(
    state: SplitterState,
    filepath: str,
    *,
    layout: TriangleLayout = DEFAULT_LAYOUT,
    dpi: int = 150,
    figsize: tuple[float, float] = (7.0, 7.0),
    transparent: bool = False
) -> None:
    """
    Рендерит разделитель в файл. Формат определяется по расширению.

    Args:
        state: Состояние (имена и разбиение)
        filepath: Путь к выходному файлу
        dpi: Разрешение (для растровых форматов)
        figsize: Размер (ширина, высота) в дюймах
        transparent: Прозрачный фон
    """
    fig = _build_figure(state, layout, figsize)
    fig.savefig(
        filepath,
        dpi=dpi,
        transparent=transparent,
        facecolor=COLOR_BACKGROUND if not transparent else 'none'
    )
    logger.info(f"Rendered split to: {filepath}")


def render_to_bytes(
    state: SplitterState,
    format: str = "png",
    **kwargs
) -> bytes:
    """
    Рендерит разделитель в байты (для API/web).

    Args:
        state: Состояние
        format: Формат изображения (png, svg, pdf)
        **kwargs: layout, dpi, figsize
    """
    buffer = io.BytesIO()

    fig = _build_figure(
        state,
        kwargs.get('layout', DEFAULT_LAYOUT),
        kwargs.get('figsize', (7.0, 7.0))
    )
    fig.savefig(buffer, format=format, dpi=kwargs.get('dpi', 150))

    buffer.seek(0)
    return buffer.read()
