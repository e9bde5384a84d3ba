"""
Настройки приложения: геометрия треугольника, допуски, значения по умолчанию.
"""

import math

# =============================================================================
# ГЕОМЕТРИЯ
# =============================================================================

# Область отрисовки (как viewBox 0 0 1000 1000), ось Y направлена вниз
VIEWPORT_SIZE = 1000.0

TRIANGLE_SIDE = 600.0
TRIANGLE_HEIGHT = TRIANGLE_SIDE * math.sqrt(3) / 2

# Центр масс треугольника
CENTER_X = 500.0
CENTER_Y = 500.0

# =============================================================================
# ДОПУСКИ
# =============================================================================

EPSILON_SIMPLEX = 1e-9        # Допуск для sum == 1 и w >= 0
SPLIT_COMPARISON_ATOL = 1e-9  # Сравнение двух разбиений

# =============================================================================
# ФАКТОРЫ
# =============================================================================

DEFAULT_FACTOR_NAMES = ("Factor A", "Factor B", "Factor C")
FACTOR_NAME_MAX_LENGTH = 100

PERCENT_DECIMALS = 1

# Подсказка к процентам
PERCENTAGE_HINT = (
    "This percentage is determined by the dot's proximity to the corresponding "
    "triangle tip, relative to the center and other tips."
)

# =============================================================================
# ОТРИСОВКА
# =============================================================================

GRID_DIVISIONS = 5

COLOR_BACKGROUND = "#f8fafc"
COLOR_TRIANGLE_FILL = "#ffffff"
COLOR_TRIANGLE_BORDER = "#e2e8f0"
COLOR_GRID = "#f1f5f9"
COLOR_CENTER = "#cbd5e1"
COLOR_MARKER = "#0f172a"
COLOR_PERCENT = "#64748b"

COLOR_FACTOR_A = "#e11d48"  # rose
COLOR_FACTOR_B = "#059669"  # emerald
COLOR_FACTOR_C = "#0284c7"  # sky

FILL_OPACITY = 0.3

BORDER_WIDTH = 2
GRID_LINE_WIDTH = 2
CENTER_RADIUS = 4.0
MARKER_RADIUS = 16.0
MARKER_DOT_RADIUS = 5.0

# Смещения подписей вершин (dx, dy) в координатах области отрисовки
VERTEX_LABEL_OFFSET_A = (0.0, -40.0)
VERTEX_LABEL_OFFSET_B = (-40.0, 30.0)
VERTEX_LABEL_OFFSET_C = (40.0, 30.0)
PERCENT_LABEL_SPACING = 32.0

ZORDER_TRIANGLE = 1
ZORDER_GRID = 2
ZORDER_FILL = 3
ZORDER_CENTER = 4
ZORDER_LABELS = 5
ZORDER_MARKER = 10
