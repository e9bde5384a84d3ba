"""
Модели данных на базе Pydantic.

Обеспечивает:
- Валидацию координат (NaN/Inf отклоняются)
- Неизменяемость геометрии и разбиений
- Чёткие сообщения об ошибках
"""

import math
from typing import List, Tuple
from pydantic import BaseModel, Field, field_validator, ConfigDict
from splitter.constants import (
    TRIANGLE_SIDE,
    CENTER_X,
    CENTER_Y,
    EPSILON_SIMPLEX,
    SPLIT_COMPARISON_ATOL,
    DEFAULT_FACTOR_NAMES,
    FACTOR_NAME_MAX_LENGTH,
)


def _finite(v: float, field_name: str) -> float:
    val = float(v)
    if math.isnan(val) or math.isinf(val):
        raise ValueError(f"Coordinate '{field_name}' must be finite, got: {val}")
    return val


# =============================================================================
# TRIANGLE LAYOUT (Immutable)
# =============================================================================

class TriangleLayout(BaseModel):
    """
    Геометрия равностороннего треугольника в области отрисовки.

    Ось Y направлена вниз: вершина A сверху, B слева снизу, C справа снизу.
    Центр масс (center_x, center_y) соответствует разбиению (1/3, 1/3, 1/3).
    """
    model_config = ConfigDict(frozen=True)

    side: float = Field(default=TRIANGLE_SIDE, gt=0)
    center_x: float = CENTER_X
    center_y: float = CENTER_Y

    @field_validator('side', 'center_x', 'center_y', mode='before')
    @classmethod
    def validate_finite(cls, v: float, info) -> float:
        return _finite(v, info.field_name)

    # ==================== ПРОИЗВОДНЫЕ ВЕЛИЧИНЫ ====================

    @property
    def height(self) -> float:
        return self.side * math.sqrt(3) / 2

    @property
    def base_y(self) -> float:
        """Y основания (сторона BC). Центр масс лежит на h/3 выше."""
        return self.center_y + self.height / 3

    @property
    def centroid(self) -> Tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def vertex_a(self) -> Tuple[float, float]:
        """Верхняя вершина"""
        return (self.center_x, self.base_y - self.height)

    @property
    def vertex_b(self) -> Tuple[float, float]:
        """Левая нижняя вершина"""
        return (self.center_x - self.side / 2, self.base_y)

    @property
    def vertex_c(self) -> Tuple[float, float]:
        """Правая нижняя вершина"""
        return (self.center_x + self.side / 2, self.base_y)


DEFAULT_LAYOUT = TriangleLayout()


# =============================================================================
# PLANAR POINT
# =============================================================================

class PlanarPoint(BaseModel):
    """Точка (x, y) в координатах области отрисовки"""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0

    @field_validator('x', 'y', mode='before')
    @classmethod
    def validate_finite(cls, v: float, info) -> float:
        return _finite(v, info.field_name)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


# =============================================================================
# SPLIT (Immutable)
# =============================================================================

class Split(BaseModel):
    """
    Разбиение целого на три фактора (барицентрические координаты).

    Хранит значения как есть. Проверка принадлежности симплексу —
    свойство is_on_simplex; приведение к симплексу выполняет
    math_utils.project_to_simplex.

    Examples:
        >>> Split.centroid().percentages
        (33.33..., 33.33..., 33.33...)
    """
    model_config = ConfigDict(frozen=True)

    a: float = 1 / 3
    b: float = 1 / 3
    c: float = 1 / 3

    @field_validator('a', 'b', 'c', mode='before')
    @classmethod
    def validate_finite(cls, v: float, info) -> float:
        return _finite(v, info.field_name)

    # ==================== СВОЙСТВА ====================

    @property
    def total(self) -> float:
        """Сумма компонент (точное суммирование)"""
        return math.fsum([self.a, self.b, self.c])

    @property
    def is_on_simplex(self) -> bool:
        """Все компоненты >= 0 и сумма равна 1 (с допуском)"""
        return (
            min(self.a, self.b, self.c) >= -EPSILON_SIMPLEX
            and abs(self.total - 1.0) <= EPSILON_SIMPLEX
        )

    @property
    def percentages(self) -> Tuple[float, float, float]:
        return (self.a * 100, self.b * 100, self.c * 100)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.a, self.b, self.c)

    # ==================== ФАБРИЧНЫЕ МЕТОДЫ ====================

    @classmethod
    def from_tuple(cls, values) -> 'Split':
        a, b, c = values
        return cls(a=a, b=b, c=c)

    @classmethod
    def centroid(cls) -> 'Split':
        return cls(a=1 / 3, b=1 / 3, c=1 / 3)

    @classmethod
    def vertex_a(cls) -> 'Split':
        return cls(a=1.0, b=0.0, c=0.0)

    @classmethod
    def vertex_b(cls) -> 'Split':
        return cls(a=0.0, b=1.0, c=0.0)

    @classmethod
    def vertex_c(cls) -> 'Split':
        return cls(a=0.0, b=0.0, c=1.0)

    # ==================== СРАВНЕНИЕ ====================

    def is_close(self, other: 'Split', atol: float | None = None) -> bool:
        """Сравнивает разбиения с абсолютным допуском"""
        if atol is None:
            atol = SPLIT_COMPARISON_ATOL
        return all(
            abs(x - y) <= atol
            for x, y in zip(self.as_tuple(), other.as_tuple())
        )


# =============================================================================
# SPLITTER STATE
# =============================================================================

class SplitterState(BaseModel):
    """Текущее состояние разделителя: имена факторов, разбиение, drag"""
    model_config = ConfigDict(validate_assignment=True)

    names: List[str] = Field(default_factory=lambda: list(DEFAULT_FACTOR_NAMES))
    split: Split = Field(default_factory=Split.centroid)
    is_dragging: bool = False

    @field_validator('names')
    @classmethod
    def validate_names(cls, v: List[str]) -> List[str]:
        """Ровно 3 имени; пустые заменяются именами по умолчанию"""
        if len(v) != 3:
            raise ValueError(f"Expected 3 factor names, got {len(v)}")
        return [
            str(name)[:FACTOR_NAME_MAX_LENGTH] if name else DEFAULT_FACTOR_NAMES[i]
            for i, name in enumerate(v)
        ]
