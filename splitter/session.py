"""
Сессия разделителя — логика перетаскивания без зависимостей от GUI.

Используется:
- export / main.py (отрисовка состояния)
- любой внешний слой отображения, который передаёт события указателя
"""

from typing import Optional, List, Callable, Tuple
from pydantic import ValidationError as PydanticValidationError

from splitter.models import Split, PlanarPoint, SplitterState, TriangleLayout, DEFAULT_LAYOUT
from splitter import math_utils
from splitter.constants import DEFAULT_FACTOR_NAMES, PERCENT_DECIMALS
from splitter.exceptions import ValidationError
from loguru import logger


class SplitterSession:
    """
    Хранит текущее разбиение и обрабатывает события указателя.

    Каждое событие проходит цепочку:
    (x, y) -> to_barycentric -> project_to_simplex -> новое разбиение.

    Example:
        session = SplitterSession()
        session.pointer_down(500, 300)
        session.pointer_move(520, 320)
        session.pointer_up()
        x, y = session.marker_position.as_tuple()
    """

    def __init__(
        self,
        layout: TriangleLayout = DEFAULT_LAYOUT,
        on_change: Optional[Callable[[], None]] = None
    ):
        """
        Args:
            layout: Геометрия треугольника
            on_change: Callback при изменении состояния (для перерисовки)
        """
        self._layout = layout
        self._on_change = on_change
        self._state = SplitterState()

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def layout(self) -> TriangleLayout:
        return self._layout

    @property
    def state(self) -> SplitterState:
        """
        Состояние для чтения.

        WARNING: Не модифицируйте напрямую! Используйте методы сессии.
        """
        return self._state

    @property
    def split(self) -> Split:
        return self._state.split

    @property
    def names(self) -> List[str]:
        return list(self._state.names)

    @property
    def is_dragging(self) -> bool:
        return self._state.is_dragging

    @property
    def marker_position(self) -> PlanarPoint:
        """Положение маркера на плоскости для текущего разбиения"""
        x, y = math_utils.split_to_cartesian(self._state.split, self._layout)
        return PlanarPoint(x=x, y=y)

    # =========================================================================
    # СОБЫТИЯ УКАЗАТЕЛЯ
    # =========================================================================

    def pointer_down(self, x: float, y: float) -> None:
        """
        Начало перетаскивания: маркер сразу прыгает под указатель.

        Raises:
            NonFiniteCoordinateError: x или y равны NaN/Inf (drag не начинается)
        """
        new_split = self._split_at(x, y)
        self._state.is_dragging = True
        logger.info("Drag started")
        self._apply_split(new_split)

    def pointer_move(self, x: float, y: float) -> bool:
        """
        Перемещение указателя. Без активного drag игнорируется.

        Returns:
            True, если разбиение изменилось
        """
        if not self._state.is_dragging:
            return False
        return self.update_position(x, y)

    def pointer_up(self) -> None:
        if not self._state.is_dragging:
            return
        self._state.is_dragging = False
        logger.info(f"Drag finished at {self._format_split()}")
        self._notify_change()

    def pointer_cancel(self) -> None:
        self.pointer_up()

    # =========================================================================
    # ОБНОВЛЕНИЕ
    # =========================================================================

    def update_position(self, x: float, y: float) -> bool:
        """
        Переводит точку указателя в разбиение и сохраняет его.

        Returns:
            True, если разбиение изменилось

        Raises:
            NonFiniteCoordinateError: x или y равны NaN/Inf
        """
        return self._apply_split(self._split_at(x, y))

    def set_split(self, a: float, b: float, c: float) -> bool:
        """
        Программная установка разбиения. Тройка проецируется на симплекс.

        Raises:
            ValidationError: если значения не конечны
        """
        try:
            new_split = Split.from_tuple(math_utils.project_to_simplex((a, b, c)))
        except (PydanticValidationError, ValueError) as e:
            raise ValidationError(f"Invalid split ({a}, {b}, {c}): {e}") from e
        return self._apply_split(new_split)

    def rename_factor(self, index: int, name: str) -> None:
        """
        Переименовывает фактор. Пустое имя заменяется именем по умолчанию.

        Raises:
            ValidationError: если index вне 0..2
        """
        if not 0 <= index < 3:
            raise ValidationError(f"Factor index must be 0, 1 or 2, got {index}")

        names = list(self._state.names)
        old_name = names[index]
        names[index] = name
        try:
            self._state.names = names
        except PydanticValidationError as e:
            error_msg = e.errors()[0]['msg'] if e.errors() else "Invalid data"
            raise ValidationError(str(error_msg)) from e

        logger.info(f"Renamed factor {index}: '{old_name}' -> '{self._state.names[index]}'")
        self._notify_change()

    def reset(self) -> None:
        """Центр треугольника и имена по умолчанию"""
        self._state = SplitterState(names=list(DEFAULT_FACTOR_NAMES))
        logger.info("Session reset")
        self._notify_change()

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def percent_labels(self, decimals: int = PERCENT_DECIMALS) -> List[str]:
        return [math_utils.format_percent(w, decimals) for w in self._state.split.as_tuple()]

    def fill_color(self) -> Tuple[int, int, int]:
        return math_utils.fill_color(self._state.split)

    # =========================================================================
    # ВНУТРЕННИЕ МЕТОДЫ
    # =========================================================================

    def _split_at(self, x: float, y: float) -> Split:
        new_split = math_utils.project_point(x, y, self._layout)
        logger.debug(f"Pointer ({x:.1f}, {y:.1f}) -> {new_split.as_tuple()}")
        return new_split

    def _apply_split(self, new_split: Split) -> bool:
        if new_split == self._state.split:
            return False
        self._state.split = new_split
        self._notify_change()
        return True

    def _format_split(self) -> str:
        return ", ".join(
            f"{name}={label}" for name, label in zip(self._state.names, self.percent_labels())
        )

    def _notify_change(self) -> None:
        if self._on_change:
            self._on_change()
