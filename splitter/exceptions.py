"""
Исключения приложения.

Иерархия:
    SplitterError
    ├── NonFiniteCoordinateError — NaN/Inf во входных координатах
    └── ValidationError          — невалидные данные
"""


class SplitterError(Exception):
    """Базовое исключение приложения"""
    pass


class NonFiniteCoordinateError(SplitterError, ValueError):
    """Координата не является конечным числом"""
    def __init__(self, name: str, value: float):
        self.name = name
        self.value = value
        super().__init__(f"{name} cannot be NaN or Infinity: {value}")


class ValidationError(SplitterError, ValueError):
    """Невалидные входные данные"""
    def __init__(self, message: str):
        super().__init__(message)
