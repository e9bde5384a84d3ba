"""
Ternary Splitter - разбиение 100% на три фактора точкой в треугольнике.

Headless API:
    from splitter import SplitterSession

    s = SplitterSession()
    s.pointer_down(500, 300)
    s.pointer_up()
    print(s.percent_labels())
"""

from splitter.math_utils import to_barycentric, to_cartesian, project_to_simplex
from splitter.models import Split, TriangleLayout, DEFAULT_LAYOUT
from splitter.session import SplitterSession
from splitter.version import get_app_version

__version__ = get_app_version()
__all__ = [
    "to_barycentric",
    "to_cartesian",
    "project_to_simplex",
    "Split",
    "TriangleLayout",
    "DEFAULT_LAYOUT",
    "SplitterSession",
    "__version__",
]
