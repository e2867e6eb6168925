"""CLI tasks for gacore.

Each task inherits from :class:`BaseTask` and implements the lifecycle:
setup_algebra, execute, report.
"""

from .base import BaseTask
from .cayley import CayleyTableTask
from .product import ProductTask

TASKS = {
    'cayley': CayleyTableTask,
    'product': ProductTask,
}

__all__ = [
    "BaseTask",
    "CayleyTableTask",
    "ProductTask",
    "TASKS",
]
