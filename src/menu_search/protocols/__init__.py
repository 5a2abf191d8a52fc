"""Protocol interfaces for swappable implementations.

Usage:
    ```python
    from menu_search.protocols import CatalogProvider, Scheduler

    scheduler: Scheduler = AsyncioScheduler()   # works
    scheduler: Scheduler = ManualScheduler()    # also works
    ```
"""

from .catalog_provider import CatalogProvider
from .scheduler import ScheduledHandle, Scheduler

__all__ = [
    "CatalogProvider",
    "ScheduledHandle",
    "Scheduler",
]
