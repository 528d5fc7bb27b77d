"""Operation mixins, one per resource group."""

from .builds import BuildOperations
from .chains import ChainOperations
from .charts import ChartOperations
from .events import EventOperations
from .instances import InstanceOperations
from .namespaces import NamespaceOperations
from .repositories import RepositoryOperations
from .scans import ScanOperations
from .sync import SyncOperations
from .triggers import TriggerOperations

__all__ = [
    "BuildOperations",
    "ChainOperations",
    "ChartOperations",
    "EventOperations",
    "InstanceOperations",
    "NamespaceOperations",
    "RepositoryOperations",
    "ScanOperations",
    "SyncOperations",
    "TriggerOperations",
]
