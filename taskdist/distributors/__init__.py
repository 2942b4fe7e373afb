from .distributor import DistributorInterface, DistributorBase  # noqa
from .diagnostics import Diagnostics, LoggingDiagnostics, CollectingDiagnostics  # noqa
from .priority import PriorityDistributor  # noqa
