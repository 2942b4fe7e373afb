import logging

from ..common import ValidationError
from . import diagnostics as diag
from .utils import tasks_with_lead_time, total_lead_time

logger = logging.getLogger(__name__)


class DistributorInterface:
    """
        Generic interface of distributor
    """

    def distribute(self, employees, tasks):
        """ Distribute tasks among employees

        `employees` is a list of Employee, `tasks` a list of Task.
        Assignments are recorded by appending to `employee.tasks`;
        nothing is returned. Raises ValidationError when there is
        nothing to distribute.
        """
        raise NotImplementedError()


class DistributorBase(DistributorInterface):
    """
    Base class for distributors: validation and final accounting
    around the assignment passes implemented in `run`.
    """

    CAPACITY_CEILING = 420  # minutes, never reached by any employee
    UNDERLOAD_THRESHOLD = 360

    def __init__(self, name, version,
                 ceiling=None,
                 underload_threshold=None,
                 diagnostics=None):
        if ceiling is None:
            ceiling = self.CAPACITY_CEILING
        if underload_threshold is None:
            underload_threshold = self.UNDERLOAD_THRESHOLD
        assert ceiling > 0
        assert 0 <= underload_threshold <= ceiling

        self._name = name
        self._version = version
        self.ceiling = ceiling
        self.underload_threshold = underload_threshold
        self.diagnostics = diagnostics or diag.LoggingDiagnostics()

    @property
    def name(self):
        return self._name

    @property
    def version(self):
        return self._version

    def distribute(self, employees, tasks):
        self.validate(employees, tasks)

        logger.debug("Distribution '%s' started: %s tasks, %s employees",
                     self._name, len(tasks), len(employees))
        self.run(employees, tasks)

        assigned = sum(len(e.tasks) for e in employees)
        if assigned < len(tasks):
            self.diagnostics.warn(diag.UNDISTRIBUTED)

        logger.debug("Distribution '%s' finished: %s tasks, %s employees",
                     self._name, len(tasks), len(employees))

    def validate(self, employees, tasks):
        if not employees:
            raise ValidationError("Distribution not performed, no employees selected")
        if not tasks:
            raise ValidationError("Distribution not performed, no tasks selected")

        if len(tasks_with_lead_time(tasks)) != len(tasks):
            self.diagnostics.warn(diag.NULL_LEAD_TIME)

        total = total_lead_time(tasks)
        if total > len(employees) * self.ceiling:
            self.diagnostics.warn(diag.OVER_CAPACITY)
        if total < len(employees) * self.underload_threshold:
            self.diagnostics.warn(diag.UNDER_CAPACITY)

    def run(self, employees, tasks):
        raise NotImplementedError()

    def __repr__(self):
        return "<{} {}/{} ceiling={}>".format(
            self.__class__.__name__, self._name, self._version, self.ceiling)
