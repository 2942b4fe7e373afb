import logging

from .distributor import DistributorBase
from .utils import find_employee, is_allowed_add_task, tasks_with_lead_time

logger = logging.getLogger(__name__)


class PriorityDistributor(DistributorBase):
    """
    Two-pass greedy distribution.

    The first pass goes through tasks by ascending priority and puts each on
    the first employee (in the given order) that has no task of the same
    priority yet and stays under the ceiling. Tasks left over are handed to
    a fallback pass that places them first-fit over employees ordered by
    their load at the start of that pass.
    """

    def __init__(self, ceiling=None, underload_threshold=None, diagnostics=None):
        super().__init__("priority", "0",
                         ceiling=ceiling,
                         underload_threshold=underload_threshold,
                         diagnostics=diagnostics)

    def run(self, employees, tasks):
        not_distributed = self.priority_distribute(employees, tasks)
        if not_distributed:
            self.simple_distribute(employees, not_distributed)

    def priority_distribute(self, employees, tasks):
        """
        Returns tasks that found no employee, in priority order.
        """
        ceiling = self.ceiling
        sorted_tasks = sorted(tasks_with_lead_time(tasks), key=lambda t: t.priority)

        not_distributed = []
        for task in sorted_tasks:
            employee = find_employee(
                employees,
                lambda e: (not e.contains_task_with_priority(task.priority) and
                           is_allowed_add_task(task, e, ceiling)))
            if employee is None:
                not_distributed.append(task)
                continue
            logger.debug("Task %s assigned to %s", task, employee)
            employee.tasks.append(task)
        return not_distributed

    def simple_distribute(self, employees, tasks):
        """
        Returns tasks that could not be placed anywhere.

        Employees are ordered once by their current load; the order
        is not updated while tasks are being placed.
        """
        ceiling = self.ceiling
        employees = sorted(employees, key=lambda e: e.total_lead_time)

        rest = []
        for task in tasks_with_lead_time(tasks):
            employee = find_employee(employees,
                                     lambda e: is_allowed_add_task(task, e, ceiling))
            if employee is None:
                logger.debug("Task %s left undistributed", task)
                rest.append(task)
                continue
            logger.debug("Task %s assigned to %s (fallback)", task, employee)
            employee.tasks.append(task)
        return rest
