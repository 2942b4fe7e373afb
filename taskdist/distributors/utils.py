from typing import Callable, Iterable, List, Optional

from ..common import Employee, Task


def is_allowed_add_task(task: Task, employee: Employee, ceiling) -> bool:
    total = employee.total_lead_time
    return total < ceiling and total + task.lead_time < ceiling


def find_employee(employees: Iterable[Employee],
                  predicate: Callable[[Employee], bool]) -> Optional[Employee]:
    for employee in employees:
        if predicate(employee):
            return employee
    return None


def total_lead_time(tasks: Iterable[Task]):
    return sum(t.lead_time for t in tasks if t.lead_time is not None)


def tasks_with_lead_time(tasks: Iterable[Task]) -> List[Task]:
    return [t for t in tasks if t.lead_time is not None]


def undistributed_tasks(employees: Iterable[Employee], tasks: Iterable[Task]) -> List[Task]:
    """
    Returns tasks (in the given order) that are not held by any employee.
    """
    assigned = set(id(t) for e in employees for t in e.tasks)
    return [t for t in tasks if id(t) not in assigned]
