import numpy as np


def employee_loads(employees):
    return np.array([e.total_lead_time for e in employees], dtype=float)


def load_summary(employees, ceiling=420):
    loads = employee_loads(employees)
    if not len(loads):
        return {"total": 0, "mean": 0, "std": 0, "min": 0, "max": 0, "utilization": 0}
    return {
        "total": loads.sum(),
        "mean": loads.mean(),
        "std": loads.std(),
        "min": loads.min(),
        "max": loads.max(),
        "utilization": loads.sum() / (len(loads) * ceiling),
    }


def assignment_frame(employees):
    """
    One row per (employee, task) assignment, in employee order.
    """
    from pandas import DataFrame

    rows = [(e.id, t.id, t.priority, t.lead_time)
            for e in employees
            for t in e.tasks]
    return DataFrame(rows, columns=["employee", "task", "priority", "lead_time"])
