
class Employee:
    """
    Worker receiving tasks during a distribution.

    `tasks` is owned by the caller; distributors only append to it.
    """

    def __init__(self, employee_id, name=None, job_title=None, tasks=None):
        self.id = employee_id
        self.name = name
        self.job_title = job_title
        self.tasks = list(tasks) if tasks is not None else []

    @property
    def total_lead_time(self):
        return sum(t.lead_time for t in self.tasks if t.lead_time is not None)

    def contains_task_with_priority(self, priority):
        return any(t.priority == priority for t in self.tasks)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "job_title": self.job_title,
            "tasks": [t.id for t in self.tasks],
        }

    def copy(self):
        return Employee(self.id, name=self.name, job_title=self.job_title)

    def __repr__(self):
        if self.name:
            name = " '" + self.name + "'"
        else:
            name = ""
        return "<E{} id={} tasks={} load={}>".format(
            name, self.id, len(self.tasks), self.total_lead_time)
