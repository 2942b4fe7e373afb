
class Task:

    __slots__ = ("id", "name", "priority", "lead_time", "task_type", "description")

    def __init__(self,
                 task_id,
                 priority,
                 lead_time=None,
                 name=None,
                 task_type=None,
                 description=None):
        assert priority is not None
        assert lead_time is None or lead_time >= 0

        self.id = task_id
        self.name = name
        self.priority = priority
        self.lead_time = lead_time
        self.task_type = task_type
        self.description = description

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "priority": self.priority,
            "lead_time": self.lead_time,
            "task_type": self.task_type,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(data["id"],
                   data["priority"],
                   lead_time=data.get("lead_time"),
                   name=data.get("name"),
                   task_type=data.get("task_type"),
                   description=data.get("description"))

    def simple_copy(self):
        return Task(self.id, self.priority, self.lead_time, self.name,
                    self.task_type, self.description)

    @property
    def label(self):
        if self.name:
            return self.name
        else:
            return "id={}".format(self.id)

    def validate(self):
        assert self.priority is not None
        assert self.lead_time is None or self.lead_time >= 0

    def __repr__(self):
        if self.name:
            name = " '" + self.name + "'"
        else:
            name = ""

        if self.lead_time is None:
            lead_time = " lt=?"
        else:
            lead_time = " lt={}".format(self.lead_time)

        return "<T{} id={} p={}{}>".format(name, self.id, self.priority, lead_time)
