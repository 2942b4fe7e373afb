import json

from taskdist.common import Employee, Task


def json_serialize(employees, tasks=None):
    if tasks is None:
        tasks = []
        seen = set()
        for e in employees:
            for t in e.tasks:
                if t.id not in seen:
                    seen.add(t.id)
                    tasks.append(t)

    return json.dumps({
        "tasks": [t.to_dict() for t in tasks],
        "employees": [e.to_dict() for e in employees],
    })


def json_deserialize(data):
    doc = json.loads(data)

    tasks = [Task.from_dict(t) for t in doc.get("tasks", ())]
    id_to_task = {t.id: t for t in tasks}

    employees = []
    for e in doc.get("employees", ()):
        employee = Employee(e["id"], name=e.get("name"), job_title=e.get("job_title"))
        for task_id in e.get("tasks", ()):
            if task_id not in id_to_task:
                raise Exception("Unknown task id {!r} assigned to employee {!r}"
                                .format(task_id, employee.id))
            employee.tasks.append(id_to_task[task_id])
        employees.append(employee)

    return employees, tasks
