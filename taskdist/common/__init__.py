from .task import Task  # noqa
from .employee import Employee  # noqa
from .errors import ValidationError  # noqa
