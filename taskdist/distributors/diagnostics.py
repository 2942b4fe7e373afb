import logging

logger = logging.getLogger(__name__)

NULL_LEAD_TIME = "There are tasks without lead time"
OVER_CAPACITY = ("Total lead time of tasks exceeds the capacity of employees, "
                 "not all tasks will be distributed")
UNDER_CAPACITY = "Not all employees will be loaded for 6 hours, there are not enough tasks"
UNDISTRIBUTED = "Tasks remain undistributed"


class Diagnostics:
    """
        Sink for non-fatal signals emitted during a distribution
    """

    def warn(self, message):
        raise NotImplementedError()


class LoggingDiagnostics(Diagnostics):

    def __init__(self, log=None):
        self.log = log or logger

    def warn(self, message):
        self.log.warning("%s", message)


class CollectingDiagnostics(Diagnostics):

    def __init__(self):
        self.messages = []

    def warn(self, message):
        self.messages.append(message)

    def __contains__(self, message):
        return message in self.messages

    def clear(self):
        self.messages = []
