class ValidationError(Exception):
    """
    Raised when a distribution cannot start at all
    (no employees or no tasks were given).
    """
