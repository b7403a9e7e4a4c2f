class InvalidField(Exception):
    """
    Raised when a template model is built with a field that its type does not allow.

    Args:
        field (str): Name of the offending field, e.g. 'sub_type' or 'index'.
        message (str): Human readable reason.
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)
