class InvalidArgument(ValueError):
    """Raised when a range is constructed from invalid arguments.

    Attributes:
        param: Name of the offending constructor parameter
    """

    def __init__(self, message: str, param: str):
        super().__init__(message)
        self.param: str = param
