class PatternCompileError(ValueError):
    """
    Exception raised when an ignore pattern cannot be compiled.

    The whole ignore pattern is considered invalid, so this error aborts a walk before
    any directory is read.

    Attributes:
        pattern (str): The raw ignore pattern string, exactly as supplied.

    Example:
        >>> error = PatternCompileError("*.log|build")
        >>> str(error)
        'Invalid ignore pattern: *.log|build'
    """

    def __init__(self, pattern: str, reason: str = "") -> None:
        """
        Initialize the exception with the offending pattern.

        Args:
            pattern (str): The raw ignore pattern string.
            reason (str, optional): Underlying compiler message, appended when present.
        """
        self.pattern = pattern
        self.reason = reason
        message = f"Invalid ignore pattern: {pattern}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
