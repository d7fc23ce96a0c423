"""PSO sub module providing the exception hierarchy.

Every error raised by the package inherits from SolutionError, so a driver
can stop an optimization run with a single except clause.
"""


class SolutionError(Exception):
    """Base exception for all solution errors.

    Attributes:
        message {str} -- Human-readable error description
        suggestion {str} -- Optional hint for fixing the error
        details {dict} -- Additional context
    """

    def __init__(self, message, suggestion=None, details=None):
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self):
        msg = self.message
        if self.suggestion:
            msg += "\n\nSuggestion: {}".format(self.suggestion)
        return msg


class ArityMismatchError(SolutionError, ValueError):
    """Raised when a speed vector does not match the number of parameters."""

    def __init__(self, expected, actual):
        message = "The number of elements in speeds ({}) must match the number of parameters ({})".format(
            actual, expected)
        suggestion = "Size the speed vector from len(solution.parameters)"
        super().__init__(message, suggestion, {"expected": expected, "actual": actual})


class TypeMismatchError(SolutionError, TypeError):
    """Raised when convert_parameters returns parameters tagged for another variant."""

    def __init__(self, expected, actual):
        message = "convert_parameters returned parameters for variant {!r}, expected {!r}".format(
            actual, expected)
        suggestion = "Tag the SolutionParameters with the solution's own 'variant'"
        super().__init__(message, suggestion, {"expected": expected, "actual": actual})
