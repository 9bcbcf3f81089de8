
class PlotError(Exception):
    """Base class for the errors which make the chart impossible to produce"""

class InputNotFound(PlotError):
    def __init__(self, path, reason="does not exist"):
        self.path = path
        self.reason = reason

        super().__init__(f"Input file {reason}: '{path}'")

class MalformedRow(PlotError):
    def __init__(self, line_number, line, reason):
        self.line_number = line_number
        self.line = line
        self.reason = reason

        super().__init__(f"Malformed row (line #{line_number}): {reason}: '{line}'")

class OutputWriteError(PlotError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason

        super().__init__(f"Could not write output file '{path}': {reason}")
