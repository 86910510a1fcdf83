class UnityLispError(Exception):
    """ Base class for all unity-lisp errors"""
    pass

class UnitySyntaxError(UnityLispError):
    """ Raised by the reader when the source text cannot be parsed"""

    def __init__(self, message: str, line: int = 0, column: int = 0, context: str = ""):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.context = context

class UnityUsageError(UnityLispError):
    """ Raised by the file layer for a missing or invalid input path"""
