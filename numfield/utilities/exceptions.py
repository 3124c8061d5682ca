class NumFieldException(Exception):
    def __init__(self, message: str=None, parameters: dict=None):
        super().__init__(message)
        self.parameters = parameters or {}



class CoercionException(NumFieldException):
    pass


class NotInvertibleException(NumFieldException):
    pass


class NoSolutionException(NumFieldException):
    pass


class NotUnivariateException(NumFieldException, ValueError):
    pass


class NotLinearException(NumFieldException, ValueError):
    pass



class InvariantViolation(AssertionError):
    """
    Raised when an algorithm that is total on valid input reaches a state it cannot be in.
    Seeing this means there is a bug, not that the input was bad.
    """
    pass
