
class FnError(Exception):
    """ Base class for all fnkit errors"""
    pass

class FnInvalidArgument(FnError, ValueError):
    """ Raised when an operation receives a value of the wrong shape, e.g. a non-container"""

class FnTypeMismatch(FnError, TypeError):
    """ Raised when a numeric predicate is given a non-numeric value"""
