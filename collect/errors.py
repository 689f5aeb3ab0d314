class CollectError(Exception):
    """base class for every error raised by collect."""
    pass


class InvalidInput(CollectError, TypeError):
    """a collection or concat was given a source it cannot iterate."""
    pass


class InvalidKey(CollectError, TypeError):
    """an explicit pair key is not a scalar."""
    pass


class InvalidRange(CollectError, ValueError):
    """a slice, take or limit range is negative or inverted."""
    pass


class NonNumericValue(CollectError, TypeError):
    """a strict numeric aggregate met a value that is not an int or float."""
    pass


class ContractViolation(CollectError, TypeError):
    """an apply callback returned something other than a collection."""
    pass
