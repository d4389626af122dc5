__all__ = [
    "StatusNameError",
    "ConstructionError",
    "EmptyTable",
    "MalformedEntry",
    "DuplicateCode",
    "DuplicateName",
    "ArgumentError",
]

exceptions_by_code = {}


class StatusNameError(Exception):
    code = None

    def __init__(self, msg=None):
        Exception.__init__(self)
        self.message = msg

    def __str__(self):
        rv = self.message or self.__class__.__name__
        if self.code is not None:
            rv = "%s (code %d)" % (rv, self.code)
        return rv


def _by_code(cls):
    exceptions_by_code[cls.code] = cls
    return cls


@_by_code
class ConstructionError(StatusNameError):
    """The status table could not be turned into a registry."""

    code = 100


@_by_code
class EmptyTable(ConstructionError):
    code = 101


@_by_code
class MalformedEntry(ConstructionError):
    code = 102


@_by_code
class DuplicateCode(ConstructionError):
    code = 103


@_by_code
class DuplicateName(ConstructionError):
    code = 104


@_by_code
class ArgumentError(StatusNameError, TypeError):
    """A host binding was called with an argument of the wrong type."""

    code = 200
