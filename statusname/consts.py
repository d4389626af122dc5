from enum import IntEnum

from statusname.registry import StatusEntry, StatusRegistry

__all__ = [
    "Status",
    "STATUS_TABLE",
    "REGISTRY",
    "STATUS_CODE_TO_NAME",
    "STATUS_NAME_TO_CODE",
    "code_of",
    "name_of",
]


# Order matters: on duplicate names the first entry wins.
STATUS_TABLE = tuple(
    StatusEntry(name, code)
    for name, code in (
        ("OK", 0),
        ("NOT_FOUND", -1),
        ("OUT_OF_RANGE", -2),
        ("NO_MEMORY", -3),
        ("NOT_PERMITTED", -4),
        ("UNSPECIFIED_ERROR", -5),
        ("COMMUNICATION_ERROR", -6),
        ("TIMEOUT", -7),
        ("WOULD_BLOCK", -8),
        ("DEADLOCK", -9),
        ("BAD_FORMAT", -10),
        ("DUPLICATE", -11),
        ("BAD_PARAMETER", -12),
        ("CLOSED", -13),
        ("IO_ERROR", -14),
        ("NOT_IMPLEMENTED", -15),
        ("BUSY", -16),
        ("NOT_INITIALIZED", -17),
        ("END", -18),
        ("NOT_AVAILABLE", -19),
    )
)

REGISTRY = StatusRegistry.build(STATUS_TABLE)


class Status(IntEnum):
    # begin generated
    OK = 0
    NOT_FOUND = -1
    OUT_OF_RANGE = -2
    NO_MEMORY = -3
    NOT_PERMITTED = -4
    UNSPECIFIED_ERROR = -5
    COMMUNICATION_ERROR = -6
    TIMEOUT = -7
    WOULD_BLOCK = -8
    DEADLOCK = -9
    BAD_FORMAT = -10
    DUPLICATE = -11
    BAD_PARAMETER = -12
    CLOSED = -13
    IO_ERROR = -14
    NOT_IMPLEMENTED = -15
    BUSY = -16
    NOT_INITIALIZED = -17
    END = -18
    NOT_AVAILABLE = -19
    # end generated

    @classmethod
    def parse(cls, name):
        """
        Parses a `Status` from its name, returning `None` for unknown names.
        """
        code = REGISTRY.code_of(name or "")
        if code is None:
            return None
        return cls(code)

    def api_name(self):
        """
        Returns the canonical name of the given `Status`.
        """
        return REGISTRY.name_of(self.value)


def _check_generated():
    if dict(REGISTRY.names) != {k: v.value for k, v in Status.__members__.items()}:
        values = sorted(REGISTRY.names.items(), key=lambda kv: -kv[1])
        generated = "".join(f"    {k} = {v}\n" for k, v in values)
        raise AssertionError(
            f"Status enum does not match STATUS_TABLE!\n\n"
            f"Paste this into `class Status` in statusname/consts.py:\n\n"
            f"{generated}"
        )


_check_generated()

STATUS_CODE_TO_NAME = REGISTRY.codes
STATUS_NAME_TO_CODE = REGISTRY.names


def code_of(name):
    """Looks `name` up in the process-wide registry."""
    return REGISTRY.code_of(name)


def name_of(code):
    """Looks `code` up in the process-wide registry."""
    return REGISTRY.name_of(code)
