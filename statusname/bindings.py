"""Two-function table handed to an embedding host.

The host decides under which names and calling convention the functions are
exposed; this module only binds them to a registry and checks arguments.
"""

from types import MappingProxyType

from statusname.utils import check_integer, check_string

__all__ = ["open_statusname"]


def open_statusname(registry=None):
    """Returns the `{"name2num": ..., "num2name": ...}` table for `registry`.

    Without a registry the process-wide one from `statusname.consts` is used.
    Both functions return `None` when the lookup misses.
    """
    if registry is None:
        from statusname.consts import REGISTRY as registry

    def name2num(name):
        """Converts a status name into its numeric code, or `None`."""
        return registry.code_of(check_string(name))

    def num2name(num):
        """Converts a numeric status code into its name, or `None`."""
        return registry.name_of(check_integer(num))

    return MappingProxyType({"name2num": name2num, "num2name": num2name})
