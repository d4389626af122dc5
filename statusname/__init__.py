from types import FunctionType

__all__ = []
__doc__ = "Two-way lookup between status names and numeric status codes."


def _import_all():
    submodules = ["bindings", "consts", "exceptions", "registry"]
    glob = globals()
    for modname in submodules:
        mod = __import__("statusname.%s" % modname, glob, glob, ["__name__"])
        if not hasattr(mod, "__all__"):
            continue
        __all__.extend(mod.__all__)
        for name in mod.__all__:
            obj = getattr(mod, name)
            if isinstance(obj, (type, FunctionType)):
                obj.__module__ = "statusname"
            glob[name] = obj


_import_all()
del _import_all
