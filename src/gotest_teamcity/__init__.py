# Lightweight package init: avoid eager imports that can fail at console start.
__all__ = ["EventEngine", "convert", "escape"]

def __getattr__(name):
    if name == "EventEngine":
        from .runners.engine import EventEngine as _EventEngine
        return _EventEngine
    if name == "convert":
        from .runners.engine import convert as _convert
        return _convert
    if name == "escape":
        from .reporters.teamcity import escape as _escape
        return _escape
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
