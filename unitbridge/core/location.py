"""Source location capture and lookup for example groups.

Locations are captured when a class or method is declared and stored in
the class's GroupRecord. Lookups walk the method resolution order so a
subclass reports where an inherited method was actually written.
"""

import inspect
import os
import sys
import types

from .models import Location

_INTERNAL_DIRS = (os.path.dirname(os.path.abspath(__file__)),)
_INTERNAL_FILES = (os.path.abspath(types.__file__),)


def _is_internal(filename: str) -> bool:
    path = os.path.abspath(filename)
    if path in _INTERNAL_FILES:
        return True
    return any(path.startswith(directory + os.sep) for directory in _INTERNAL_DIRS)


def caller_location() -> Location | None:
    """Return the first stack frame outside the adapter's own machinery.

    Used for class statements and for values that carry no code object.
    Frames from this package and from ``types.new_class`` are skipped.
    """
    frame = sys._getframe(1)
    try:
        while frame is not None:
            filename = frame.f_code.co_filename
            if filename and not filename.startswith("<") and not _is_internal(filename):
                return Location(filename, frame.f_lineno or 0)
            frame = frame.f_back
    finally:
        del frame
    return None


def unwrap_function(value: object) -> types.FunctionType | None:
    """Return the plain function behind a class attribute, if there is one."""
    if isinstance(value, (staticmethod, classmethod)):
        value = value.__func__
    try:
        value = inspect.unwrap(value)  # type: ignore[arg-type]
    except ValueError:
        return None
    if isinstance(value, types.FunctionType):
        return value
    return None


def code_location(value: object) -> Location | None:
    """Location of the ``def`` (or first decorator) line for a function value."""
    function = unwrap_function(value)
    if function is None:
        return None
    code = function.__code__
    if not code.co_filename:
        return None
    return Location(code.co_filename, code.co_firstlineno)


def find_definition(group: type, name: str) -> Location | None:
    """Find where ``name`` was defined for ``group``.

    ``name`` may be the class's own name, in which case the class
    definition location is returned. Otherwise the first class in the
    MRO that owns ``name`` decides: its recorded location if it has a
    record, else the function's code location.

    Returns:
        The Location, or None when no class in the chain defines ``name``.
    """
    if name == group.__name__:
        record = vars(group).get("_record")
        if record is not None:
            return record.location

    for klass in group.__mro__:
        if name not in vars(klass):
            continue
        record = vars(klass).get("_record")
        if record is not None and name in record.definitions:
            return record.definitions[name]
        return code_location(vars(klass)[name])
    return None
