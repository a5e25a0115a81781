"""Method discovery for example groups.

Turns the methods visible on a class into Example objects. Discovery is
recomputed on every call, so methods added to any class in the hierarchy
after a subclass was created are picked up on the next query.
"""

import inspect
import logging
import operator
import types
from collections.abc import Iterable
from typing import Any

from .location import find_definition
from .metadata import build_example_metadata
from .models import Example

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_VARIADIC = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
)


def has_required_parameters(function: types.FunctionType) -> bool:
    """Whether calling ``function`` as a bound method needs more arguments.

    A function that cannot receive the instance at all counts as
    requiring parameters. Decorator wrappers are judged by their own
    signature, since the wrapper is what gets called.
    """
    try:
        signature = inspect.signature(function, follow_wrapped=False)
    except (TypeError, ValueError):
        return True

    parameters = list(signature.parameters.values())
    if not parameters:
        return True
    first = parameters[0]
    if first.kind in _POSITIONAL:
        parameters = parameters[1:]
    elif first.kind != inspect.Parameter.VAR_POSITIONAL:
        return True

    return any(
        parameter.default is inspect.Parameter.empty
        and parameter.kind not in _VARIADIC
        for parameter in parameters
    )


def is_test_method(name: str, value: Any, prefixes: Iterable[str]) -> bool:
    """Decide whether a class attribute is an xUnit-style test method.

    Qualifies when the name carries a test prefix, the method is public,
    it is a plain instance method and it takes no required arguments.
    """
    if name.startswith("_") or not name.startswith(tuple(prefixes)):
        return False
    if not isinstance(value, types.FunctionType):
        return False
    if getattr(value, "__test__", True) is False:
        logger.debug(f"Skipping {name}: marked as not a test")
        return False
    if has_required_parameters(value):
        logger.debug(f"Skipping {name}: requires parameters")
        return False
    return True


def _owner_record(group: type, name: str) -> Any:
    """Record of the first class in the MRO that owns ``name``, if any."""
    for klass in group.__mro__:
        if name in vars(klass):
            return vars(klass).get("_record")
    return None


def discover_examples(group: type) -> list[Example]:
    """Build one Example per qualifying method or fluent declaration.

    Classes are walked root-most first; each contributes its own methods
    in declaration order and then its fluent examples. A name keeps the
    position of its first appearance while the most-derived definition
    supplies the body, location and test_info.
    """
    prefixes = tuple(getattr(group, "test_method_prefixes", ()))
    group_metadata = group.metadata
    group_description = group_metadata["example_group"]["description"]

    method_names: dict[str, None] = {}
    declared: dict[str, Any] = {}
    order: list[tuple[str, str]] = []

    for klass in reversed(group.__mro__):
        for name in vars(klass):
            if name not in method_names:
                method_names[name] = None
                order.append(("method", name))
        record = vars(klass).get("_record")
        if record is None:
            continue
        for description, declaration in record.declared_examples.items():
            if description not in declared:
                order.append(("example", description))
            declared[description] = declaration

    examples = []
    for kind, key in order:
        if kind == "method":
            value = inspect.getattr_static(group, key, None)
            if not is_test_method(key, value, prefixes):
                continue
            record = _owner_record(group, key)
            info = record.method_info.get(key, {}) if record is not None else {}
            metadata = build_example_metadata(
                group_metadata,
                description=key,
                full_description=f"{group_description}#{key}",
                location=find_definition(group, key),
                info=info,
            )
            examples.append(
                Example(
                    description=key,
                    example_group=group,
                    metadata=metadata,
                    body=operator.methodcaller(key),
                    method_name=key,
                )
            )
        else:
            declaration = declared[key]
            metadata = build_example_metadata(
                group_metadata,
                description=key,
                full_description=f"{group_description} {key}",
                location=declaration.location,
                info=declaration.info,
            )
            examples.append(
                Example(
                    description=key,
                    example_group=group,
                    metadata=metadata,
                    body=declaration.body,
                )
            )
    return examples
