"""
Object operators as functions.

Member access as plain functions, so it can be passed
where a function is expected:

    names = map(functools.partial(property, 'name'), people)
    shouters = map(functools.partial(method, 'upper'), words)
"""
from collections.abc import Mapping

from .delegate import protodict


def _check_receiver(name, obj):
    if obj is None:
        raise TypeError(f"Cannot access '{name}' of None.")


def property(name, obj):
    """
    Value of the key/attribute `name` of `obj`, including values
    resolved through the delegation chain. None if not present.

    Mappings are accessed by item, other objects by attribute.
    """
    _check_receiver(name, obj)
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def has_property(name, obj) -> bool:
    """
    Test that `name` is reachable on `obj`, either own or through the delegation chain.
    """
    _check_receiver(name, obj)
    if isinstance(obj, Mapping):
        return name in obj
    return hasattr(obj, name)


has_p = has_property


def method(name, *args):
    """
    Invoke the method `name` of the receiver with the remaining arguments.
    The receiver is the last positional argument:

        method('count', 'x', ['x', 'y', 'x']) == ['x', 'y', 'x'].count('x')

    A function stored under `name` in a plain mapping is called with the mapping
    as its first argument, the same way protodict binds it on attribute access.
    """
    if not args:
        raise TypeError(f"method() missing the receiver of '{name}'.")
    *call_args, obj = args
    _check_receiver(name, obj)
    if isinstance(obj, Mapping) and not isinstance(obj, protodict) and name in obj:
        return obj[name](obj, *call_args)
    return getattr(obj, name)(*call_args)
