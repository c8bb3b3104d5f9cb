"""
Delegation link: a dictionary with a parent consulted on lookup miss.
"""
import inspect
import types
from typing import *


class protodict(dict):
    """
    dot.notation access to dictionary items with fallback to a delegate.

    Own keys live in the dict itself. A key missing here is looked up in
    the `delegate` (any mapping, typically another protodict), recursively.
    Enumeration (keys, items, len, ==) sees own keys only, while item access,
    `get` and `in` see the whole delegation chain.

    Plain functions reached through attribute access are bound to the receiver,
    so a function stored on an ancestor gets the descendant as its first argument:

        root = protodict(greet=lambda self: f"hi {self.name}")
        child = protodict.inherit(root)
        child.name = "bob"
        child.greet()   # "hi bob"

    Attribute access to names of the dict methods (keys, get, update, ...)
    returns the method; use item access for such keys.
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    _delegate = None
    # parent consulted on lookup miss, set per instance by `inherit`

    @classmethod
    def inherit(cls, delegate: Optional[Mapping]) -> 'protodict':
        """
        Create an empty object delegating to `delegate`.
        The delegate is only referenced, never modified.
        """
        if delegate is not None and not isinstance(delegate, Mapping):
            raise TypeError(f"inherit: delegate must be a mapping or None, got {type(delegate).__name__}.")
        obj = cls()
        object.__setattr__(obj, '_delegate', delegate)
        return obj

    def __missing__(self, key):
        delegate = self._delegate
        if delegate is None:
            raise KeyError(key)
        return delegate[key]

    def __contains__(self, key):
        if dict.__contains__(self, key):
            return True
        delegate = self._delegate
        return delegate is not None and key in delegate

    def get(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            return default

    def __getattr__(self, item):
        try:
            value = self[item]
        except KeyError:
            return self.__getattribute__(item)
        if inspect.isfunction(value):
            return types.MethodType(value, self)
        return value

    def __repr__(self):
        return f"protodict({dict.__repr__(self)})"


def prototype_of(obj: Any) -> Optional[Mapping]:
    """
    Return the delegate of `obj`, None for roots and objects without a delegation link.
    """
    if isinstance(obj, protodict):
        return obj._delegate
    return None
