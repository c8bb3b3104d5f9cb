"""
Prototypical utilities: mixin composition and delegation based instances.

Objects are extended by copying keys from mixin sources with the right-most
precedence rule, and new objects are built by delegating to an existing one
(see `protodict`) instead of instantiating a class.
"""
import abc
import logging
from typing import *

import attrs

from .delegate import protodict


class DataObject(abc.ABC):
    """
    Interface of a mixin source that provides its keys through `to_data()`
    instead of its own items.

    Any class with a callable `to_data` attribute is recognized,
    registration or inheritance is not necessary.
    """

    @abc.abstractmethod
    def to_data(self) -> Mapping[str, Any]:
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is DataObject:
            return callable(getattr(subclass, 'to_data', None))
        return NotImplemented


@attrs.define
class DataRecord(DataObject):
    """
    Base for attrs classes used as mixins, the fields form the mixin keys.

    @attrs.define
    class Position(DataRecord):
        x: float = 0
        y: float = 0

    extend(target, Position(1, 2))    # target.x == 1, target.y == 2

    Field values are not copied, nested containers are shared with the record.
    """

    def to_data(self) -> Dict[str, Any]:
        return attrs.asdict(self, recurse=False)


MixinSource = Union[Mapping[str, Any], DataObject]


def is_data_object(subject: Any) -> bool:
    """
    Check that `subject` matches the DataObject interface.
    A protodict matches when `to_data` is reachable through its delegation chain,
    other mappings are always plain mixins.
    """
    if isinstance(subject, protodict):
        return callable(subject.get('to_data'))
    return subject is not None and isinstance(subject, DataObject)


def resolve_mixin(source: MixinSource) -> Mapping[str, Any]:
    """
    Return the mapping of keys provided by the mixin `source`.
    The result of `to_data()` is used as is, without any check.
    """
    if is_data_object(source):
        logging.debug(f"Resolving mixin data of {type(source).__name__}.")
        return source.to_data()
    return source


def _assign(target, key, value):
    if isinstance(target, MutableMapping):
        target[key] = value
    else:
        setattr(target, key, value)


def fast_extend(target, mixins: Iterable[MixinSource]):
    """
    Extends the `target` with the provided mixins, using the right-most precedence rule:
    in the case of a key conflict, the value of the last mixin wins.

    Low level, use `extend` in the user code.
    :param target: Mapping (item assignment) or any object (attribute assignment).
    :param mixins: Sequence of mappings or DataObjects.
    :return: The same `target`, modified in place.
    """
    for mixin in mixins:
        data = resolve_mixin(mixin)
        for key in data.keys():
            _assign(target, key, data[key])
    return target


extend_in_place = fast_extend


def extend(target, *mixins: MixinSource):
    """
    Extends the `target` with the provided mixins, using the right-most precedence rule.
    Values are assigned, not copied.
    """
    return fast_extend(target, mixins)


def clone(proto, *mixins: MixinSource) -> protodict:
    """
    Create a new object delegating to `proto` and extend it by the provided mixins.
    """
    return fast_extend(protodict.inherit(proto), mixins)


def make(proto, *args, **kwargs) -> protodict:
    """
    Construct a new instance delegating to `proto`.

    If the instance provides a callable `init` (own or inherited), it is called
    on the new instance with the given arguments. Its result is ignored.
    """
    instance = protodict.inherit(proto)
    init = getattr(instance, 'init', None)
    if callable(init):
        logging.debug(f"Calling init of a new instance with {len(args) + len(kwargs)} arguments.")
        init(*args, **kwargs)
    return instance


Clonable = protodict(make=make, clone=clone)
# The root object for the delegation based code. Its functions get the receiver
# as the first argument, so `obj.make(...)` and `obj.clone(...)` work on every descendant.
