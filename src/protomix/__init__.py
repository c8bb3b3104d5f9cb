from .delegate import protodict, prototype_of
from .object import extend, clone, make, Clonable, DataObject, DataRecord
from .object import resolve_mixin, fast_extend, extend_in_place, is_data_object
from .fn import property, has_property, has_p, method

__version__ = '0.1.0'
