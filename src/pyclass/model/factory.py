#---------------------------------------------------------------------------------------------------
__all__ = (
    'Class',
    'new_class',
    'new_singleton',
)

import logging
import threading
import types

from . import config, members, meta, mro, proxy

log = logging.getLogger(__name__)

#---------------------------------------------------------------------------------------------------
# A class record acts as the constructor for its instances. All of the class data lives in the
# meta-data attached to the record, which is how sub-classes get at the member tables and MRO of
# their bases. Records are read-only once created.
class Class:
    def __init__(self, name, definition, bases):
        for b in bases:
            if not isinstance(b, Class):
                raise TypeError(f'Base {b!r} of class {name!r} must be a class record.')

        meta.data_set(self, meta.Data(name, bases, definition))

        # The linearization is computed exactly once. A conflict aborts the construction of the
        # record, so that no unusable class is ever handed out.
        meta.data_get(self).freeze(mro.linearize(self, bases))

    def __call__(self, *pargs, **kargs):
        state = members.allocate(self, pargs, kargs)
        members.populate(state)
        members.restrict(state)

        instance = proxy.instance_new(state)
        members.initialize(instance, pargs, kargs)
        return instance

    @property
    def __name__(self):
        return meta.data_get(self).name

    @property
    def __bases__(self):
        return meta.data_get(self).bases

    @property
    def __mro__(self):
        return meta.data_get(self).mro

    @property
    def __definition__(self):
        return types.MappingProxyType({m.name: m.value for m in meta.data_get(self).members})

    def __getattr__(self, name):
        try:
            kind, value = meta.data_get(self).find_class_attr(name)
        except KeyError:
            raise AttributeError(f'Class {self.__name__!r} has no attribute {name!r}.') from None

        # Class methods receive the record they were looked up on, which need not be the one that
        # declared them.
        if kind == 'class':
            return types.MethodType(value, self)
        return value

    def __setattr__(self, name, value):
        raise AttributeError(f'Cannot set {name!r} attribute of class {self.__name__!r}.')

    def __delattr__(self, name):
        raise AttributeError(f'Cannot delete {name!r} attribute of class {self.__name__!r}.')

    def __dir__(self):
        names = {}
        for _, data in meta.data_get(self).ancestry():
            names.update(dict.fromkeys(data.static))
            names.update(dict.fromkeys(data.classmethods))
            names.update(dict.fromkeys(data.table))
        return list(names)

    def __repr__(self):
        return f'<class {self.__name__!r}>'

#---------------------------------------------------------------------------------------------------
def new_class(name='PyObject', definition=None, *bases):
    definition = config.Definition(name, definition)
    cls = Class(name, definition, bases)

    log.debug(f'Created class {name!r} with MRO ({", ".join(c.__name__ for c in cls.__mro__)}).')
    return cls

#---------------------------------------------------------------------------------------------------
# Create a class whose instance is constructed lazily on the first call of the returned getter. All
# subsequent calls return the same instance. Arguments given after the first call are ignored.
def new_singleton(name, definition=None, *bases):
    if definition is not None and '__new__' in definition:
        raise ValueError(f'[{name!r}]: Singleton definitions cannot declare __new__.')

    cls = new_class(name, definition, *bases)
    data = meta.data_get(cls)
    lock = threading.Lock()

    def get_instance(*pargs, **kargs):
        # The lock is only taken while the instance is missing.
        if data.instance is None:
            with lock:
                if data.instance is None:
                    data.instance = cls(*pargs, **kargs)
                    log.debug(f'Created singleton instance of class {name!r}.')
                    return data.instance

        if pargs or kargs:
            log.debug(f'Ignoring arguments to existing singleton instance of class {name!r}.')
        return data.instance

    get_instance.cls = cls
    get_instance.__name__ = get_instance.__qualname__ = name
    get_instance.__doc__ = f'Return the single instance of class {name!r}.'
    return get_instance
