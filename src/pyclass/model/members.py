#---------------------------------------------------------------------------------------------------
__all__ = ()

import collections
import collections.abc
import types

from . import meta
from .config import RESERVED
from .errors import InvalidAllocatorResult

#---------------------------------------------------------------------------------------------------
# The durable part of an instance. Any number of handles (see proxy.Instance) may refer to the same
# state, each carrying it's own super context.
class State:
    def __init__(self, cls, *pargs, **kargs):
        super().__init__(*pargs, **kargs)

        self.cls = cls
        self.fields = collections.OrderedDict()

        # Names of the fields which may be set on a closed state. None when open.
        self.allowed = None

#---------------------------------------------------------------------------------------------------
def state_get(handle):
    return meta.data_get(handle)

def context_get(handle):
    return object.__getattribute__(handle, '___context___')

# Point a bare handle at a state. Handles are built without calling their type, as __init__ on an
# instance is the user's initializer.
def attach(handle, state, context=None):
    meta.data_set(handle, state)
    object.__setattr__(handle, '___context___', context)
    return handle

# Create a new handle onto the same state, with the super context set to the given class.
def bind(handle, cls):
    return attach(object.__new__(type(handle)), state_get(handle), cls)

#---------------------------------------------------------------------------------------------------
def allocate(cls, pargs, kargs):
    data = meta.data_get(cls)
    state = State(cls)
    if data.allocator is None:
        return state

    result = data.allocator(cls, *pargs, **kargs)
    if result is None:
        return state

    # The allocator pre-populated the fields, which must be named like any other attribute.
    if isinstance(result, collections.abc.Mapping):
        if not all(isinstance(k, str) and k.isidentifier() for k in result):
            raise InvalidAllocatorResult(cls, result)
        state.fields.update(result)
        return state

    # The allocator handed back an existing instance of the class.
    try:
        other = meta.data_get(result)
    except AttributeError:
        other = None
    if isinstance(other, State) and other.cls is cls:
        return other

    raise InvalidAllocatorResult(cls, result)

#---------------------------------------------------------------------------------------------------
def populate(state):
    data = meta.data_get(state.cls)

    # Determine which member wins for each name. The first class in the MRO declaring a name hides
    # the declarations of all subsequent classes, be it a method or a field.
    winners = collections.OrderedDict()
    for owner, odata in data.ancestry():
        for m in odata.members:
            winners.setdefault(m.name, (owner, m))

    # Inherited fields don't replace anything the allocator has already set.
    for owner, m in winners.values():
        if owner is state.cls or m.is_method or m.name in state.fields:
            continue
        state.fields[m.name] = m.value

    # The class's own fields always take precedence.
    for m in data.members:
        if not m.is_method:
            state.fields[m.name] = m.value

#---------------------------------------------------------------------------------------------------
def restrict(state):
    allowed = meta.data_get(state.cls).allowed_fields
    if allowed is None:
        return

    for name in tuple(state.fields):
        if name not in allowed:
            del state.fields[name]
    state.allowed = frozenset(allowed)

#---------------------------------------------------------------------------------------------------
# Only the class's own initializer runs on construction. An inherited one is reached by way of
# __super__.
def initialize(handle, pargs, kargs):
    cls = state_get(handle).cls
    m = meta.data_get(cls).table.get('__init__')
    if m is not None:
        m.value(bind(handle, cls), *pargs, **kargs)

#---------------------------------------------------------------------------------------------------
# Find a special method (such as __str__) declared along the MRO and bind it to the handle.
def find_hook(handle, name):
    data = meta.data_get(state_get(handle).cls)
    owner, m = data.find_member(name)
    if m is None or not m.is_method:
        return None
    return types.MethodType(m.value, bind(handle, owner))

#---------------------------------------------------------------------------------------------------
# Attribute lookup on an instance. Properties shadow fields, which in turn shadow methods.
def get_attr(handle, name):
    state = state_get(handle)
    data = meta.data_get(state.cls)

    owner, prop = data.find_property(name)
    if prop is not None:
        if prop.fget is None:
            raise AttributeError(f'Property {name!r} of {state.cls!r} is write-only.')
        return prop.fget(bind(handle, owner))

    try:
        return state.fields[name]
    except KeyError:
        ...

    owner, m = data.find_member(name)
    if m is not None and m.is_method:
        return types.MethodType(m.value, bind(handle, owner))

    raise AttributeError(f'{state.cls.__name__!r} object has no attribute {name!r}.')

def set_attr(handle, name, value):
    state = state_get(handle)
    data = meta.data_get(state.cls)

    owner, prop = data.find_property(name)
    if prop is not None:
        if prop.fset is None:
            raise AttributeError(f'Property {name!r} of {state.cls!r} is read-only.')
        prop.fset(bind(handle, owner), value)
        return

    if name in RESERVED:
        raise AttributeError(f'Cannot set reserved {name!r} attribute of {state.cls!r}.')

    if state.allowed is not None and name not in state.allowed:
        raise AttributeError(f'{state.cls.__name__!r} object has no slot {name!r}.')

    state.fields[name] = value

def del_attr(handle, name):
    state = state_get(handle)
    data = meta.data_get(state.cls)

    _, prop = data.find_property(name)
    if prop is not None:
        raise AttributeError(f'Cannot delete property {name!r} of {state.cls!r}.')

    try:
        del state.fields[name]
    except KeyError:
        raise AttributeError(f'{state.cls.__name__!r} object has no field {name!r}.') from None

#---------------------------------------------------------------------------------------------------
def names(handle):
    state = state_get(handle)
    data = meta.data_get(state.cls)

    result = dict.fromkeys(state.fields)
    for _, odata in data.ancestry():
        result.update(dict.fromkeys(m.name for m in odata.members if m.is_method))
        result.update(dict.fromkeys(odata.properties))
    result.update(dict.fromkeys(RESERVED))
    return list(result)
