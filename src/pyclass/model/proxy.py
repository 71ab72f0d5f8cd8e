#---------------------------------------------------------------------------------------------------
__all__ = ()

import json

from . import dispatch, members, meta

#---------------------------------------------------------------------------------------------------
# Names and values making up the default representation: the data fields followed by the values of
# the readable properties along the MRO. Private names (leading underscore) and callable values are
# left out.
def public_values(handle):
    state = members.state_get(handle)
    values = dict(state.fields)

    # A property hides a field of the same name, as it does on access.
    seen = set()
    for owner, data in meta.data_get(state.cls).ancestry():
        for name, prop in data.properties.items():
            if name in seen:
                continue
            seen.add(name)
            if prop.fget is None:
                values.pop(name, None)
            else:
                values[name] = prop.fget(members.bind(handle, owner))

    for k, v in values.items():
        if not k.startswith('_') and not callable(v):
            yield k, v

def represent(handle):
    entries = ', '.join(
        f'{k}: {json.dumps(v, default=str, ensure_ascii=False, separators=(",", ":"))}'
        for k, v in public_values(handle)
    )
    return f'{handle.__classname__}({{ {entries} }})'

def numeric_hook(handle):
    hook = members.find_hook(handle, '__int__')
    if hook is None:
        raise TypeError(f'{handle.__classname__!r} object does not declare __int__.')
    return hook

#---------------------------------------------------------------------------------------------------
# Looking up __init__ on an instance finds the initializer declared along the MRO, not the one of
# the handle type.
class Initializer:
    def __get__(self, obj, cls=None):
        if obj is None:
            return self

        hook = members.find_hook(obj, '__init__')
        if hook is None:
            raise AttributeError(f'{obj.__classname__!r} object does not declare __init__.')
        return hook

#---------------------------------------------------------------------------------------------------
# Any name defined on the handle class is found by Python before __getattr__ gets a chance to route
# it to the instance, so the class defines only dunder names.
#
# Handles are cheap. Several may refer to the same instance state, differing only by the super
# context they carry. Equality and hashing are therefore based on the state rather than the handle.
class Instance:
    __init__ = Initializer()

    def __getattr__(self, name):
        return members.get_attr(self, name)

    def __setattr__(self, name, value):
        members.set_attr(self, name, value)

    def __delattr__(self, name):
        members.del_attr(self, name)

    def __dir__(self):
        return members.names(self)

    @property
    def __classname__(self):
        return members.state_get(self).cls.__name__

    def __super__(self, name, *pargs, **kargs):
        return dispatch.call(self, name, *pargs, **kargs)

    def __eq__(self, other):
        if not isinstance(other, Instance):
            return NotImplemented
        return members.state_get(self) is members.state_get(other)

    def __hash__(self):
        return id(members.state_get(self))

    # Coercion only covers explicit conversions. Implicit ones (arithmetic, concatenation) are not
    # intercepted.
    def __str__(self):
        hook = members.find_hook(self, '__str__')
        if hook is None:
            return represent(self)
        return hook()

    def __format__(self, spec):
        return format(str(self), spec)

    def __repr__(self):
        return represent(self)

    def __int__(self):
        return int(numeric_hook(self)())

    def __float__(self):
        return float(numeric_hook(self)())

#---------------------------------------------------------------------------------------------------
def instance_new(state):
    return members.attach(object.__new__(Instance), state)
