#---------------------------------------------------------------------------------------------------
__all__ = ()

import types

# Name of the meta-data attribute set on all class records and instance states. Keeping everything
# under a single attribute leaves the public namespace of records and instances free for the names
# declared by the user's definitions.
METADATA = '___metadata___'

#---------------------------------------------------------------------------------------------------
# Accessor for retrieving class or instance meta-data.
def data_get(obj):
    return object.__getattribute__(obj, METADATA)

def data_set(obj, data):
    object.__setattr__(obj, METADATA, data)

#---------------------------------------------------------------------------------------------------
class Member:
    def __init__(self, name, value, *pargs, **kargs):
        super().__init__(*pargs, **kargs)

        self.name = name
        self.value = value

    @property
    def is_method(self):
        return callable(self.value)

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r}, {self.value!r})'

#---------------------------------------------------------------------------------------------------
class Property:
    def __init__(self, name, fget=None, fset=None, *pargs, **kargs):
        super().__init__(*pargs, **kargs)

        self.name = name
        self.fget = fget
        self.fset = fset

#---------------------------------------------------------------------------------------------------
class Data:
    def __init__(self, name, bases, definition, *pargs, **kargs):
        super().__init__(*pargs, **kargs)

        self.name = name
        self.bases = tuple(bases)
        self.mro = None

        # Track the members in the order they were declared. Only the class's own members are held
        # here. Inherited ones are found by walking the MRO.
        self.members = tuple(Member(n, v) for n, v in definition.members.items())
        self.table = types.MappingProxyType({m.name: m for m in self.members})

        self.properties = types.MappingProxyType({
            n: Property(n, p.get('get'), p.get('set'))
            for n, p in definition.properties.items()
        })
        self.static = types.MappingProxyType(dict(definition.static))
        self.classmethods = types.MappingProxyType(dict(definition.classmethods))
        self.slots = None if definition.slots is None else tuple(definition.slots)
        self.allocator = definition.allocator

        # Cached instance for singleton records.
        self.instance = None

    def freeze(self, mro):
        if self.mro is not None:
            raise AttributeError(f'MRO of class {self.name!r} is already set.')
        self.mro = tuple(mro)

    # Iterate over the meta-data of all classes in the MRO, starting at the given position.
    def ancestry(self, start=0):
        for cls in self.mro[start:]:
            yield cls, data_get(cls)

    def find_member(self, name, start=0):
        for cls, data in self.ancestry(start):
            m = data.table.get(name)
            if m is not None:
                return cls, m
        return None, None

    def find_property(self, name):
        for cls, data in self.ancestry():
            p = data.properties.get(name)
            if p is not None:
                return cls, p
        return None, None

    # Look up an attribute read from the class record itself. For each class in the MRO, a static
    # method overrides a class method of the same name, which in turn overrides a member.
    def find_class_attr(self, name):
        for _, data in self.ancestry():
            if name in data.static:
                return 'static', data.static[name]
            if name in data.classmethods:
                return 'class', data.classmethods[name]
            m = data.table.get(name)
            if m is not None:
                return 'member', m.value
        raise KeyError(name)

    @property
    def allowed_fields(self):
        # Slots are only in effect when the class itself declares them. The allowed names are then
        # accumulated over all ancestors that also declare slots.
        if self.slots is None:
            return None

        names = {}
        for _, data in reversed(tuple(self.ancestry())):
            if data.slots is not None:
                names.update(dict.fromkeys(data.slots))
        return tuple(names)
