#---------------------------------------------------------------------------------------------------
__all__ = ()

import collections
import collections.abc

#---------------------------------------------------------------------------------------------------
class SequenceChecker:
    def __init__(self, *item_checkers):
        self.item_checkers = item_checkers

    def apply(self, name, value):
        # A string is a sequence of characters, which is never what is meant here.
        if isinstance(value, str) or not isinstance(value, collections.abc.Sequence):
            raise TypeError(f'Value {value!r} of "{name}" configuration must be a sequence.')

        for i, v in enumerate(value):
            n = f'{name}[{i}]'
            for c in self.item_checkers:
                c.apply(n, v)

#---------------------------------------------------------------------------------------------------
class MappingChecker:
    def __init__(self, *item_checkers):
        self.item_checkers = item_checkers

    def apply(self, name, value):
        if not isinstance(value, collections.abc.Mapping):
            raise TypeError(f'Value {value!r} of "{name}" configuration must be a mapping.')

        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError(f'Key {k!r} of "{name}" configuration must be a string.')

            n = f'{name}[{k!r}]'
            for c in self.item_checkers:
                c.apply(n, v)

#---------------------------------------------------------------------------------------------------
class TypeChecker:
    def __init__(self, *types):
        self.types = types
        self.msg = ' | '.join(repr(t) for t in types)

    def apply(self, name, value):
        if not isinstance(value, self.types):
            raise TypeError(
                f'Value {value!r} of "{name}" configuration must be of type {self.msg}.')

#---------------------------------------------------------------------------------------------------
class CallableChecker:
    def __init__(self, optional=False):
        self.optional = optional

    def apply(self, name, value):
        if self.optional and value is None:
            return
        if not callable(value):
            raise TypeError(f'Value {value!r} of "{name}" configuration must be callable.')

#---------------------------------------------------------------------------------------------------
class IdentifierChecker:
    def apply(self, name, value):
        if not value.isidentifier():
            raise ValueError(
                f'Value {value!r} of "{name}" configuration must be a valid identifier.')

#---------------------------------------------------------------------------------------------------
class PropertyChecker:
    KEYS = ('get', 'set')

    def apply(self, name, value):
        if not isinstance(value, collections.abc.Mapping):
            raise TypeError(f'Value {value!r} of "{name}" configuration must be a mapping.')

        names = set(value)
        names.difference_update(self.KEYS)
        if names:
            raise ValueError(f'Unknown accessors {names!r} in "{name}" configuration.')

        for k in self.KEYS:
            CallableChecker(optional=True).apply(f'{name}[{k!r}]', value.get(k))

#---------------------------------------------------------------------------------------------------
# Every configuration has a default, which is used until a value has been assigned.
class Descriptor:
    CHECKERS = ()

    def __init__(self, default):
        self.default = default

    def _check(self, value):
        for checker in self.CHECKERS:
            checker.apply(self.name, value)

    def __set_name__(self, cls, name):
        self.cls = cls
        self.name = name
        self.attr = '___config_' + name + '___'

        # Make sure the default is valid.
        if self.default is not None:
            self._check(self.default)

        # Let the configuration class know the name.
        cls.add_name(name)

    def __get__(self, obj, cls=None):
        # Attribute looked up on the class.
        if obj is None:
            return self
        return getattr(obj, self.attr, self.default)

    def _set(self, obj, value):
        setattr(obj, self.attr, value)

    def __set__(self, obj, value):
        if hasattr(obj, self.attr):
            raise AttributeError(f'Configuration {self.name} on {self.cls!r} is already set.')

        # Validate and set the value on the instance.
        self._check(value)
        self._set(obj, value)

    def __delete__(self, obj):
        raise AttributeError(f'Configuration {self.name} on {self.cls!r} is read-only.')

#---------------------------------------------------------------------------------------------------
class Callable(Descriptor):
    CHECKERS = (
        CallableChecker(optional=True),
    )

#---------------------------------------------------------------------------------------------------
class CallableMapping(Descriptor):
    CHECKERS = (
        MappingChecker(
            CallableChecker(),
        ),
    )

    def _set(self, obj, value):
        super()._set(obj, dict(value))

#---------------------------------------------------------------------------------------------------
class PropertyMapping(Descriptor):
    CHECKERS = (
        MappingChecker(
            PropertyChecker(),
        ),
    )

    def _set(self, obj, value):
        super()._set(obj, dict(value))

#---------------------------------------------------------------------------------------------------
class IdentifierSequence(Descriptor):
    CHECKERS = (
        SequenceChecker(
            TypeChecker(str),
            IdentifierChecker(),
        ),
    )

    def _set(self, obj, value):
        super()._set(obj, tuple(value))

#---------------------------------------------------------------------------------------------------
class Config:
    ___names___ = ()

    @classmethod
    def add_name(cls, name):
        cls.___names___ += (name,)

    def __init__(self, owner, kargs):
        unknown = set(kargs).difference(self.___names___)
        if unknown:
            raise ValueError(f'[{owner!r}]: Unknown configuration {sorted(unknown)!r}.')

        # Assigning runs the descriptor's checkers. Errors are re-raised naming the owner.
        for name, value in kargs.items():
            try:
                setattr(self, name, value)
            except Exception as e:
                raise type(e)(f'[{owner!r}]: ' + str(e)) from None

#---------------------------------------------------------------------------------------------------
# Definition keys which configure the class rather than declaring instance members, mapped to the
# name of the configuration they are stored under.
SECTIONS = {
    '__new__': 'allocator',
    '__properties__': 'properties',
    '__static__': 'static',
    '__class__': 'classmethods',
    '__slots__': 'slots',
}

# Special methods which are also instance members (and are therefore inherited by sub-classes).
HOOKS = ('__init__', '__str__', '__int__')

# Names provided on every instance by the object model itself.
RESERVED = ('__super__', '__classname__')

#---------------------------------------------------------------------------------------------------
class Definition(Config):
    allocator = Callable(None)
    properties = PropertyMapping({})
    static = CallableMapping({})
    classmethods = CallableMapping({})
    slots = IdentifierSequence(None)

    def __init__(self, name, definition=None):
        if definition is None:
            definition = {}
        if not isinstance(definition, collections.abc.Mapping):
            raise TypeError(
                f'[{name!r}]: Definition {definition!r} must be a mapping, not '
                f'{type(definition).__name__!r}.')

        kargs = {}
        self.members = collections.OrderedDict()
        for key, value in definition.items():
            if not isinstance(key, str):
                raise TypeError(f'[{name!r}]: Definition key {key!r} must be a string.')

            if key in RESERVED:
                raise ValueError(f'[{name!r}]: Definition key {key!r} is reserved.')

            section = SECTIONS.get(key)
            if section is not None:
                kargs[section] = value
                continue

            if key in HOOKS and not callable(value):
                raise TypeError(f'[{name!r}]: Value {value!r} of "{key}" must be callable.')

            # Everything else becomes an instance member.
            self.members[key] = value

        super().__init__(name, kargs)

        # Members and properties share the instance namespace. A property always wins, so a member
        # of the same name could never be reached.
        names = set(self.members).intersection(self.properties)
        if names:
            raise ValueError(f'[{name!r}]: Names {names!r} declared as both member and property.')

        names = set(RESERVED).intersection(self.properties)
        if names:
            raise ValueError(f'[{name!r}]: Reserved names {names!r} declared as properties.')
