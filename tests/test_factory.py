import logging

import pytest

from pyclass import Class, Instance, new_class

#---------------------------------------------------------------------------------------------------
def counter_from_initial(cls, initial):
    instance = cls()
    instance.value = initial
    return instance

def counter_set_value(self, value):
    if not isinstance(value, int):
        raise TypeError('Must be a number')
    self._value = value

Counter = new_class('Counter', {
    '__init__': lambda self: setattr(self, '_value', 0),
    '__str__': lambda self: f'Counter(value={self.value})',
    '__static__': {
        'reset_all': lambda: 'All counters reset!',
    },
    '__class__': {
        'from_initial': counter_from_initial,
    },
    'kind': 'counter',
    'increment': lambda self: setattr(self, '_value', self._value + 1),
    'get_value': lambda self: self._value,
    '__properties__': {
        'value': {'get': lambda self: self._value, 'set': counter_set_value},
    },
})

def test_counter_usage():
    c1 = Counter()
    c1.increment()
    assert c1.value == 1
    c1.value = 42
    assert c1.get_value() == 42

    c2 = Counter.from_initial(100)
    assert f'{c2}' == 'Counter(value=100)'
    assert Counter.reset_all() == 'All counters reset!'

def test_returns_class_records_and_instances():
    assert isinstance(Counter, Class)
    assert isinstance(Counter(), Instance)

def test_class_methods_construct_the_looked_up_class():
    Sub = new_class('Sub', {}, Counter)
    s = Sub.from_initial(5)
    assert s.__classname__ == 'Sub'
    assert s.value == 5

def test_static_methods_are_inherited_and_unbound():
    Sub = new_class('Sub', {}, Counter)
    assert Sub.reset_all() == 'All counters reset!'

def test_static_overrides_class_method_of_the_same_name():
    A = new_class('A', {
        '__static__': {'make': lambda: 'static'},
        '__class__': {'make': lambda cls: 'class'},
    })
    assert A.make() == 'static'

def test_members_are_readable_on_the_class():
    assert Counter.kind == 'counter'
    assert Counter.get_value(Counter()) == 0

def test_class_metadata():
    Sub = new_class('Sub', {'extra': 1}, Counter)
    assert Sub.__name__ == 'Sub'
    assert Sub.__bases__ == (Counter,)
    assert Sub.__mro__ == (Sub, Counter)
    assert dict(Sub.__definition__) == {'extra': 1}
    assert set(Counter.__definition__) == {
        '__init__', '__str__', 'kind', 'increment', 'get_value'}
    assert repr(Sub) == "<class 'Sub'>"
    assert {'reset_all', 'from_initial', 'extra', 'kind'}.issubset(dir(Sub))

def test_class_records_are_read_only():
    with pytest.raises(AttributeError):
        Counter.kind = 'other'
    with pytest.raises(AttributeError):
        del Counter.kind
    with pytest.raises(AttributeError):
        Counter.missing

def test_no_global_registry():
    A1 = new_class('A', {'x': 1})
    A2 = new_class('A', {'x': 2})
    assert A1 is not A2
    assert (A1().x, A2().x) == (1, 2)

def test_default_name_and_definition():
    PyObject = new_class()
    assert PyObject.__name__ == 'PyObject'
    assert repr(PyObject()) == 'PyObject({  })'

def test_bases_must_be_class_records():
    with pytest.raises(TypeError):
        new_class('A', {}, object)

def test_class_creation_is_logged(caplog):
    A = new_class('A', {})
    B = new_class('B', {}, A)
    C = new_class('C', {}, A)
    with caplog.at_level(logging.DEBUG, logger='pyclass.model.factory'):
        new_class('D', {}, B, C)
    assert "Created class 'D' with MRO (D, B, C, A)." in caplog.messages
