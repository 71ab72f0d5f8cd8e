import pytest

from pyclass import new_class

#---------------------------------------------------------------------------------------------------
def init_point(self):
    self.x = 1
    self.y = 'a'

Point = new_class('Point', {'__init__': init_point})

def test_default_representation():
    p = Point()
    assert str(p) == 'Point({ x: 1, y: "a" })'
    assert repr(p) == 'Point({ x: 1, y: "a" })'
    assert f'{p}' == 'Point({ x: 1, y: "a" })'

def test_default_representation_follows_assignment_order():
    p = Point()
    p.z = [1, 2]
    p.x = 3
    assert str(p) == 'Point({ x: 3, y: "a", z: [1,2] })'

def test_default_representation_is_compact_json():
    Holder = new_class('Holder', {'items': [1, 'a'], 'table': {'k': 1, 'n': None}})
    assert str(Holder()) == 'Holder({ items: [1,"a"], table: {"k":1,"n":null} })'

def test_default_representation_skips_private_and_callable_fields():
    p = Point()
    p._hidden = 1
    p.callback = len
    assert str(p) == 'Point({ x: 1, y: "a" })'

def test_default_representation_json_values():
    Flags = new_class('Flags', {'on': True, 'off': None, 'ratio': 0.5})
    assert str(Flags()) == 'Flags({ on: true, off: null, ratio: 0.5 })'

def test_default_representation_of_nested_instances():
    p = Point()
    Pair = new_class('Pair', {'__init__': lambda self, first: setattr(self, 'first', first)})
    assert str(Pair(p)) == 'Pair({ first: "Point({ x: 1, y: \\"a\\" })" })'

def test_default_representation_includes_properties():
    Gauge = new_class('Gauge', {
        '_level': 3,
        'unit': 'bar',
        '__properties__': {
            'level': {'get': lambda self: self._level},
            '_raw': {'get': lambda self: self._level * 10},
            'target': {'set': lambda self, value: setattr(self, '_level', value)},
        },
    })
    g = Gauge()
    assert str(g) == 'Gauge({ unit: "bar", level: 3 })'
    g.target = 5
    assert repr(g) == 'Gauge({ unit: "bar", level: 5 })'

    Sub = new_class('Sub', {'_level': 4}, Gauge)
    assert repr(Sub()) == 'Sub({ unit: "bar", level: 4 })'

def test_empty_representation():
    Empty = new_class('Empty', {})
    assert str(Empty()) == 'Empty({  })'

#---------------------------------------------------------------------------------------------------
Counter = new_class('Counter', {
    '__init__': lambda self, value=0: setattr(self, 'value', value),
    '__str__': lambda self: f'Counter(value={self.value})',
    '__int__': lambda self: self.value,
})

def test_string_hook():
    c = Counter(7)
    assert str(c) == 'Counter(value=7)'
    assert f'{c}' == 'Counter(value=7)'
    assert f'{c:>18}' == '  Counter(value=7)'
    assert 'value: ' + str(c) == 'value: Counter(value=7)'

def test_repr_ignores_string_hook():
    assert repr(Counter(7)) == 'Counter({ value: 7 })'

def test_numeric_hook():
    c = Counter(7)
    assert int(c) == 7
    assert float(c) == 7.0

def test_numeric_hook_may_return_any_number():
    Reading = new_class('Reading', {'__int__': lambda self: 2.75})
    assert int(Reading()) == 2
    assert float(Reading()) == 2.75

def test_numeric_conversion_without_hook():
    with pytest.raises(TypeError):
        int(Point())
    with pytest.raises(TypeError):
        float(Point())

def test_hooks_are_inherited():
    Sub = new_class('Sub', {}, Counter)
    s = Sub()
    s.value = 3
    assert str(s) == 'Counter(value=3)'
    assert int(s) == 3

def test_hook_can_use_super():
    Sub = new_class('Sub', {'__str__': lambda self: 'Sub:' + self.__super__('__str__')}, Counter)
    assert str(Sub(1)) == 'Sub:Counter(value=1)'

#---------------------------------------------------------------------------------------------------
def test_equality_is_by_instance():
    Echo = new_class('Echo', {'me': lambda self: self})
    e, f = Echo(), Echo()
    assert e == e
    assert e != f
    assert e.me() == e
    assert hash(e.me()) == hash(e)
    assert len({e, e.me(), f}) == 2

def test_instances_do_not_equal_other_objects():
    assert Point() != 1
    assert Point() != {'x': 1, 'y': 'a'}

def test_dir_lists_fields_methods_and_properties():
    Thing = new_class('Thing', {
        'x': 1,
        'method': lambda self: None,
        '__properties__': {'prop': {'get': lambda self: 1}},
    })
    names = dir(Thing())
    assert {'x', 'method', 'prop', '__super__'}.issubset(names)
