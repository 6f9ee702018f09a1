from pycfgdiff import ConfigMap, Difference, diff


def test_one_sided_keys_not_reported():
    left = ConfigMap.from_dict({'a': {'x': '1', 'y': '2'}})
    right = ConfigMap.from_dict({'a': {'x': '1', 'z': '3'}})
    assert diff(left, right) == []


def test_drift_detected():
    left = ConfigMap.from_dict({'a': {'x': '1'}})
    right = ConfigMap.from_dict({'a': {'x': '2'}})
    (found,) = diff(left, right)
    assert str(found.key) == 'a.x'
    assert (found.left, found.right) == ('1', '2')


def test_exact_string_comparison():
    left = ConfigMap.from_dict({'a': {'x': 'On', 'y': '1.0', 'z': ''}})
    right = ConfigMap.from_dict({'a': {'x': 'on', 'y': '1', 'z': ''}})
    found = {str(i.key) for i in diff(left, right)}
    assert found == {'a.x', 'a.y'}


def test_same_property_other_section():
    left = ConfigMap.from_dict({'a': {'x': '1'}})
    right = ConfigMap.from_dict({'b': {'x': '2'}})
    assert diff(left, right) == []


def test_sorted():
    left = ConfigMap.from_dict({'b': {'x': '1'}, 'a': {'y': '1', 'x': '1'}})
    right = ConfigMap.from_dict({'a': {'x': '2', 'y': '2'}, 'b': {'x': '2'}})
    found = diff(left, right, sort=True)
    assert [str(i.key) for i in found] == ['a.x', 'a.y', 'b.x']


def test_to_dict():
    left = ConfigMap.from_dict({'a': {'x': '1'}})
    right = ConfigMap.from_dict({'a': {'x': '2'}})
    (found,) = diff(left, right)
    assert isinstance(found, Difference)
    assert found.to_dict() == {
        'section': 'a', 'property': 'x', 'left': '1', 'right': '2'}
