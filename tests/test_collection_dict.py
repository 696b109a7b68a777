import unittest

from collections import OrderedDict
from itertools import groupby
from types import MappingProxyType

from nsw.ext.collection_utils.dict import values_to_list, values_to_tuple, keys_to_list, keys_to_tuple, \
    append_missing, groupings_to_dict


class KeysValuesTest(unittest.TestCase):
    def test_values(self):
        data = {'a': 1, 'b': 2}

        self.assertEqual(values_to_list(data), [1, 2])
        self.assertEqual(values_to_tuple(data), (1, 2))

    def test_keys(self):
        data = OrderedDict([('z', 1), ('a', 2)])

        self.assertEqual(keys_to_list(data), ['z', 'a'])
        self.assertEqual(keys_to_tuple(data), ('z', 'a'))

    def test_none(self):
        for func in (values_to_list, values_to_tuple, keys_to_list, keys_to_tuple):
            self.assertIsNone(func(None))

    def test_empty(self):
        self.assertEqual(values_to_list({}), [])
        self.assertEqual(keys_to_tuple({}), ())


class AppendMissingTest(unittest.TestCase):
    def test_basic(self):
        data = {'a': 1, 'b': 2}

        result = append_missing(data, {'b': 20, 'c': 30})

        self.assertIs(result, data)
        self.assertEqual(data, {'a': 1, 'b': 2, 'c': 30})

    def test_none_or_empty_other(self):
        data = {'a': 1}

        append_missing(data, None)
        append_missing(data, {})

        self.assertEqual(data, {'a': 1})

    def test_immutable_target(self):
        with self.assertRaises(TypeError):
            append_missing(MappingProxyType({'a': 1}), {'b': 2})


class GroupingsToDictTest(unittest.TestCase):
    def test_groupby(self):
        words = ['apple', 'avocado', 'banana', 'cherry', 'cranberry']

        self.assertEqual(
            groupings_to_dict(groupby(words, key=lambda word: word[0])),
            {'a': ['apple', 'avocado'], 'b': ['banana'], 'c': ['cherry', 'cranberry']}
        )

    def test_duplicate_key(self):
        with self.assertRaises(ValueError):
            groupings_to_dict(groupby(['apple', 'banana', 'avocado'], key=lambda word: word[0]))

    def test_empty(self):
        self.assertEqual(groupings_to_dict([]), {})
