#!/usr/bin/env python
#
# Copyright (c), 2024-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import copy
import pickle
import unittest
from array import array
from collections import deque
from collections.abc import MutableSequence, Sequence
from concurrent.futures import ThreadPoolExecutor

from seqkit import UnsupportedMutationError, SeqkitTypeError
from seqkit.empty import EmptySequenceType, EMPTY_SEQUENCE, shared_empty, \
    typed_empty, is_immutable, sequence_equals, sequence_size


class EmptySequenceTest(unittest.TestCase):

    def test_singleton(self):
        self.assertIs(EmptySequenceType(), EMPTY_SEQUENCE)
        self.assertIs(shared_empty(), EMPTY_SEQUENCE)
        self.assertIs(shared_empty(), shared_empty())
        self.assertIs(EmptySequenceType[int](), EMPTY_SEQUENCE)

    def test_typed_empty(self):
        self.assertIs(typed_empty(), EMPTY_SEQUENCE)
        self.assertIs(typed_empty(int), EMPTY_SEQUENCE)
        self.assertIs(typed_empty(str), typed_empty(float))
        self.assertEqual(typed_empty(int), shared_empty())
        self.assertEqual(shared_empty(), typed_empty(int))

    def test_concurrent_initialization(self):
        instance = EmptySequenceType._instance
        EmptySequenceType._instance = None
        try:
            with ThreadPoolExecutor(max_workers=8) as executor:
                results = list(executor.map(lambda _: EmptySequenceType(), range(200)))
            self.assertEqual(len({id(x) for x in results}), 1)
        finally:
            EmptySequenceType._instance = instance

        self.assertIs(EmptySequenceType(), EMPTY_SEQUENCE)

    def test_string_repr(self):
        self.assertEqual(repr(EMPTY_SEQUENCE), 'EmptySequenceType()')
        self.assertEqual(str(EMPTY_SEQUENCE), '()')

    def test_sequence_protocol(self):
        self.assertIsInstance(EMPTY_SEQUENCE, Sequence)
        self.assertNotIsInstance(EMPTY_SEQUENCE, MutableSequence)

        self.assertEqual(len(EMPTY_SEQUENCE), 0)
        self.assertFalse(EMPTY_SEQUENCE)
        self.assertListEqual(list(EMPTY_SEQUENCE), [])
        self.assertListEqual(list(reversed(EMPTY_SEQUENCE)), [])
        self.assertNotIn(None, EMPTY_SEQUENCE)
        self.assertNotIn(1, EMPTY_SEQUENCE)
        self.assertEqual(EMPTY_SEQUENCE.count(1), 0)
        self.assertRaises(ValueError, EMPTY_SEQUENCE.index, 1)

    def test_indexing(self):
        self.assertRaises(IndexError, EMPTY_SEQUENCE.__getitem__, 0)
        self.assertRaises(IndexError, EMPTY_SEQUENCE.__getitem__, -1)
        self.assertIs(EMPTY_SEQUENCE[:], EMPTY_SEQUENCE)
        self.assertIs(EMPTY_SEQUENCE[1:5:2], EMPTY_SEQUENCE)
        self.assertRaises(TypeError, EMPTY_SEQUENCE.__getitem__, 'a')

    def test_comparison(self):
        self.assertEqual(EMPTY_SEQUENCE, [])
        self.assertEqual(EMPTY_SEQUENCE, ())
        self.assertEqual([], EMPTY_SEQUENCE)
        self.assertEqual((), EMPTY_SEQUENCE)
        self.assertEqual(EMPTY_SEQUENCE, EMPTY_SEQUENCE)

        self.assertNotEqual(EMPTY_SEQUENCE, [1])
        self.assertNotEqual(EMPTY_SEQUENCE, (None,))
        self.assertNotEqual([0], EMPTY_SEQUENCE)
        self.assertNotEqual(EMPTY_SEQUENCE, 0)
        self.assertNotEqual(EMPTY_SEQUENCE, '')
        self.assertNotEqual(EMPTY_SEQUENCE, None)
        self.assertNotEqual(EMPTY_SEQUENCE, set())

    def test_hashing(self):
        self.assertEqual(hash(EMPTY_SEQUENCE), hash(()))
        mapping = {EMPTY_SEQUENCE: 'empty'}
        self.assertEqual(mapping[()], 'empty')

    def test_copy_and_pickle(self):
        self.assertIs(copy.copy(EMPTY_SEQUENCE), EMPTY_SEQUENCE)
        self.assertIs(copy.deepcopy(EMPTY_SEQUENCE), EMPTY_SEQUENCE)
        self.assertIs(copy.deepcopy([EMPTY_SEQUENCE])[0], EMPTY_SEQUENCE)

        for protocol in range(pickle.HIGHEST_PROTOCOL + 1):
            self.assertIs(pickle.loads(pickle.dumps(EMPTY_SEQUENCE, protocol)),
                          EMPTY_SEQUENCE)

    def test_mutation_methods(self):
        mutations = [
            lambda s: s.append(1),
            lambda s: s.extend([1, 2]),
            lambda s: s.insert(0, 1),
            lambda s: s.remove(1),
            lambda s: s.pop(),
            lambda s: s.pop(0),
            lambda s: s.clear(),
            lambda s: s.reverse(),
            lambda s: s.sort(),
            lambda s: s.__setitem__(0, 1),
            lambda s: s.__delitem__(0),
            lambda s: s.__setitem__(slice(None), [1]),
        ]
        for mutation in mutations:
            with self.assertRaises(UnsupportedMutationError) as ctx:
                mutation(EMPTY_SEQUENCE)
            self.assertIn('err:SKMU0001', str(ctx.exception))
            self.assertIsInstance(ctx.exception, TypeError)
            self.assertEqual(len(EMPTY_SEQUENCE), 0)

    def test_statement_mutations(self):
        seq = shared_empty()
        with self.assertRaises(UnsupportedMutationError):
            seq[0] = 1
        with self.assertRaises(UnsupportedMutationError):
            del seq[:]
        with self.assertRaises(UnsupportedMutationError):
            seq += [1]

        self.assertIs(seq, EMPTY_SEQUENCE)
        self.assertEqual(len(shared_empty()), 0)

    def test_no_instance_attributes(self):
        with self.assertRaises(AttributeError):
            EMPTY_SEQUENCE.items = [1]


class IsImmutableTest(unittest.TestCase):

    def test_immutable_containers(self):
        self.assertTrue(is_immutable(shared_empty()))
        self.assertTrue(is_immutable(typed_empty(int), 1))
        self.assertTrue(is_immutable(()))
        self.assertTrue(is_immutable('abc'))
        self.assertTrue(is_immutable(frozenset()))
        self.assertEqual(sequence_size(shared_empty()), 0)

    def test_mutable_containers(self):
        seq = []
        self.assertFalse(is_immutable(seq))
        self.assertListEqual(seq, [])

        seq = [1, 2]
        self.assertFalse(is_immutable(seq, object()))
        self.assertListEqual(seq, [1, 2])

        seq = array('i', [1, 2])
        self.assertFalse(is_immutable(seq, 0))
        self.assertEqual(seq, array('i', [1, 2]))

    def test_typed_containers(self):
        for seq in (array('i'), array('i', [1]), array('d'), array('d', [0.5]),
                    bytearray(), bytearray(b'a')):
            with self.subTest(seq=seq):
                expected = copy.copy(seq)
                self.assertFalse(is_immutable(seq))
                self.assertEqual(seq, expected)

        self.assertTrue(is_immutable(array('i'), 'a'))  # item of a wrong type

    def test_frozen_container(self):

        class FrozenSequence(Sequence):
            def __init__(self, items):
                self._items = list(items)

            def __getitem__(self, index):
                return self._items[index]

            def __len__(self):
                return len(self._items)

            def append(self, item):
                raise RuntimeError("Cannot modify frozen list.")

        self.assertTrue(is_immutable(FrozenSequence([])))
        self.assertTrue(is_immutable(FrozenSequence([1, 2]), 3))

    def test_bounded_container_is_not_changed(self):
        seq = deque([1, 2], maxlen=2)
        self.assertFalse(is_immutable(seq))
        self.assertEqual(seq, deque([1, 2], maxlen=2))
        self.assertEqual(seq.maxlen, 2)

    def test_uncopyable_container(self):

        class UncopyableSequence(list):
            def __copy__(self):
                raise RuntimeError("cannot copy")

        with self.assertRaises(SeqkitTypeError) as ctx:
            is_immutable(UncopyableSequence([1]))
        self.assertIn("'UncopyableSequence'", str(ctx.exception))


class SequenceHelpersTest(unittest.TestCase):

    def test_sequence_equals(self):
        self.assertTrue(sequence_equals(shared_empty(), typed_empty(str)))
        self.assertTrue(sequence_equals(shared_empty(), []))
        self.assertTrue(sequence_equals((), shared_empty()))
        self.assertTrue(sequence_equals([1, 2, 3], (1, 2, 3)))
        self.assertTrue(sequence_equals(array('i', [1, 2]), [1, 2]))

        self.assertFalse(sequence_equals([1, 2, 3], [1, 2]))
        self.assertFalse(sequence_equals([1, 2, 3], [1, 3, 2]))
        self.assertFalse(sequence_equals(shared_empty(), [None]))

    def test_sequence_equals_arguments(self):
        for args in [('ab', ['a', 'b']), ([], b''), ({}, []), ([], None)]:
            with self.assertRaises(SeqkitTypeError) as ctx:
                sequence_equals(*args)
            self.assertIn('SKTY0001', str(ctx.exception))

    def test_sequence_size(self):
        self.assertEqual(sequence_size(shared_empty()), 0)
        self.assertEqual(sequence_size(typed_empty(int)), 0)
        self.assertEqual(sequence_size([1, 2, 3]), 3)
        self.assertRaises(SeqkitTypeError, sequence_size, 10)


if __name__ == '__main__':
    unittest.main()
