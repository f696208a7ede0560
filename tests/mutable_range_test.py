import unittest

from ezrange import EZMutableRange, EZRange, InvalidArgument, UnsupportedType, EmptyRange

###############################################################################

class EZMutableRangeTest(unittest.TestCase):

    def test_materialized_range(self):
        r = EZMutableRange.of(1, 5)
        self.assertEqual(r.toArray(), [1, 2, 3, 4, 5])
        self.assertEqual(len(r), 5)
        self.assertEqual(r.size(), 5)
        self.assertFalse(r.isEmpty())

        r = EZMutableRange.of(1.0, 1.5)
        self.assertEqual(r.toArray(), [1.0, 1.1, 1.2, 1.3, 1.4, 1.5])

        r = EZMutableRange.of(1, 1)
        self.assertTrue(r.isEmpty())
        self.assertEqual(r.toArray(), [])
        self.assertFalse(r.contains(1))

    # -------------------------------------------------------------------- #

    def test_exact_contains(self):
        ''' Only produced or added values are contained '''
        r = EZMutableRange.of(1, 10)
        self.assertTrue(r.contains(3))
        self.assertFalse(r.contains(2.5))
        self.assertFalse(r.contains("x"))
        self.assertFalse(r.contains([1]))

        r = EZMutableRange.of(0.0, 1.0)
        self.assertTrue(r.contains(0.5))
        self.assertTrue(r.contains(0.3))
        self.assertFalse(r.contains(0.15))

        self.assertTrue(r.containsAll([0.0, 0.7, 1.0]))
        self.assertFalse(r.containsAll([0.0, 0.15]))

        with self.assertRaises(InvalidArgument):
            r.contains(None)

    # -------------------------------------------------------------------- #

    def test_add_range(self):
        r = EZMutableRange.of(1, 5)
        self.assertTrue(r.addRange(3, 8))
        self.assertEqual(r.toArray(), [1, 2, 3, 4, 5, 6, 7, 8])
        self.assertFalse(r.addRange(1, 5))
        self.assertFalse(r.addRange(2, 2))

        r = EZMutableRange()
        self.assertTrue(r.addRange(0, 20, lambda x: x + 5))
        self.assertEqual(r.toArray(), [0, 5, 10, 15, 20])

        with self.assertRaises(InvalidArgument):
            r.addRange(5, 1)
        with self.assertRaises(InvalidArgument):
            r.addRange(1, 5, None)
        with self.assertRaises(InvalidArgument):
            r.addRange("a", "c", lambda c: chr(ord(c) + 1))
        with self.assertRaises(UnsupportedType):
            EZMutableRange().addRange("a", "c")
        self.assertEqual(r.toArray(), [0, 5, 10, 15, 20])

    # -------------------------------------------------------------------- #

    def test_add_remove(self):
        r = EZMutableRange()
        self.assertTrue(r.add(10))
        self.assertFalse(r.add(10))
        self.assertTrue(r.add(3))
        self.assertEqual(r.toArray(), [3, 10])

        r.remove(10)
        self.assertEqual(r.toArray(), [3])
        with self.assertRaises(KeyError):
            r.remove(10)
        r.discard(42)
        r.discard(3)
        self.assertTrue(r.isEmpty())

        with self.assertRaises(InvalidArgument):
            r.add(None)
        with self.assertRaises(InvalidArgument):
            r.remove(None)
        with self.assertRaises(InvalidArgument):
            r.discard(None)

        r.add(1)
        with self.assertRaises(InvalidArgument):
            r.add("x")
        self.assertEqual(r.toArray(), [1])

    # -------------------------------------------------------------------- #

    def test_element_validation(self):
        ''' Point and bulk operations refuse the same elements '''
        r = EZMutableRange()
        for operation in [r.add, r.remove, r.discard]:
            with self.assertRaises(InvalidArgument):
                operation([1])
            with self.assertRaises(InvalidArgument):
                operation(None)

        r.addAll([1, 2, 3])
        for operation in [r.addAll, r.removeAll, r.retainAll]:
            with self.assertRaises(InvalidArgument):
                operation([None])
            with self.assertRaises(InvalidArgument):
                operation([[1]])
        self.assertEqual(r.toArray(), [1, 2, 3])

    # -------------------------------------------------------------------- #

    def test_lossy_bounds_refused(self):
        with self.assertRaises(InvalidArgument):
            EZMutableRange.of(1, 3.9)
        r = EZMutableRange.of(1, 3)
        with self.assertRaises(InvalidArgument):
            r.addRange(4, 6.5)
        self.assertEqual(r.toArray(), [1, 2, 3])

    # -------------------------------------------------------------------- #

    def test_bulk_operations(self):
        r = EZMutableRange([5, 1, 3])
        self.assertEqual(r.toArray(), [1, 3, 5])

        self.assertTrue(r.addAll([3, 4]))
        self.assertFalse(r.addAll([1]))
        self.assertEqual(r.toArray(), [1, 3, 4, 5])

        self.assertTrue(r.removeAll([1, 9]))
        self.assertFalse(r.removeAll([9]))
        self.assertEqual(r.toArray(), [3, 4, 5])

        self.assertTrue(r.retainAll([3, 4, 7]))
        self.assertFalse(r.retainAll([3, 4]))
        self.assertEqual(r.toArray(), [3, 4])

        with self.assertRaises(InvalidArgument):
            r.removeAll([None])
        with self.assertRaises(InvalidArgument):
            r.addAll([6, None])

        r.clear()
        self.assertTrue(r.isEmpty())
        self.assertEqual(len(r), 0)

    # -------------------------------------------------------------------- #

    def test_set_operators(self):
        r = EZMutableRange.of(1, 3)
        r |= {10}
        r -= {1}
        self.assertEqual(r.toArray(), [2, 3, 10])
        self.assertEqual((r & {2, 10}).toArray(), [2, 10])

    # -------------------------------------------------------------------- #

    def test_sorted_iteration(self):
        r = EZMutableRange()
        for value in [7, 2, 9, 1]:
            r.add(value)
        self.assertEqual(list(r), [1, 2, 7, 9])
        self.assertEqual(list(r), list(r))

    # -------------------------------------------------------------------- #

    def test_rand(self):
        r = EZMutableRange.of(1, 10, lambda x: x + 3)
        for _ in range(50):
            self.assertIn(r.rand(), [1, 4, 7, 10])

        with self.assertRaises(EmptyRange):
            EZMutableRange().rand()

    # -------------------------------------------------------------------- #

    def test_matches_read_only_range(self):
        for start, end in [(1, 5), (0.0, 1.0), (-2.5, 2.5)]:
            self.assertEqual(EZMutableRange.of(start, end), EZRange.of(start, end))
            self.assertEqual(len(EZMutableRange.of(start, end)), len(EZRange.of(start, end)))

    # -------------------------------------------------------------------- #

    def test_repr(self):
        self.assertEqual(repr(EZMutableRange.of(1, 3)), "{1, 2, 3}")
        self.assertEqual(repr(EZMutableRange()), "{}")

# --------------------------------------------------------------------------- #

if __name__ == '__main__':
    unittest.main()
