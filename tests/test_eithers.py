import unittest

from eitherpy import (
    Left, Right, NullArgument,
    merge, left_flatten, right_flatten, flatten_left, flatten_right, flatten,
)


class TestMerge(unittest.TestCase):
    def test_merge(self):
        self.assertEqual(merge(Left("v")), "v")
        self.assertEqual(merge(Right("v")), "v")
        self.assertIsNone(merge(Left(None)))
        self.assertIsNone(merge(Right(None)))

    def test_merge_rejects_none_and_non_either(self):
        with self.assertRaises(NullArgument):
            merge(None)
        with self.assertRaises(TypeError):
            merge("v")  # type: ignore[arg-type]


class TestFlatteners(unittest.TestCase):
    def test_left_flatten(self):
        f = left_flatten()
        self.assertEqual(f(Left(1)), Left(1))
        self.assertEqual(f(Right(1)), Left(1))

    def test_right_flatten(self):
        f = right_flatten()
        self.assertEqual(f(Left(1)), Right(1))
        self.assertEqual(f(Right(1)), Right(1))

    def test_flatteners_compose_with_flat_map(self):
        self.assertEqual(Left(Right("x")).flat_map_left(left_flatten()), Left("x"))


class TestFlatten(unittest.TestCase):
    def test_flatten_left(self):
        self.assertEqual(flatten_left(Left(Left("a"))), Left("a"))
        self.assertEqual(flatten_left(Left(Right("a"))), Left("a"))
        self.assertEqual(flatten_left(Right("b")), Right("b"))
        with self.assertRaises(NullArgument):
            flatten_left(None)

    def test_flatten_right(self):
        self.assertEqual(flatten_right(Right(Right("a"))), Right("a"))
        self.assertEqual(flatten_right(Right(Left("a"))), Right("a"))
        self.assertEqual(flatten_right(Left("b")), Left("b"))
        with self.assertRaises(NullArgument):
            flatten_right(None)

    def test_flatten(self):
        self.assertEqual(flatten(Left(Left("x"))), Left("x"))
        self.assertEqual(flatten(Left(Right("x"))), Left("x"))
        self.assertEqual(flatten(Right(Right("y"))), Right("y"))
        self.assertEqual(flatten(Right(Left("y"))), Right("y"))
        with self.assertRaises(NullArgument):
            flatten(None)


if __name__ == "__main__":
    unittest.main()
