import copy
import dataclasses
import pickle
import unittest

from optio import Option, OptionType, Some, NONE, from_nullable


class TestOptionType(unittest.TestCase):
    def test_some_wraps_value_as_given(self):
        payload = [1, 2]
        s = Some(payload)
        self.assertIs(s.value, payload)
        self.assertIs(s.type, OptionType.SOME)

    def test_some_accepts_python_none(self):
        self.assertIs(Some(None).value, None)
        self.assertIs(Some(None).type, OptionType.SOME)

    def test_parametrized_constructor(self):
        s = Some[int](1)
        self.assertEqual(s, Some(1))
        self.assertIs(s.type, OptionType.SOME)
        self.assertEqual(Some[str]("a").value, "a")

    def test_some_is_immutable(self):
        s = Some(1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            s.value = 2  # type: ignore[misc]

    def test_some_equality_and_hash(self):
        self.assertEqual(Some(1), Some(1))
        self.assertNotEqual(Some(1), Some(2))
        self.assertEqual(len({Some("a"), Some("a")}), 1)
        self.assertEqual(repr(Some("a")), "Some('a')")

    def test_pattern_matching(self):
        def describe(o: Option[int]) -> str:
            match o:
                case Some(v):
                    return f"some:{v}"
                case _:
                    return "none"
        self.assertEqual(describe(Some(3)), "some:3")
        self.assertEqual(describe(NONE), "none")


class TestNoneSingleton(unittest.TestCase):
    def test_discriminant(self):
        self.assertIs(NONE.type, OptionType.NONE)
        self.assertFalse(NONE)
        self.assertEqual(repr(NONE), "NONE")

    def test_single_instance(self):
        self.assertIs(type(NONE)(), NONE)
        self.assertIs(copy.copy(NONE), NONE)
        self.assertIs(copy.deepcopy(NONE), NONE)
        self.assertIs(pickle.loads(pickle.dumps(NONE)), NONE)

    def test_no_payload(self):
        self.assertFalse(hasattr(NONE, "value"))
        with self.assertRaises(AttributeError):
            NONE.value = 1  # type: ignore[attr-defined]


class TestFromNullable(unittest.TestCase):
    def test_from_nullable(self):
        self.assertIs(from_nullable(None), NONE)
        self.assertEqual(from_nullable(0), Some(0))
        self.assertEqual(from_nullable(""), Some(""))
