"""Scalar, compound and custom types"""
import unittest

from lessons import data_types
from lessons.data_types import Person, float_ops, integer_literals, integer_ranges


class TestIntegers(unittest.TestCase):
    def test_literals(self):
        self.assertEqual(
            integer_literals(),
            {"Decimal": 9820, "Hex": 255, "Octal": 63, "Binary": 85, "Byte": 65},
        )

    def test_ranges(self):
        rows = {bits: (smin, smax, umax) for bits, smin, smax, umax in integer_ranges()}
        self.assertEqual(rows[8], (-128, 127, 255))
        self.assertEqual(rows[16], (-32768, 32767, 65535))
        self.assertEqual(rows[64], (-(2 ** 63), 2 ** 63 - 1, 2 ** 64 - 1))

    def test_128_bit_unavailable(self):
        rows = {bits: (smin, smax, umax) for bits, smin, smax, umax in integer_ranges()}
        self.assertEqual(rows[128], (None, None, None))


class TestFloats(unittest.TestCase):
    def test_ops(self):
        self.assertEqual(float_ops(), (4.5, 1.25, 0.5))


class TestPerson(unittest.TestCase):
    def test_repr(self):
        self.assertEqual(repr(Person(name="John", age=25)), "Person(name='John', age=25)")


def test_main_output(capsys):
    data_types.main()
    out = capsys.readouterr().out
    assert "Hex is 255" in out
    assert "8-bit: int8 [-128, 127]  uint8 [0, 255]" in out
    assert "The value of y is 6.4" in out
    assert "First value in the array is 1" in out
    assert "Person is Person(name='John', age=25)" in out


if __name__ == "__main__":
    unittest.main()
