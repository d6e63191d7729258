"""
Lesson 3: data types.

Scalar types (integers, floats, characters, booleans), compound types
(tuples, fixed-size arrays) and a custom record type.
"""

from dataclasses import dataclass

import numpy as np


@dataclass
class Person:
    name: str
    age: int


INTEGER_WIDTHS = [8, 16, 32, 64, 128]


def integer_ranges():
    """
    (bits, signed_min, signed_max, unsigned_max) for each fixed width.

    numpy has no 128-bit integer dtype; that row reports None for the limits.
    """
    rows = []
    for bits in INTEGER_WIDTHS:
        try:
            signed = np.iinfo(np.dtype(f"int{bits}"))
            unsigned = np.iinfo(np.dtype(f"uint{bits}"))
        except TypeError:
            rows.append((bits, None, None, None))
            continue
        rows.append((bits, int(signed.min), int(signed.max), int(unsigned.max)))
    return rows


def integer_literals():
    return {
        "Decimal": 9820,
        "Hex": 0xff,
        "Octal": 0o77,
        "Binary": 0b01010101,
        "Byte": b"A"[0],
    }


def float_ops(x: float = 2.5, y: float = 2.0):
    return x + y, x / y, x % y


def main():
    print("There are different data types. Scalar, Compound and Custom types.")
    print("Scalar Types: \n 1. Integers:")

    for bits, smin, smax, umax in integer_ranges():
        if smin is None:
            print(f"{bits}-bit: not available as a fixed-width numpy type")
        else:
            print(f"{bits}-bit: int{bits} [{smin}, {smax}]  uint{bits} [0, {umax}]")

    for name, value in integer_literals().items():
        print(f"{name} is {value}")

    # Floating point
    total, quotient, remainder = float_ops()
    print(f"Addition of x and y gives us {total}")
    print(f"Division of x and y gives us {quotient}")
    print(f"Remainder of x and y gives us {remainder}")

    # Tuples
    tup = (500, 6.4, "x")
    x, y, z = tup
    print(f"The value of y is {y}")
    print(f"The value of 500 is: {tup[0]}")

    # Arrays: fixed size, one element type
    arr = np.array([1, 2, 3, 4, 5])
    print(f"First value in the array is {arr[0]}")
    print("Array length:", arr.size)

    # Custom type
    person = Person(name="John", age=25)
    print(f"Person is {person!r}")


if __name__ == "__main__":
    main()
