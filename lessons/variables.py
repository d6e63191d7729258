"""
Lesson 2: variables and constants.

Reassigning a name, shadowing it with a new value or a new type, and
keeping a module-level constant.
"""

from typing import Final

MAX_POINTS: Final = 100_00


def shadow_in_inner_scope(value: int):
    """Rebind `value` inside a nested scope; return (inner, outer)."""

    def inner():
        value = 8
        return value

    inner_value = inner()
    return inner_value, value


def main():
    x = 5
    print(f"The value of x is: {x}")

    # reassignment
    x = 6
    print(f"The value of x is: {x}")

    # shadowing
    y = 5
    print(f"The value of y is {y}")

    inner_y, y = shadow_in_inner_scope(y)
    print(f"The value of y is {inner_y}")

    y = y + 5
    print(f"The value of y is {y}")

    # a new binding can change the type
    y = "hi"
    print(f"The value of y is: {y}")

    z = 5
    print(f"Z = {z}")
    z = "hola"
    print(f"Z = {z}")

    print(f"The value of MAX_POINTS is {MAX_POINTS}")


if __name__ == "__main__":
    main()
