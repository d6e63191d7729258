"""
Lesson 5: control flow.

if/else, conditional expressions, matching on an enum, and loops.
"""

from enum import Enum


class Coin(Enum):
    PENNY = "penny"
    NICKEL = "nickel"
    DIME = "dime"
    QUARTER = "quarter"


def value_in_cents(coin: Coin) -> int:
    match coin:
        case Coin.PENNY:
            return 1
        case Coin.NICKEL:
            return 5
        case Coin.DIME:
            return 10
        case Coin.QUARTER:
            return 25
    raise TypeError(f"value_in_cents() expects a Coin, got {coin!r}")


def count_until(limit: int) -> int:
    """Loop until the counter reaches `limit` and hand back the counter."""
    i = 0
    while True:
        i += 1
        if i >= limit:
            break
    return i


def main():
    print("Hello World")

    number = 6
    if number < 5:
        print("Condition is true")
    else:
        print("Condition is false")

    condition = True
    num = 5 if condition else 6
    print(f"The number is {num}")

    # `and` / `or` combine conditions
    coin = Coin.PENNY
    print(f"Value of coin is: {value_in_cents(coin)}")

    print(count_until(10))

    a = [1, 2, 3, 4, 5, 6, 7, 8]
    for element in a:
        print(f"The value is: {element}")

    for c in "hello world":
        print(f"The value is {c}")


if __name__ == "__main__":
    main()
