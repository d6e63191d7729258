"""
Question 5: FizzBuzz.

Print the numbers from 0 to 99, but:
    divisible by 3 and 5 -> "FizzBuzz"
    divisible by 3       -> "Fizz"
    divisible by 5       -> "Buzz"
    otherwise            -> the number itself
"""


def fizzbuzz_word(i: int) -> str:
    # 15 first, otherwise multiples of 15 come out as plain "Fizz"
    if i % 3 == 0 and i % 5 == 0:
        return "FizzBuzz"
    elif i % 3 == 0:
        return "Fizz"
    elif i % 5 == 0:
        return "Buzz"
    return str(i)


def fizzbuzz(start: int = 0, stop: int = 100):
    """Yield one line per integer in [start, stop)."""
    i = start
    while i < stop:
        yield fizzbuzz_word(i)
        i += 1


def main():
    print("Write a program which does the FizzBuzz")
    for line in fizzbuzz():
        print(line)


if __name__ == "__main__":
    main()
