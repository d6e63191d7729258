"""Lesson 4: functions, statements and expressions."""


def simple_function():
    print("Me is a simple function")


def two_parameter(num1: int, num2: int) -> int:
    print("I have 2 parameter")
    total = num1 + num2
    print(f"The two numbers are: {num1} and {num2}. There sum are: {total}")
    return total


# Statements perform an action; expressions evaluate to a value.

def another_function() -> int:
    x = 5
    y = 6
    z = x + y
    print(f"The value of z is: {z}")
    return z


def block_expression() -> int:
    # y is bound to the value of the whole expression
    x = 3
    y = x + 2
    print(f"The value of y is: {y}")
    return y


def return_function(num1: int, num2: int) -> tuple[int, str]:
    x = num1 + num2
    y = f"The sum of the two numbers is: {x}"
    return x, y


def main():
    num1 = 23
    num2 = 20

    print("Hello, world!")
    simple_function()
    two_parameter(num1, num2)
    another_function()
    block_expression()
    result = return_function(10, 20)
    print(f"x: {result[0]}")
    print(f"y: {result[1]}")


if __name__ == "__main__":
    main()
