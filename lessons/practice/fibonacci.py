"""Question 4: generate the nth Fibonacci number."""


def fibonacci(n: int) -> int:
    """Iterative fib with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError(f"fibonacci() needs a non-negative index, got {n}")

    a, b = 0, 1
    i = 0
    while i < n:
        a, b = b, a + b
        i += 1

    return a


def main():
    print("Generate the nth Fibonacci number.")
    n = 4
    y = fibonacci(n)
    print(f"fib({n}) = {y}")


if __name__ == "__main__":
    main()
