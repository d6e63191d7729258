"""Run every lesson in order: python -m lessons"""

from lessons import control_flow, data_types, functions, security_monitor, variables
from lessons.log import configure_logging, get_logger
from lessons.practice import fibonacci, fizzbuzz, password

logger = get_logger(__name__)

LESSONS = [
    ("Lesson 2: Variables and constants", variables.main),
    ("Lesson 2: Practice", security_monitor.main),
    ("Lesson 3: Data types", data_types.main),
    ("Lesson 4: Functions", functions.main),
    ("Lesson 5: Control flow", control_flow.main),
    ("Practice: Question 1", password.main),
    ("Practice: Question 4", fibonacci.main),
    ("Practice: Question 5", fizzbuzz.main),
]


def main():
    configure_logging()
    for title, run in LESSONS:
        logger.debug("running %s", title)
        print(f"\n=== {title} ===")
        run()


if __name__ == "__main__":
    main()
