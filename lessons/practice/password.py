"""
Question 1: password strength.

Rules: +1 for length > 8, +1 for numbers, +1 for special chars.
The result is a small record holding the score and some feedback.
"""

from dataclasses import dataclass

from lessons.log import get_logger

logger = get_logger(__name__)

MIN_LENGTH = 8
SAMPLE_PASSWORD = "eeeeeeee^%%$%^$%46756756675e"


@dataclass(frozen=True)
class PasswordScore:
    score: int
    feedback: str = ""

    def __str__(self) -> str:
        if self.feedback:
            return f"{self.score}/3 ({self.feedback})"
        return f"{self.score}/3"


def _classify(password: str):
    """Single pass over the text, returns (has_digit, has_special)."""
    has_digit = False
    has_special = False
    for ch in password:
        if ch.isdecimal():
            has_digit = True
        elif not ch.isalpha():
            has_special = True
    return has_digit, has_special


def score_password(password: str) -> int:
    score = 0

    if len(password) > MIN_LENGTH:
        score += 1

    has_digit, has_special = _classify(password)
    if has_digit:
        score += 1
    if has_special:
        score += 1

    logger.debug("scored password of length %d: %d", len(password), score)
    return score


def check_password(password: str) -> PasswordScore:
    """Score a password and say which rules it missed."""
    has_digit, has_special = _classify(password)

    missing = []
    if len(password) <= MIN_LENGTH:
        missing.append(f"use more than {MIN_LENGTH} characters")
    if not has_digit:
        missing.append("add a number")
    if not has_special:
        missing.append("add a special character")

    return PasswordScore(score=score_password(password), feedback=", ".join(missing))


def main():
    print("Exercise for Lesson 1 till Lesson 5")
    print("Question 1: Create a function that takes a password string and returns a strength score")
    print("Rules: +1 for length > 8, +1 for numbers, +1 for special chars")
    print("Use structs to represent the result")

    result = check_password(SAMPLE_PASSWORD)
    print(result.score)
    print("Strength:", result)


if __name__ == "__main__":
    main()
