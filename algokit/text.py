"""String puzzles: word lengths, distinct-character windows, postfix expressions."""

from __future__ import annotations

_OPERATORS = frozenset("+-*/^")


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in ``s``."""
    trimmed = s.rstrip(" ")
    return len(trimmed) - (trimmed.rfind(" ") + 1)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    best = start = 0
    for i, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        best = max(best, i - start + 1)
    return best


def postfix_to_infix(expression: str) -> str:
    """Convert a postfix expression of single-character operands to parenthesised infix.

    Characters that are neither alphanumeric nor one of ``+ - * / ^`` are ignored.
    """
    stack: list[str] = []
    for ch in expression:
        if ch.isalnum():
            stack.append(ch)
        elif ch in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(f"({left}{ch}{right})")
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]