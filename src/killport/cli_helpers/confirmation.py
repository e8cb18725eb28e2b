"""Interactive confirmation before killing processes."""

from __future__ import annotations

from typing import Callable

from ..errors import InputReadError

PROMPT = "\nKill this process? [y/N]: "
_ACCEPTED_ANSWERS = frozenset({"y", "yes"})


def is_affirmative(response: str) -> bool:
    return response.strip().lower() in _ACCEPTED_ANSWERS


def confirm_termination(input_func: Callable[[str], str] = input) -> bool:
    """
    Ask the operator whether to proceed.

    Returns:
        True only for "y" or "yes" (case-insensitive, surrounding whitespace ignored);
        False for any other answer or Ctrl-C

    Raises:
        InputReadError: If stdin is closed or unreadable
    """
    try:
        response = input_func(PROMPT)
    except KeyboardInterrupt:
        # Ctrl-C at the prompt declines
        print()
        return False
    except (EOFError, OSError) as exc:
        raise InputReadError(f"failed to read confirmation: {str(exc) or 'end of input'}") from exc
    return is_affirmative(response)


__all__ = ["PROMPT", "confirm_termination", "is_affirmative"]
