"""Clean-up and checking of function text typed by the user."""

from __future__ import annotations

from enum import IntEnum

BINARY_OPERATIONS = "+-*/^<>=#"
UNARY_OPERATIONS = "sin cos sqr abs exp ln"

_DIGITS = frozenset("0123456789")
_ALLOWED = _DIGITS | set(BINARY_OPERATIONS) | set(UNARY_OPERATIONS) | set("().")


class StatusCode(IntEnum):
    OK = 0
    INVALID_CHARACTER = 1
    INCORRECT_PARENTHESES = 2
    EMPTY_PARENTHESES = 3
    SYNTAX_ERROR = 4
    MISSING_UNARY_PARENTHESIS = 5
    INVALID_NUMBER = 6
    INVALID_BINARY_OPERATION = 7


class ValidationError(ValueError):
    """Raised when function text cannot be accepted."""

    def __init__(self, code: StatusCode, message: str) -> None:
        super().__init__(message)
        self.code = code


def _is_binary(ch: str) -> bool:
    return len(ch) == 1 and ch in BINARY_OPERATIONS


def _skip_digits(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def remove_spaces(text: str) -> str:
    """Return the text with every space removed."""
    return text.replace(" ", "")


def clean_characters(text: str) -> str:
    """Turn commas into dots and drop characters that cannot appear in a function.

    When the first character is dropped, the one after it is kept unchecked.
    """
    if not text:
        return ""

    def convert(ch: str) -> str:
        return "." if ch == "," else ch

    first = convert(text[0])
    if first in _ALLOWED:
        head, rest = first, text[1:]
    else:
        head, rest = text[1:2], text[2:]
    cleaned = head + "".join(ch for ch in map(convert, rest) if ch in _ALLOWED)
    if cleaned == "()":
        raise ValidationError(StatusCode.INVALID_CHARACTER, "Not a valid function")
    return cleaned


def check_parentheses(text: str) -> None:
    """Raise unless parentheses are balanced and none are empty."""
    compact = remove_spaces(text)
    depth = 0
    for ch in compact:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                raise ValidationError(
                    StatusCode.INCORRECT_PARENTHESES,
                    "Parentheses are missing or mismatched",
                )
            depth -= 1
    if depth:
        raise ValidationError(
            StatusCode.INCORRECT_PARENTHESES, "Parentheses are missing or mismatched"
        )
    if "()" in compact:
        raise ValidationError(StatusCode.EMPTY_PARENTHESES, "Empty parenthesis")


def wrap_negative_numbers(text: str) -> str:
    """Put parentheses around negated operands that follow an operator."""
    out: list[str] = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        previous = out[-1] if out else ""
        if ch == "-" and not (previous in _DIGITS or previous in ("x", "(")):
            out.extend("(-")
            i += 1
            start = i
            while start < n and text[start] == " ":
                start += 1
            if start < n and text[start] == "(":
                end = text.find(")", start)
                if end == -1:
                    end = n
            else:
                end = start
                while end < n and (text[end] in _DIGITS or text[end] == "."):
                    end += 1
            out.extend(text[i:end])
            out.append(")")
            i = end
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def normalize_numbers(text: str) -> str:
    """Insert implicit multiplications around numbers and drop extra decimal points."""
    out: list[str] = []
    i, n = 0, len(text)
    while i < n:
        if text[i] not in _DIGITS:
            out.append(text[i])
            i += 1
            continue

        k = len(out)
        while k > 0 and out[k - 1] == " ":
            k -= 1
        if k > 0 and not _is_binary(out[k - 1]) and out[k - 1] != "(":
            out.insert(k, "*")

        j = _skip_digits(text, i)
        if j < n and text[j] == ".":
            j = _skip_digits(text, j + 1)
            out.extend(text[i:j])
            while j < n and text[j] == ".":
                start = j + 1
                j = _skip_digits(text, start)
                out.extend(text[start:j])
        else:
            out.extend(text[i:j])

        m = j
        while m < n and text[m] == " ":
            m += 1
        if m < n and (_is_binary(text[m]) or text[m] == ")"):
            i = j
        else:
            out.extend(text[j:m])
            out.append("*")
            i = m
    return "".join(out)


def normalize_binary_operations(text: str) -> str:
    """Remove spaces, operators right after "(" (except minus) and doubled operators."""
    chars = list(remove_spaces(text))
    i = 0
    while i < len(chars):
        if _is_binary(chars[i]):
            if i > 0 and chars[i - 1] == "(" and chars[i] != "-":
                del chars[i]
                i += 1
            if i + 1 < len(chars) and _is_binary(chars[i + 1]):
                del chars[i + 1]
        i += 1
    result = "".join(chars)
    if result == "()":
        raise ValidationError(StatusCode.INVALID_BINARY_OPERATION, "Not a valid function")
    return result


def validate(text: str) -> str:
    """Check and normalise function text, returning the cleaned form."""
    cleaned = clean_characters(text)
    check_parentheses(cleaned)
    wrapped = wrap_negative_numbers(cleaned)
    return normalize_binary_operations(normalize_numbers(wrapped))