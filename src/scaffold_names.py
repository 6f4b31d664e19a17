"""stage-scaffold: turn free-form feature text into legal identifiers."""

from __future__ import annotations

import re

PLACEHOLDER = "$"
SEPARATOR = "_"

ILLEGAL_CHAR_RE = re.compile(r"[^A-Za-z0-9" + re.escape(PLACEHOLDER) + r"]")
BARE_IDENTIFIER_RE = re.compile(r"[_a-zA-Z][0-9_a-zA-Z]*")


def normalize_to_separator_form(text: str | None) -> str:
    """Replace every character that is not an ASCII letter, digit or placeholder with '_'.

    The result may still start with a digit; see ``to_method_identifier``.
    """
    return ILLEGAL_CHAR_RE.sub(SEPARATOR, text or "")


def _legalize(name: str) -> str:
    # Identifiers may not be empty or start with a digit.
    if not name or name[0].isdigit():
        return SEPARATOR + name
    return name


def to_step_identifier(text: str | None) -> str:
    """Step method name; placeholders stay: 'I have $ apples' → 'I_have_$_apples'."""
    return _legalize(normalize_to_separator_form(text))


def to_method_identifier(text: str | None) -> str:
    """'3 users log in' → '_3_users_log_in'; a literal '$' becomes '_' too."""
    return _legalize(normalize_to_separator_form(text).replace(PLACEHOLDER, SEPARATOR))


def to_type_identifier(text: str | None) -> str:
    """Pascal-case type name: 'user login, v2' → 'UserLoginV2'.

    Words are the '_'-separated chunks of the separator form. Only the first
    letter of each word is touched, so acronyms survive ('HTTP api' → 'HTTPApi').
    """
    words = normalize_to_separator_form(text).replace(PLACEHOLDER, SEPARATOR).split(SEPARATOR)
    return _legalize("".join(word[:1].upper() + word[1:] for word in words))


def is_legal_bare_identifier(text: str | None) -> bool:
    """Whether ``text`` can stand as an identifier as-is.

    Missing or empty text counts as legal: there is nothing to preserve.
    """
    if not text:
        return True
    return BARE_IDENTIFIER_RE.fullmatch(text) is not None


def escape_string_literal(text: str) -> str:
    # Only backslashes are escaped; quotes pass through untouched.
    return text.replace("\\", "\\\\")
