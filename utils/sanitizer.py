"""
Input Sanitization Module

Cleans user-submitted text before it is compared or stored. Output is
served as JSON, so nothing is HTML-escaped here; escaping belongs to
whatever renders the data.
"""

import re

# Control characters except tab and newline
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_text(text):
    """
    Sanitize a single-line value such as a name or title.

    Args:
        text: The text to sanitize (can be None)

    Returns:
        The text with control characters removed and surrounding
        whitespace trimmed. None becomes an empty string.
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Tabs and newlines have no place in a single-line value either
    text = _CONTROL_CHARS.sub('', text).replace('\t', ' ').replace('\n', ' ')

    return text.strip()


def sanitize_instructions(instructions):
    """
    Sanitize recipe instructions.

    Preserves newlines, which separate the steps, but normalizes Windows
    and old Mac line endings to '\\n'.
    """
    if not instructions:
        return ''

    if not isinstance(instructions, str):
        instructions = str(instructions)

    instructions = instructions.replace('\r\n', '\n').replace('\r', '\n')
    instructions = _CONTROL_CHARS.sub('', instructions)

    return instructions.strip()


def clean_name(text):
    """
    Trim a reference name (ingredient, unit or form).

    Only the ends are trimmed. Names match exactly, so inner whitespace and
    case are left alone.
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    return text.strip()
