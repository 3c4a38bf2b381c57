"""
Parsing Service

Functions for parsing submitted amounts and formatting scaled quantities
for display.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP

from constants import GRAM_SYNONYMS

# Plain decimal or scientific notation, e.g. '2', '-1.5', '.25', '3.', '1e3'
_NUMBER_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$')

_CENTS = Decimal('0.01')


def parse_amount(value):
    """
    Parse a submitted amount into a float.

    Blank input yields None. Anything that is not a finite number raises
    ValueError.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f'not a number: {value!r}')
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        if not _NUMBER_RE.match(text):
            raise ValueError(f'not a number: {text!r}')
        result = float(text)
    if not math.isfinite(result):
        raise ValueError(f'not a finite number: {value!r}')
    return result


def is_finite_number(value):
    """True for int/float values that are neither NaN nor infinite."""
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


def is_gram_unit(unit_name):
    """Check whether a unit name is one of the accepted gram spellings."""
    if not unit_name:
        return False
    return unit_name.strip().lower() in GRAM_SYNONYMS


def scale_amount(amount, factor=1):
    """
    Scale an amount and format it for display.

    Whole results print without a decimal point. Everything else is rounded
    to two places the way JavaScript's toFixed(2) rounds (on the exact
    binary value, halves away from zero) and then loses trailing zeros:
        scale_amount(3, 2)      -> '6'
        scale_amount(0.1, 1)    -> '0.1'
        scale_amount(1.333, 3)  -> '4'
        scale_amount(None, 2)   -> ''
    """
    if not is_finite_number(amount):
        return ''
    scaled = float(amount) * factor
    if not math.isfinite(scaled):
        return ''
    if scaled.is_integer():
        return str(int(scaled))

    rounded = Decimal(scaled).quantize(_CENTS, rounding=ROUND_HALF_UP)
    text = format(rounded, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return text


def split_instructions(instructions):
    """Split stored instructions into display steps, dropping blank lines."""
    if not instructions:
        return []
    steps = []
    for line in instructions.split('\n'):
        line = line.strip()
        if line:
            steps.append(line)
    return steps
