"""WDK multi-blast parameter names and raw value normalization.

WDK hands plugin params over as internal values, which for string and
enum params may still be wrapped in single quotes. Everything in here reads
one named param out of the raw mapping and turns it into the scalar the
multi-blast service expects.
"""

from __future__ import annotations

import re
from enum import StrEnum

from veupath_multiblast.platform.errors import (
    MalformedNumericError,
    MissingParameterError,
)
from veupath_multiblast.platform.types import JSONObject, ParamValues


class BlastParam(StrEnum):
    """Names of the WDK question params backing a multi-blast search."""

    DATABASE_TYPE = "MultiBlastDatabaseType"
    ALGORITHM = "BlastAlgorithm"
    DATABASE_ORGANISM = "BlastDatabaseOrganism"
    QUERY_SEQUENCE = "BlastQuerySequence"

    # General config for all BLAST applications
    EXPECTATION_VALUE = "ExpectationValue"
    NUM_QUERY_RESULTS = "NumQueryResults"
    MAX_MATCHES_QUERY_RANGE = "MaxMatchesQueryRange"

    # General config specific to each BLAST application
    WORD_SIZE = "WordSize"
    SCORING_MATRIX = "ScoringMatrix"
    MATCH_MISMATCH_SCORE = "MatchMismatchScore"
    GAP_COSTS = "GapCosts"
    COMP_ADJUST = "CompAdjust"

    # Filter and masking config
    FILTER_LOW_COMPLEX = "FilterLowComplex"
    SOFT_MASK = "SoftMask"
    LOWER_CASE_MASK = "LowerCaseMask"


def all_param_names() -> list[str]:
    """Return every multi-blast param name, in declaration order."""
    return [param.value for param in BlastParam]


_PARAM_NAMES = frozenset(all_param_names())


def is_blast_param(name: str) -> bool:
    return name in _PARAM_NAMES


# One optional quote at the start and one at the end, stripped independently.
# The end may be followed by a single final line terminator (\n, \r\n, \r,
# \u0085, \u2028 or \u2029), which is kept.
_QUOTE_RE = re.compile(r"^'|'(?=(?:\r\n|[\n\r\u0085\u2028\u2029])?\Z)")
_INT_RE = re.compile(r"[+-]?[0-9]+")

# The service stores counts and scores as signed 32-bit ints.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def strip_quotes(value: str) -> str:
    """Strip a leading and/or trailing single quote.

    ``"'blastn'"`` and ``"'blastn"`` both become ``"blastn"``; inner quotes
    and further layers are kept.
    """
    return _QUOTE_RE.sub("", value)


def get_raw_value(params: ParamValues, name: str) -> str:
    """Look up a param value as supplied.

    :raises MissingParameterError: If the param is absent.
    """
    try:
        return params[name]
    except KeyError:
        raise MissingParameterError(name) from None


def get_normalized_value(params: ParamValues, name: str) -> str:
    """Look up a param and strip its quoting.

    :param params: Raw param values.
    :param name: Param name.
    :returns: Normalized value.
    :raises MissingParameterError: If the param is absent.
    """
    return strip_quotes(get_raw_value(params, name))


def get_boolean_value(params: ParamValues, name: str) -> bool:
    """True only when the normalized value is exactly ``"true"``."""
    return get_normalized_value(params, name) == "true"


def get_int_value(params: ParamValues, name: str) -> int:
    """Parse a normalized param value as a base-10 integer.

    :raises MalformedNumericError: If the value is not an integer literal or
        does not fit a signed 32-bit int.
    """
    return _parse_int(name, get_normalized_value(params, name))


def get_int_pair_value(params: ParamValues, name: str) -> tuple[int, int]:
    """Parse a ``"<int>,<int>"`` param value (gap costs, match/mismatch).

    Only the first two comma-separated components are read, so ``"4,5,6"``
    yields ``(4, 5)``.

    :raises MalformedNumericError: If there are fewer than two components
        or either one is not an integer literal.
    """
    value = get_normalized_value(params, name)
    parts = value.split(",")
    if len(parts) < 2:
        raise MalformedNumericError(name, value)
    return _parse_int(name, parts[0]), _parse_int(name, parts[1])


def parse_low_complexity_filter(params: ParamValues) -> JSONObject:
    """Build the ``dust``/``seg`` masking object from ``FilterLowComplex``.

    Any value starting with ``"no"`` (e.g. ``"no filter"``) disables it.
    """
    value = get_normalized_value(params, BlastParam.FILTER_LOW_COMPLEX)
    return {"enabled": not value.startswith("no")}


def _parse_int(name: str, value: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise MalformedNumericError(name, value)
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise MalformedNumericError(name, value)
    return number
