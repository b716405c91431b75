"""Case variants of the name substituted into templates.

Only ASCII letters change case; every other character is kept as is, so
the variants always have the same length as the name.
"""
import string
from typing import Dict

from ..models import NameCase

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def apply_case(name: str, case: NameCase) -> str:
    """Return ``name`` transformed for a single name marker."""
    if case is NameCase.LOWER:
        return name.translate(_TO_LOWER)
    if case is NameCase.UPPER:
        return name.translate(_TO_UPPER)
    return name


def name_variants(name: str) -> Dict[NameCase, str]:
    """Map every name marker kind to its substitution text.

    Args:
        name: The name picked for this invocation

    Returns:
        Dict[NameCase, str]: The as-is, lowercase and uppercase variants
    """
    return {case: apply_case(name, case) for case in NameCase}
