"""Template placeholder parsing and substitution."""

from .expander import TemplateExpander, expand_template
from .names import apply_case, name_variants
from .random_source import RandomProvider, SystemRandomProvider
from .scanner import normalize_range, parse_range_spec, scan

__all__ = [
    "TemplateExpander",
    "expand_template",
    "apply_case",
    "name_variants",
    "RandomProvider",
    "SystemRandomProvider",
    "normalize_range",
    "parse_range_spec",
    "scan",
]
