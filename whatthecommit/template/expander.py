"""Template expansion: scan, resolve every token, join."""
from typing import Dict, List, Optional

from ..models import NameCase, NameToken, NumberToken, Segment
from .names import name_variants
from .random_source import RandomProvider, SystemRandomProvider
from .scanner import scan


class TemplateExpander:
    """Expands commit message templates with a name and random numbers.

    Each number token gets its own draw, in the order the tokens appear.
    Expansion is total: any template string yields a string.
    """

    def __init__(self, random_provider: Optional[RandomProvider] = None):
        self.random_provider = random_provider or SystemRandomProvider()

    def resolve(self, segment: Segment, variants: Dict[NameCase, str]) -> str:
        """Turn a single scanned segment into output text."""
        if isinstance(segment, NameToken):
            return variants[segment.case]
        if isinstance(segment, NumberToken):
            return str(self.random_provider.randint(segment.low, segment.high))
        return segment.text

    def resolve_segments(self, segments: List[Segment], name: str) -> List[str]:
        variants = name_variants(name)
        return [self.resolve(segment, variants) for segment in segments]

    def expand(self, template: str, name: str) -> str:
        """Substitute every placeholder in ``template``.

        Args:
            template: Raw template line
            name: Name used for the XNAMEX, XLOWERNAMEX and XUPPERNAMEX markers

        Returns:
            str: The resolved commit message
        """
        return "".join(self.resolve_segments(scan(template), name))


def expand_template(
    template: str, name: str, random_provider: Optional[RandomProvider] = None
) -> str:
    """Expand ``template`` once with a fresh expander."""
    return TemplateExpander(random_provider).expand(template, name)
