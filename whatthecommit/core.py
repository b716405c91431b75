"""Core functionality for whatthecommit."""
from typing import List, Optional

from .models import GeneratedMessage
from .observers import GenerationObserver
from .sources import LineSource
from .template import RandomProvider, SystemRandomProvider, TemplateExpander


class CommitMessageGenerator:
    """Picks a template and a name and expands them into a commit message."""

    def __init__(
        self,
        source: LineSource,
        random_provider: Optional[RandomProvider] = None,
        expander: Optional[TemplateExpander] = None,
    ):
        self.source = source
        self.random_provider = random_provider or SystemRandomProvider()
        self.expander = expander or TemplateExpander(self.random_provider)
        self.observers: List[GenerationObserver] = []

    def add_observer(self, observer: GenerationObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: GenerationObserver) -> None:
        self.observers.remove(observer)

    def pick_template(self) -> str:
        return self.random_provider.choice(self.source.messages)

    def pick_name(self) -> str:
        return self.random_provider.choice(self.source.names)

    def generate(
        self, template: Optional[str] = None, name: Optional[str] = None
    ) -> GeneratedMessage:
        """Generate one commit message.

        The template is picked before the name. Either can be pinned by the
        caller, in which case no draw is made for it.

        Args:
            template: Template to expand instead of a random one
            name: Name to substitute instead of a random one

        Returns:
            GeneratedMessage: The template, the name and the resolved message
        """
        if template is None:
            template = self.pick_template()
        if name is None:
            name = self.pick_name()

        result = GeneratedMessage(
            template=template,
            name=name,
            message=self.expander.expand(template, name),
        )

        for observer in self.observers:
            observer.on_message_generated(result)

        return result
