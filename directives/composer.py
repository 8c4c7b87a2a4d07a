# directives/composer.py

import logging
from typing import Callable, Mapping, Optional, Sequence

from directives.base_utils import BaseUtils, find_downstream_tokens
from directives.entities import Configuration, Document, RenderedSection, Section
from directives.section_registry import SECTIONS, SLOT_SUPPLIERS


logger = logging.getLogger("directive_composer")

SECTION_SEPARATOR = "\n\n"


class DirectiveComposer(BaseUtils):
    """
    Builds the directive document for one Configuration.

    Walks the section registry in order, drops the conditional section when its
    predicate does not hold, fills each {slot} from the slot suppliers and joins
    the result. ${name} tokens are carried through for a later binding stage.
    Holds no mutable state, so one instance can serve any number of callers.
    """

    def __init__(
        self,
        sections: Sequence[Section] = SECTIONS,
        suppliers: Mapping[str, Callable[[Configuration], str]] = SLOT_SUPPLIERS,
    ):
        self.sections = tuple(sections)
        self.suppliers = dict(suppliers)

    def _slot_values(self, section: Section, config: Configuration) -> dict[str, str]:
        values = {}
        for slot in section.slots:
            supplier = self.suppliers.get(slot)
            if supplier is not None:
                values[slot] = supplier(config)
        return values

    def render_section(self, section: Section, config: Configuration) -> RenderedSection:
        text, missing = self.unsafe_string_format(
            section.body,
            **self._slot_values(section, config),
        )
        if missing:
            logger.warning(f"Section '{section.name}' left slots unresolved: {', '.join(missing)}")
        return RenderedSection(name=section.name, text=text)

    def compose(self, config: Optional[Configuration] = None) -> Document:
        config = config or Configuration()

        applied = [section for section in self.sections if section.applies_to(config)]
        rendered = tuple(self.render_section(section, config) for section in applied)
        text = SECTION_SEPARATOR.join(s.text for s in rendered) + "\n"

        # taken from the templates so caller-supplied values never register as tokens
        downstream = []
        for section in applied:
            for token in find_downstream_tokens(section.body):
                if token not in downstream:
                    downstream.append(token)

        logger.debug(f"Composed directive document: {', '.join(s.name for s in rendered)}")
        return Document(
            sections=rendered,
            text=text,
            downstream_placeholders=tuple(downstream),
        )


DEFAULT_COMPOSER = DirectiveComposer()


def compose(config: Optional[Configuration] = None) -> Document:
    return DEFAULT_COMPOSER.compose(config)
