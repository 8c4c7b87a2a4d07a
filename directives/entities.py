# directives/entities.py
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple, TypeAlias

from langchain_core.messages import SystemMessage
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


SectionName: TypeAlias = str
SlotName: TypeAlias = str


class _FrozenModel(BaseModel):
    # frozen -> hashable, so a Configuration can key the document cache
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
    )


class BackendCredentials(_FrozenModel):
    supabase_url: Optional[str] = None
    anon_key: Optional[str] = None


class BackendIntegration(_FrozenModel):
    """
    Managed Supabase backend attached to the project.

    Its presence on a Configuration switches the database section on;
    the fields below only change text inside that section.
    """
    is_connected: bool = False
    has_selected_project: bool = False
    credentials: Optional[BackendCredentials] = None


class Configuration(_FrozenModel):
    """
    Environment facts the directive document is composed from.
    Every field is optional; absent values map to defaults at render time.
    """
    working_directory: Optional[str] = None
    allowed_markup_vocabulary: Optional[Tuple[str, ...]] = None
    backend_integration: Optional[BackendIntegration] = None

    @field_validator("allowed_markup_vocabulary")
    @classmethod
    def _dedupe_vocabulary(cls, value):
        if value is None:
            return None
        ordered = []
        for name in value:
            if name not in ordered:
                ordered.append(name)
        return tuple(ordered)

    @property
    def has_backend(self) -> bool:
        return self.backend_integration is not None


@dataclass(frozen=True)
class Section:
    name: SectionName
    body: str
    slots: Tuple[SlotName, ...] = ()
    # None -> always included
    predicate: Optional[Callable[[Configuration], bool]] = None

    @property
    def required(self) -> bool:
        return self.predicate is None

    def applies_to(self, config: Configuration) -> bool:
        if self.predicate is None:
            return True
        return bool(self.predicate(config))


@dataclass(frozen=True)
class RenderedSection:
    name: SectionName
    text: str


@dataclass(frozen=True)
class Document:
    sections: Tuple[RenderedSection, ...]
    text: str
    downstream_placeholders: Tuple[str, ...] = field(default=())

    @property
    def section_names(self) -> Tuple[SectionName, ...]:
        return tuple(s.name for s in self.sections)

    def section(self, name: SectionName) -> Optional[str]:
        for s in self.sections:
            if s.name == name:
                return s.text
        return None

    def as_system_message(self) -> SystemMessage:
        """
        Wrap the document for the agent layer, which feeds it as the system turn.
        """
        return SystemMessage(content=self.text)

    def __str__(self) -> str:
        return self.text
