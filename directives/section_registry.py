# directives/section_registry.py
"""
Process-wide, read-only registry of the sections a directive document is made of.

SECTIONS is ordered: the composer walks it front to back. Exactly one entry is
conditional (the database instructions) and it keeps its slot whether or not it
is rendered, so the relative order of the required sections never moves.

Every {slot} a section body uses must be declared on the Section and must have a
supplier in SLOT_SUPPLIERS. This is checked once at import; a broken registry
never reaches compose().
"""

from typing import Callable, Dict, Iterable, Mapping, Tuple

from directives import directive_prompts as prompts
from directives.base_utils import find_resolve_now_tokens
from directives.entities import Configuration, Section


DEFAULT_WORKING_DIRECTORY = "/home/project"

DEFAULT_ALLOWED_HTML_ELEMENTS: Tuple[str, ...] = (
    "a", "b", "blockquote", "br", "code", "dd", "del", "details", "div", "dl", "dt", "em",
    "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i", "ins", "kbd", "li", "ol", "p", "pre",
    "q", "rp", "rt", "ruby", "s", "samp", "source", "span", "strike", "strong", "sub",
    "summary", "sup", "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul", "var",
)

DEFAULT_SUPABASE_URL = "your_supabase_url"
DEFAULT_SUPABASE_ANON_KEY = "your_supabase_anon_key"


class SectionRegistryError(ValueError):
    pass


# -----------------------
# Slot suppliers
# -----------------------

def _working_directory(config: Configuration) -> str:
    return config.working_directory or DEFAULT_WORKING_DIRECTORY


def _allowed_html_elements(config: Configuration) -> str:
    names = config.allowed_markup_vocabulary or DEFAULT_ALLOWED_HTML_ELEMENTS
    return ", ".join(f"<{name}>" for name in names)


def _credentials(config: Configuration):
    backend = config.backend_integration
    if backend is None:
        return None
    return backend.credentials


def _supabase_url(config: Configuration) -> str:
    creds = _credentials(config)
    return (creds and creds.supabase_url) or DEFAULT_SUPABASE_URL


def _supabase_anon_key(config: Configuration) -> str:
    creds = _credentials(config)
    return (creds and creds.anon_key) or DEFAULT_SUPABASE_ANON_KEY


def _supabase_connection_notice(config: Configuration) -> str:
    backend = config.backend_integration
    if backend is None or not backend.is_connected:
        return prompts.SUPABASE_NOT_CONNECTED_NOTICE
    if not backend.has_selected_project:
        return prompts.SUPABASE_NO_PROJECT_NOTICE
    return prompts.SUPABASE_READY_NOTICE


SLOT_SUPPLIERS: Mapping[str, Callable[[Configuration], str]] = {
    "cwd": _working_directory,
    "allowed_html_elements": _allowed_html_elements,
    "supabase_url": _supabase_url,
    "supabase_anon_key": _supabase_anon_key,
    "supabase_connection_notice": _supabase_connection_notice,
}


def _has_backend(config: Configuration) -> bool:
    return config.has_backend


def _section(name: str, template: str, slots: Tuple[str, ...] = (), predicate=None) -> Section:
    return Section(
        name=name,
        body=template.strip("\n"),
        slots=slots,
        predicate=predicate,
    )


# -----------------------
# Consistency check
# -----------------------

def validate_registry(
    sections: Iterable[Section],
    suppliers: Mapping[str, Callable[[Configuration], str]],
) -> None:
    """
    Raise SectionRegistryError if the registry cannot render every slot,
    declares slots its body never uses, repeats a name, or has more than
    one conditional section.
    """
    names: Dict[str, int] = {}
    conditional = []
    for section in sections:
        if section.name in names:
            raise SectionRegistryError(f"Duplicate section name: {section.name}")
        names[section.name] = 1

        used = set(find_resolve_now_tokens(section.body))
        declared = set(section.slots)
        undeclared = sorted(used - declared)
        if undeclared:
            raise SectionRegistryError(
                f"Section '{section.name}' uses undeclared slots: {', '.join(undeclared)}"
            )
        unused = sorted(declared - used)
        if unused:
            raise SectionRegistryError(
                f"Section '{section.name}' declares slots it never uses: {', '.join(unused)}"
            )
        unsupplied = sorted(s for s in declared if s not in suppliers)
        if unsupplied:
            raise SectionRegistryError(
                f"Section '{section.name}' has slots without a supplier: {', '.join(unsupplied)}"
            )

        if not section.required:
            conditional.append(section.name)

    if len(conditional) > 1:
        raise SectionRegistryError(
            f"Only one conditional section is supported, found: {', '.join(conditional)}"
        )


SECTIONS: Tuple[Section, ...] = (
    _section("identity", prompts.IDENTITY_PROMPT),
    _section("system_constraints", prompts.SYSTEM_CONSTRAINTS_PROMPT, slots=("cwd",)),
    _section("architecture_standards", prompts.ARCHITECTURE_STANDARDS_PROMPT),
    _section("styling_and_ux_standards", prompts.STYLING_AND_UX_STANDARDS_PROMPT),
    _section("data_fetching_standards", prompts.DATA_FETCHING_STANDARDS_PROMPT),
    _section("message_formatting_info", prompts.MESSAGE_FORMATTING_PROMPT, slots=("allowed_html_elements",)),
    _section(
        "database_instructions",
        prompts.DATABASE_INSTRUCTIONS_PROMPT,
        slots=("supabase_connection_notice", "supabase_url", "supabase_anon_key", "cwd"),
        predicate=_has_backend,
    ),
    _section("code_formatting_info", prompts.CODE_FORMATTING_PROMPT),
    _section("chain_of_thought_instructions", prompts.CHAIN_OF_THOUGHT_PROMPT),
    _section("artifact_info", prompts.ARTIFACT_INFO_PROMPT),
    _section("critical_rules", prompts.CRITICAL_RULES_PROMPT, slots=("cwd",)),
    _section("examples", prompts.EXAMPLES_PROMPT),
)

validate_registry(SECTIONS, SLOT_SUPPLIERS)


def section_names() -> Tuple[str, ...]:
    return tuple(s.name for s in SECTIONS)


def get_section(name: str) -> Section:
    for section in SECTIONS:
        if section.name == name:
            return section
    raise KeyError(name)
