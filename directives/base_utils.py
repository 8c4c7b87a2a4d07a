# directives/base_utils.py


import logging
import re
from typing import Iterable


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s\n%(message)s\n"
)

logger = logging.getLogger("directive_composer")


# {slot} is filled by the composer; ${name} is left for a later binding stage.
RESOLVE_NOW_TOKEN = re.compile(r'(?<!\$)\{(\w+)\}')
DOWNSTREAM_TOKEN = re.compile(r'\$\{(\w+)\}')


def _unique(names: Iterable[str]) -> list[str]:
    seen = []
    for name in names:
        if name not in seen:
            seen.append(name)
    return seen


def find_resolve_now_tokens(text: str) -> list[str]:
    """
    Names of the {slot} tokens in text, in order of first appearance.
    """
    return _unique(RESOLVE_NOW_TOKEN.findall(text or ""))


def find_downstream_tokens(text: str) -> list[str]:
    """
    Names of the ${name} tokens in text, in order of first appearance.
    """
    return _unique(DOWNSTREAM_TOKEN.findall(text or ""))


class BaseUtils():

    def _coerce_field_to_str(self, value) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    def unsafe_string_format(self, dest_string, print_unused_keys_report=True, **kwargs):
        """
        Formats a destination string by replacing {key} placeholders with corresponding values from kwargs.

        it works differently from the standard "format" method as instead of looking for all the potential keys, looks only for the keys as passed in kwargs.
        ${key} placeholders are never touched, and substituted values are not scanned again.
        Returns the formatted string and the list of keys that were left unresolved.
        """
        # List to track keys that were not found
        missing_keys = []

        def replacer(match):
            key = match.group(1)
            if key in kwargs:
                return self._coerce_field_to_str(kwargs[key])
            else:
                missing_keys.append(key)
                return match.group(0)  # Leave the placeholder unchanged

        result = RESOLVE_NOW_TOKEN.sub(replacer, dest_string)
        if missing_keys and print_unused_keys_report:
            logger.warning(f"Missing keys within string-to-format in unsafe_string_format: {', '.join(missing_keys)}")
        return result, missing_keys
