"""Prompt templates with declared placeholders and a content insertion marker."""

import re
from collections.abc import Iterable, Mapping
from string import Formatter

# Placeholder that receives the joined page bodies
CONTENT_MARKER = "page_bodies"

# Variables a user-edited prompt may reference, by the name shown in the editor
CUSTOM_PROMPT_VARIABLES = {
    "organizationName": "organization_name",
    "websiteURL": "website_url",
    "email": "email",
    "phoneNumber": "phone_number",
    "address": "address",
    "organization_name": "organization_name",
    "website_url": "website_url",
    "phone_number": "phone_number",
}

# Where a user-edited prompt wants the page bodies
BODIES_MARKER = "INSERTBODIESHERE"
BODIES_HEADING = "Website Body Texts: \n"

CUSTOM_VARIABLE = re.compile(r"\{\{(\w+)\}\}")


class TemplateError(ValueError):
    """Template text could not be parsed."""


class MissingPlaceholderError(TemplateError):
    """One or more placeholders were not supplied a value."""

    def __init__(self, placeholders: Iterable[str]):
        self.placeholders = sorted(placeholders)
        super().__init__(f"Missing values for placeholders: {', '.join(self.placeholders)}")


def _parse_placeholders(text: str) -> frozenset[str]:
    try:
        parsed = list(Formatter().parse(text))
    except ValueError as e:
        raise TemplateError(f"Malformed template: {e}") from e

    names = set()
    for _, field_name, _, _ in parsed:
        if field_name is None:
            continue
        if not field_name.isidentifier():
            raise TemplateError(f"Invalid placeholder '{{{field_name}}}'")
        names.add(field_name)
    return frozenset(names)


class PromptTemplate:
    """A prompt with named `{placeholders}`.

    Literal braces are written as `{{` and `}}`. One placeholder, the content
    marker, is reserved for the page bodies and is filled by `render(content=...)`.
    """

    def __init__(self, text: str, content_marker: str = CONTENT_MARKER):
        self.text = text
        self.content_marker = content_marker
        self.placeholders = _parse_placeholders(text)

    @property
    def has_content_marker(self) -> bool:
        return self.content_marker in self.placeholders

    def missing(self, values: Mapping[str, str], include_content: bool = True) -> set[str]:
        """Placeholders without a supplied value."""
        required = set(self.placeholders)
        if not include_content:
            required.discard(self.content_marker)
        return required - set(values)

    def validate(self, values: Mapping[str, str]) -> None:
        """Check every placeholder except the content marker is supplied."""
        missing = self.missing(values, include_content=False)
        if missing:
            raise MissingPlaceholderError(missing)

    def render(self, values: Mapping[str, str], content: str | None = None) -> str:
        """Substitute all placeholders.

        Raises:
            MissingPlaceholderError: If any placeholder has no value
        """
        supplied = dict(values)
        if content is not None:
            supplied[self.content_marker] = content
        missing = self.missing(supplied)
        if missing:
            raise MissingPlaceholderError(missing)
        return self.text.format_map(supplied)

    @classmethod
    def from_custom(cls, text: str) -> "PromptTemplate":
        """Build a template from user-edited prompt text.

        Known variables such as `{organizationName}` are substituted and
        `INSERTBODIESHERE` (or `{page_bodies}`) receives the page bodies. All
        other braces are kept as literal text. When the text has no bodies
        marker the page bodies are appended at its end.
        """
        escaped = text.replace("{", "{{").replace("}", "}}")

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            if name == CONTENT_MARKER:
                return f"{{{CONTENT_MARKER}}}"
            if name in CUSTOM_PROMPT_VARIABLES:
                return f"{{{CUSTOM_PROMPT_VARIABLES[name]}}}"
            return match.group(0)

        body = CUSTOM_VARIABLE.sub(substitute, escaped)
        body = body.replace(BODIES_MARKER, f"{BODIES_HEADING}{{{CONTENT_MARKER}}}")

        template = cls(body)
        if not template.has_content_marker:
            template = cls(f"{body.rstrip()}\n\n{BODIES_HEADING}{{{CONTENT_MARKER}}}")
        return template

    def __repr__(self) -> str:
        return f"PromptTemplate(placeholders={sorted(self.placeholders)})"
