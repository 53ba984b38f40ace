"""
Project Templates

Maps technology stacks to the document holding their project structure.
"""

from dataclasses import dataclass

from .errors import TemplateNotFoundError


@dataclass(frozen=True)
class TemplateRef:
    """Location of a stack's template inside the store."""
    category: str
    filename: str


STACK_TEMPLATES: dict[str, TemplateRef] = {
    "nextjs": TemplateRef("naming", "project-structure.md"),
    "vite-react": TemplateRef("naming", "project-structure.md"),
    "express-api": TemplateRef("naming", "project-structure.md"),
}


def get_template_ref(stack: str) -> TemplateRef:
    """Raises TemplateNotFoundError for stacks with no template."""
    ref = STACK_TEMPLATES.get(stack)
    if ref is None:
        raise TemplateNotFoundError(stack)
    return ref


def list_stacks() -> list[str]:
    return list(STACK_TEMPLATES)
