"""Rendering of class sections and the index through Jinja2 templates."""

from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
)

from apidoc_md.class_definition import ClassDefinition
from apidoc_md.errors import TemplateLoadError
from apidoc_md.link_resolver import LinkResolver
from apidoc_md.strip_outer_paragraph_tags import strip_outer_paragraph_tags

CLASS_TEMPLATE = "class.md.j2"
INDEX_TEMPLATE = "index.md.j2"


class DocumentRenderer:
    """Renders resolved classes with the templates found in ``template_dir``.

    The template names default to ``class.md.j2`` and ``index.md.j2``.
    Templates get two filters: ``class_link`` (bound to the given
    LinkResolver) and ``strip_p_tags``. Both templates are loaded up front so
    a missing one fails before anything is rendered.
    """

    def __init__(
        self,
        template_dir: Path,
        link_resolver: LinkResolver,
        *,
        class_template: str = CLASS_TEMPLATE,
        index_template: str = INDEX_TEMPLATE,
    ) -> None:
        self.template_dir = template_dir
        if not template_dir.is_dir():
            msg = f"Template directory not found: {template_dir}"
            raise TemplateLoadError(msg)

        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["class_link"] = link_resolver.resolve_type_link
        self.env.filters["strip_p_tags"] = strip_outer_paragraph_tags

        self.class_template = self._load(class_template)
        self.index_template = self._load(index_template)

    def _load(self, name: str) -> Template:
        try:
            return self.env.get_template(name)
        except TemplateNotFound as e:
            msg = f"Missing template {name} in {self.template_dir}"
            raise TemplateLoadError(msg) from e
        except TemplateSyntaxError as e:
            msg = f"Malformed template {name}: {e}"
            raise TemplateLoadError(msg) from e
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read template {name}: {e}"
            raise TemplateLoadError(msg) from e

    def render_class(self, cls: ClassDefinition) -> str:
        """Render the section (or document) of a single class."""
        return self.class_template.render(cls=cls)

    def render_index(self, title: str, index: str) -> str:
        """Render the index document header around the rendered index lines."""
        return self.index_template.render(title=title, index=index)
