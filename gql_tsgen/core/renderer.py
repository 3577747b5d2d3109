"""Template rendering for generated TypeScript.

Renders Jinja2 templates from the structured IR.

Supports custom templates via the template_dir parameter:
    renderer = TemplateRenderer(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

from pathlib import Path
from typing import Iterable, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .ir import GeneratedOperationRecord, OperationSpec
from .naming import factory_key

CLIENT_TYPE = "ApolloClient<object>"


def variable_placeholders(names: Iterable[str], depth: int) -> str:
    """Doc comment lines naming each variable with a placeholder value.

    Each line is a continuation of a ``/** */`` block, indented with ``depth``
    tabs after the leading ``*``.
    """
    padding = "\t" * depth
    return "".join(f"\n* {padding}{name}: // value for {name}" for name in names)


def example_arguments(names: list[str], depth: int) -> str:
    """The options argument of a usage example, empty when there are no variables."""
    if not names:
        return ""
    return (
        ", {\n"
        "*       variables: {" + variable_placeholders(names, depth) + "\n"
        "*       }\n"
        "*   }"
    )


class TemplateRenderer:
    """Renders operations, documents and the factory.

    Templates in template_dir take precedence over built-in templates.

    Available templates to override:
        - operation.ts.j2: Wrapper function with its doc comment
        - document.ts.j2: gql document constant
        - factory.ts.j2: Factory export
    """

    def __init__(self, template_dir: Optional[str] = None):
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["factory_key"] = factory_key
        self.env.filters["variable_placeholders"] = variable_placeholders
        self.env.filters["example_arguments"] = example_arguments

    def render_operation(self, spec: OperationSpec) -> str:
        return self.env.get_template("operation.ts.j2").render(op=spec, client_type=CLIENT_TYPE)

    def render_document(self, name: str, body: str, references: list[str]) -> str:
        """Render a gql constant; references are interpolated as '${name}'."""
        return self.env.get_template("document.ts.j2").render(
            name=name,
            body=body,
            references=[f"${{{reference}}}" for reference in references],
        )

    def render_factory(
        self,
        name: str,
        queries: list[GeneratedOperationRecord],
        mutations: list[GeneratedOperationRecord],
    ) -> str:
        return self.env.get_template("factory.ts.j2").render(
            name=name,
            client_type=CLIENT_TYPE,
            queries=queries,
            mutations=mutations,
        )
