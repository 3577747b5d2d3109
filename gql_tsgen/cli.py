"""Command-line interface for gql-tsgen."""

import logging
from pathlib import Path

import click

from .core.config import PluginConfig
from .core.errors import CodegenError
from .core.hooks import AddHeaderHook, FilterOperationsHook, HookRunner
from .core.ir import MutationPolicy
from .core.loader import load_documents, load_external_fragments, load_schema
from .core.plugin import plugin, validate
from .core.renderer import TemplateRenderer


@click.group()
@click.version_option(package_name="gql-tsgen")
def main():
    """GraphQL to TypeScript client wrapper generator.

    Generate typed Apollo Client functions from GraphQL documents.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory.",
)
@click.option(
    "--documents",
    "-d",
    required=True,
    multiple=True,
    help="Document file, directory or glob pattern (repeatable).",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output TypeScript file (e.g., src/graphql/client.ts).",
)
@click.option(
    "--external-fragments",
    type=click.Path(exists=True),
    help="Document with fragments declared outside the generated file.",
)
@click.option(
    "--types-from",
    help="Module exporting the operation types, imported as a namespace.",
)
@click.option(
    "--mutation-policy",
    type=click.Choice([policy.value for policy in MutationPolicy]),
    default=MutationPolicy.RECORD_ONLY.value,
    show_default=True,
    help="What to generate for mutations.",
)
@click.option(
    "--factory-name",
    default="graphQlClient",
    show_default=True,
    help="Name of the exported factory.",
)
@click.option(
    "--exclude-prefix",
    help="Skip operations whose names start with this prefix.",
)
@click.option(
    "--template-dir",
    type=click.Path(file_okay=False),
    help="Directory with templates overriding the built-in ones.",
)
@click.option(
    "--header",
    help="Text added at the top of the generated file.",
)
@click.option(
    "--disable-checks",
    is_flag=True,
    help="Skip the output file extension check.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    documents: tuple[str, ...],
    output: str,
    external_fragments: str | None,
    types_from: str | None,
    mutation_policy: str,
    factory_name: str,
    exclude_prefix: str | None,
    template_dir: str | None,
    header: str | None,
    disable_checks: bool,
    verbose: bool,
):
    """Generate TypeScript client wrappers from GraphQL documents.

    Examples:

        gql-tsgen generate -s ./schema.graphql -d 'src/**/*.graphql' -o ./src/client.ts

        gql-tsgen generate -s ./schema -d ./queries -o ./client.ts --types-from ./types
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    output_path = Path(output).resolve()

    try:
        config = PluginConfig.from_mapping(
            {
                "disable_checks": disable_checks,
                "import_operation_types_from": types_from,
                "mutation_policy": mutation_policy,
                "factory_name": factory_name,
            }
        )

        # Check the output file before loading anything
        validate(None, [], config, str(output_path))

        if external_fragments:
            click.echo("Loading external fragments...")
            config = config.model_copy(
                update={"external_fragments": load_external_fragments(external_fragments)}
            )

        click.echo("Loading schema...")
        graphql_schema = load_schema(schema)

        click.echo("Loading documents...")
        docs = load_documents(documents)
        if verbose:
            for doc in docs:
                click.echo(f"  {doc.location}")

        hooks = HookRunner()
        if exclude_prefix:
            hooks.add_pre_hook(FilterOperationsHook(exclude_prefix=exclude_prefix))
        if header:
            hooks.add_post_hook(AddHeaderHook(header))

        click.echo("Generating code...")
        bundle = plugin(
            graphql_schema,
            docs,
            config,
            renderer=TemplateRenderer(template_dir),
            hooks=hooks,
        )
        code = hooks.run_post_hooks(output_path.name, bundle.render())
    except CodegenError as e:
        raise click.ClickException(str(e)) from e

    output_path.parent.mkdir(parents=True, exist_ok=True)

    click.echo(f"Writing to {output_path}...")
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(code)

    click.echo(f"Done! Generated {len(bundle.records)} operation(s) from {len(docs)} document(s).")


if __name__ == "__main__":
    main()
