"""CLI entry point for api-snippet-gen."""

import json
import sys
from pathlib import Path

import click
from loguru import logger

from api_snippet_gen.generator.code import CodeSampleGenerator
from api_snippet_gen.generator.snippets import RENDERERS, to_json
from api_snippet_gen.generator.validator import validate_snippets
from api_snippet_gen.parser.base import RequestExample
from api_snippet_gen.parser.loader import DocumentError, load_document

FENCES = {
    "curl": "bash",
    "python": "python",
    "java": "java",
    "javascript": "javascript",
    "axios": "javascript",
}


def _load(doc_path: Path) -> dict:
    try:
        return load_document(doc_path)
    except DocumentError as e:
        raise click.ClickException(str(e)) from e


def _render_markdown(
    examples: list[RequestExample], snippets: dict[str, list[str]]
) -> str:
    """One section per language, one fenced block per operation."""
    sections = []
    for language, rendered in snippets.items():
        blocks = [f"## {language}"]
        for example, code in zip(examples, rendered):
            blocks.append(f"### {example.method} {example.path}\n\n```{FENCES[language]}\n{code}\n```")
        sections.append("\n\n".join(blocks))
    return "\n\n".join(sections) + "\n"


def _check(gen: CodeSampleGenerator, examples: list[RequestExample]) -> dict[str, str]:
    files = {}
    for i, (example, code) in enumerate(zip(examples, gen.python_examples()), start=1):
        stem = f"{i:03d}_{example.method.lower()}"
        files[f"{stem}.py"] = code
        if example.query_params:
            files[f"{stem}_query.json"] = to_json(example.query_params)
        if example.body is not None:
            files[f"{stem}_body.json"] = to_json(example.body)
    return validate_snippets(files)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log extraction and rendering details to stderr.")
def main(verbose: bool):
    """API Snippet Gen — request code samples from OpenAPI documents."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-l", "--language", "languages", multiple=True, type=click.Choice(list(RENDERERS)), help="Target language (repeatable). Defaults to all.")
@click.option("--server-url", envvar="API_SNIPPET_SERVER_URL", default=None, help="Base URL. Defaults to the document's first server.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output Markdown file. Defaults to stdout.")
@click.option("--check", is_flag=True, help="Syntax-check the generated Python snippets.")
def generate(doc_path: Path, languages: tuple[str, ...], server_url: str | None, output: Path | None, check: bool):
    """Generate request snippets for every operation in DOC_PATH."""
    click.echo(f"Parsing {doc_path}...", err=True)
    gen = CodeSampleGenerator(_load(doc_path), server_url=server_url)
    examples = gen.collect_examples()
    click.echo(f"Found {len(examples)} operations (base URL: {gen.base_url}).", err=True)

    if check:
        errors = _check(gen, examples)
        if errors:
            for name, message in errors.items():
                click.echo(f"  {name}: {message}", err=True)
            raise click.ClickException(f"{len(errors)} generated snippets failed validation")

    selected = [lang for lang in RENDERERS if not languages or lang in languages]
    result = _render_markdown(examples, {lang: gen.examples_for(lang) for lang in selected})

    if output is None:
        click.echo(result, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    click.echo(f"Snippets saved to {output}", err=True)


@main.command("list")
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print full request examples as JSON.")
def list_operations(doc_path: Path, as_json: bool):
    """List the operations snippets would be generated for."""
    gen = CodeSampleGenerator(_load(doc_path))
    examples = gen.collect_examples()
    if as_json:
        data = [example.model_dump() for example in examples]
        click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        return
    for example in examples:
        click.echo(f"{example.method} {example.path}")
