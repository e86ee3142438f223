"""Code sample generator — renders request examples for every operation."""

from loguru import logger

from api_snippet_gen.generator.snippets import RENDERERS
from api_snippet_gen.parser.base import RequestExample
from api_snippet_gen.parser.openapi import default_server_url, extract_examples


class CodeSampleGenerator:
    """Generates ready-to-paste request snippets from an OpenAPI document."""

    def __init__(self, document: dict, server_url: str | None = None):
        self.document = document
        self.base_url = server_url or default_server_url(document)

    def collect_examples(self) -> list[RequestExample]:
        return extract_examples(self.document)

    def examples_for(self, language: str) -> list[str]:
        """Render one snippet per operation in the given language."""
        try:
            render = RENDERERS[language]
        except KeyError:
            raise ValueError(
                f"Unknown language {language!r}, expected one of: {', '.join(RENDERERS)}"
            ) from None
        snippets = [render(example, self.base_url) for example in self.collect_examples()]
        logger.debug("Rendered {} {} snippets against {}", len(snippets), language, self.base_url)
        return snippets

    def curl_examples(self) -> list[str]:
        return self.examples_for("curl")

    def python_examples(self) -> list[str]:
        return self.examples_for("python")

    def java_examples(self) -> list[str]:
        return self.examples_for("java")

    def javascript_examples(self) -> list[str]:
        return self.examples_for("javascript")

    def axios_examples(self) -> list[str]:
        return self.examples_for("axios")

    def all_examples(self) -> list[str]:
        """Snippets for every language: curl, python, java, javascript, axios."""
        results = []
        for language in RENDERERS:
            results.extend(self.examples_for(language))
        return results
