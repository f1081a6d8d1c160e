"""
Pytest configuration and fixtures for the genkit-migrate tests.

Provides sample Genkit projects laid out on disk and the analysis and
migration records built from them.
"""

import textwrap
from pathlib import Path
from typing import Dict

import pytest

from genkit_migrate.analyzer.project import ProjectAnalyzer
from genkit_migrate.models.config import AnalyzerConfig, TransformerConfig
from genkit_migrate.models.migration import Migration
from genkit_migrate.models.project import Project
from genkit_migrate.transformer.planner import ProjectTransformer


SAMPLE_MANIFEST = textwrap.dedent('''\
    [build-system]
    requires = ["setuptools>=61.0"]
    build-backend = "setuptools.build_meta"

    [project]
    name = "summarizer"
    version = "0.3.0"
    requires-python = ">=3.10"
    dependencies = [
        "genkit==0.4.1",
        "google-cloud-aiplatform>=1.38.0",
        "firebase-admin==6.2.0",
        "requests==2.31.0",
        "pydantic>=2.5",
    ]
''')

SAMPLE_MAIN = textwrap.dedent('''\
    from genkit.ai import Genkit
    from genkit.plugins.google_genai import GoogleAI
    from pydantic import BaseModel

    ai = Genkit(plugins=[GoogleAI()])


    class Article(BaseModel):
        text: str


    def summarize(article):
        return ai.generate(model=ai.model("googleai/gemini-1.5-pro"), prompt=article.text)


    summarize_flow = ai.define_flow(
        "summarize",
        summarize,
        input_schema=Article,
        output_schema=str,
        description="Summarize an article",
    )
''')

SAMPLE_HELPERS = textwrap.dedent('''\
    import json


    def load(path):
        with open(path) as f:
            return json.load(f)
''')


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Write a mapping of relative path to content under ``root``."""
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def genkit_project(tmp_path) -> Path:
    """A small Genkit project with one flow and one model reference."""
    return write_tree(tmp_path / "summarizer", {
        "pyproject.toml": SAMPLE_MANIFEST,
        "main.py": SAMPLE_MAIN,
        "helpers.py": SAMPLE_HELPERS,
        "config.yaml": "region: us-central1\n",
        "README.md": "# Summarizer\n",
    })


@pytest.fixture
def analyzed_project(genkit_project) -> Project:
    """Analysis results for the sample project."""
    analyzer = ProjectAnalyzer(AnalyzerConfig(source_provider="gcp", target_provider="aws"))
    return analyzer.analyze_project(genkit_project)


@pytest.fixture
def aws_migration(analyzed_project) -> Migration:
    """A gcp -> aws migration plan for the sample project."""
    transformer = ProjectTransformer(TransformerConfig(source_provider="gcp", target_provider="aws"))
    return transformer.transform_project(analyzed_project)


@pytest.fixture
def make_tree():
    """Return a helper that writes files under a directory."""
    return write_tree
