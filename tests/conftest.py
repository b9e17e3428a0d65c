"""Pytest configuration and shared fixtures for the adf_builder test suite."""

import os

import pytest
from hypothesis import Verbosity, settings

from adf_builder import DocumentBuilder, Link, TableBuilder, TextNode

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def example_link() -> Link:
    """Link with a title, as used in documentation examples."""
    return Link("https://example.com", title="Example")


@pytest.fixture
def sample_table() -> TableBuilder:
    """Two-row table with a header row and a data row."""
    table = TableBuilder(100, is_number_column_enabled=True)
    table.add_row([table.header([TextNode("Header").paragraph()]), table.header([TextNode("Content").paragraph()])])
    table.add_row([table.cell([TextNode("Header").paragraph()]), table.cell([TextNode("Content").paragraph()])])
    return table


@pytest.fixture
def sample_document(example_link: Link, sample_table: TableBuilder) -> DocumentBuilder:
    """Document with a heading, a linked paragraph and a table."""
    doc = DocumentBuilder()
    doc.add(TextNode("My Document").heading(1, local_id="title"))
    doc.add(TextNode("Click here", example_link.to_mark(), "strong").paragraph())
    doc.add(sample_table.to_document_node())
    return doc
