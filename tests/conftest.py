import pytest


@pytest.fixture
def rust_grammar():
    """Skip test if the Rust grammar for tree-sitter is not installed."""
    return pytest.importorskip("tree_sitter_rust")
