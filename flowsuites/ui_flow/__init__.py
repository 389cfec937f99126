"""UI flow framework, bundled flows and their tests."""
