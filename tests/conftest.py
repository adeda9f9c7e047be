import pytest


@pytest.fixture
def snippet_lines():
    return ['Copyright 2024 Acme', 'All rights reserved']
