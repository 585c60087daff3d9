import pytest

from sample import build_sample_tree


@pytest.fixture
def sample():
    """The sample family as (tree, mary)."""
    return build_sample_tree()


@pytest.fixture
def tree(sample):
    return sample[0]


@pytest.fixture
def mary(sample):
    return sample[1]


@pytest.fixture
def people(tree):
    """Sample persons by first name."""
    return {p.first_name: p for p in tree}
