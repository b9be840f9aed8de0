import os
import tempfile

import pytest

from walkdirtree.exclusion_rules import BaseExclusionRules, GitIgnoreExclusionRules


@pytest.fixture
def temp_ignore_file():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("# generated output\n")
        f.write("build/\n")
        f.write("!keep/build/\n")
        f.write("**/__pycache__/\n")
        f.write("/dist/\n")
    yield f.name
    os.unlink(f.name)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("build/", True),
        ("src/build/", True),
        ("keep/build/", False),
        ("pkg/__pycache__/", True),
        ("pkg/sub/__pycache__/", True),
        ("dist/", True),
        ("web/dist/", False),
        ("src/", False),
        ("buildtools/", False),
    ],
)
def test_rules_from_file(temp_ignore_file, path, expected):
    rules = GitIgnoreExclusionRules(rules_files=temp_ignore_file)
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_inline_patterns():
    rules = GitIgnoreExclusionRules(["node_modules/", ".venv/"])
    assert rules.exclude("node_modules/")
    assert rules.exclude("frontend/node_modules/")
    assert rules.exclude(".venv/")
    assert not rules.exclude("src/")


def test_empty_rules_exclude_nothing():
    rules = GitIgnoreExclusionRules()
    assert not rules.has_rules()
    assert not rules.exclude("anything/")


def test_add_rule_keeps_order_for_negation():
    rules = GitIgnoreExclusionRules(["cache/"])
    rules.add_rule("!important/cache/")
    assert rules.has_rules()
    assert rules.exclude("tmp/cache/")
    assert not rules.exclude("important/cache/")


def test_inline_and_file_rules_combine(temp_ignore_file):
    rules = GitIgnoreExclusionRules(["logs/"], rules_files=[temp_ignore_file])
    assert rules.exclude("logs/")
    assert rules.exclude("build/")


def test_missing_rules_file():
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules(rules_files="/non/existent/.ignore")


def test_base_rules_add_rule_not_supported():
    class SuffixRules(BaseExclusionRules):
        def exclude(self, path: str) -> bool:
            return path.endswith("tmp/")

    rules = SuffixRules()
    assert rules.exclude("a/tmp/")
    with pytest.raises(NotImplementedError):
        rules.add_rule("x")
