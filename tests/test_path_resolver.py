"""Unit tests for exclusion specifier resolution."""

import pytest

from walkdirtree.directory_tree.directory_tree import DirectoryTree
from walkdirtree.exceptions import InvalidSpecifier
from walkdirtree.path_resolver import path_abs_prepare_arr, resolve_exclusions


@pytest.fixture
def project(tmp_path, canonical):
    for rel_dir in ["src/build", "src/vendor/lib", "pkg1/build", "pkg2/build", "docs"]:
        (tmp_path / rel_dir).mkdir(parents=True)
    (tmp_path / "notes.txt").write_text("")
    return canonical(tmp_path)


def test_absolute_specifier(project):
    assert resolve_exclusions(project, [project + "src/build"]) == {project + "src/build"}


def test_absolute_specifier_trailing_separator_is_stripped(project):
    assert resolve_exclusions(project, [project + "docs/"]) == {project + "docs"}


def test_relative_specifier(project):
    assert resolve_exclusions(project, ["src/vendor"]) == {project + "src/vendor"}


def test_relative_specifier_with_surrounding_separators(project):
    assert resolve_exclusions(project, ["/docs/"]) == {project + "docs"}


def test_backslashes_are_normalized(project):
    assert resolve_exclusions(project, ["src\\vendor\\lib"]) == {project + "src/vendor/lib"}


def test_unmatched_specifiers_are_ignored(project):
    assert resolve_exclusions(project, ["missing", "notes.txt", "/elsewhere/entirely", ""]) == set()


def test_absolute_path_outside_base_is_not_accepted(project, tmp_path, canonical):
    inner = tmp_path / "src"
    base = canonical(inner)
    # The parent's docs directory lies outside the base, and base + "docs" doesn't exist
    assert resolve_exclusions(base, [project + "docs"]) == set()


def test_mask_relative_to_base(project):
    assert resolve_exclusions(project, ["*/build"]) == {
        project + "src/build",
        project + "pkg1/build",
        project + "pkg2/build",
    }


def test_mask_already_prefixed_with_base(project):
    assert resolve_exclusions(project, [project + "pkg?"]) == {project + "pkg1", project + "pkg2"}


def test_mask_with_brace_alternation(project):
    assert resolve_exclusions(project, ["{docs,src/vendor}"]) == {project + "docs", project + "src/vendor"}


def test_mask_matches_only_directories(project):
    assert resolve_exclusions(project, ["*.txt"]) == set()


def test_duplicates_collapse(project):
    result = resolve_exclusions(project, ["docs", project + "docs", "d*s"])
    assert result == {project + "docs"}


def test_non_string_specifier_fails_before_filesystem_access():
    with pytest.raises(InvalidSpecifier):
        resolve_exclusions("/definitely/not/here/", ["docs", 42])


def test_exposed_aliases(project):
    assert path_abs_prepare_arr is resolve_exclusions
    assert DirectoryTree.path_abs_prepare_arr(project, ["docs"]) == {project + "docs"}
