"""Tests for the availability index and filter."""

import pytest
from svseeds_collector.components.index import component_name
from svseeds_collector.components.index import filter_to_local
from svseeds_collector.components.index import index_available


def test_index_plain_and_internal_components(remote_dir):
    """Plain files get one key, internal files get the prefixed name and an alias."""
    avails = index_available(remote_dir)

    assert avails == {
        "button": "button.svelte",
        "icon": "_icon.svelte",
        "_icon": "_icon.svelte",
    }


def test_index_ignores_non_component_files(tmp_path, make_files):
    remote = make_files(tmp_path / "remote", ["__core.ts", "README.md", "card.svelte.bak", "card.svelte"])

    assert index_available(remote) == {"card": "card.svelte"}


def test_index_empty_directory(tmp_path):
    remote = tmp_path / "empty"
    remote.mkdir()

    assert index_available(remote) == {}


def test_index_key_counts(tmp_path, make_files):
    """One key per plain file, two keys per internal file, same file for both."""
    remote = make_files(tmp_path / "remote", ["a.svelte", "b.svelte", "_c.svelte", "_d.svelte"])

    avails = index_available(remote)

    assert len(avails) == 2 + 2 * 2
    for internal in ("c", "d"):
        assert avails[internal] == avails[f"_{internal}"] == f"_{internal}.svelte"


@pytest.mark.parametrize(
    ("file", "expected"),
    [
        ("button.svelte", "button"),
        ("_icon.svelte", "icon"),
        ("__badge.svelte", "_badge"),
    ],
)
def test_component_name(file, expected):
    assert component_name(file) == expected


class TestFilterToLocal:
    @pytest.fixture
    def avails(self, remote_dir):
        return index_available(remote_dir)

    def test_empty_local_set_is_noop(self, avails):
        assert filter_to_local(avails, frozenset()) == avails

    def test_all_local_keeps_everything(self, avails):
        assert filter_to_local(avails, frozenset(avails.values())) == avails

    def test_missing_internal_file_drops_both_entries(self, avails):
        filtered = filter_to_local(avails, frozenset({"button.svelte", "__core.ts"}))

        assert filtered == {"button": "button.svelte"}

    def test_missing_plain_file_drops_only_its_entry(self, avails):
        filtered = filter_to_local(avails, frozenset({"_icon.svelte"}))

        assert filtered == {"icon": "_icon.svelte", "_icon": "_icon.svelte"}

    def test_returns_new_mapping(self, avails):
        before = dict(avails)

        filtered = filter_to_local(avails, frozenset({"button.svelte"}))
        filtered["extra"] = "extra.svelte"

        assert avails == before
