"""Shared fixtures for the release tag tests."""

import pytest

from release_tag.git import TagStore


class MemoryTagStore(TagStore):
    def __init__(self, tags=()):
        self.tags = set(tags)
        self.queries = []

    def exists(self, tag):
        self.queries.append(tag)
        return tag in self.tags


@pytest.fixture
def make_store():
    return MemoryTagStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in (
        "INPUT_BASEBRANCH",
        "INPUT_UPGRADETYPE",
        "INPUT_LASTTAG",
        "INPUT_LASTMAINTAG",
        "INPUT_LASTDEVELOPTAG",
        "GITHUB_OUTPUT",
        "GITHUB_ENV",
        "NEW_VERSION",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
