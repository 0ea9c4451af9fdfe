"""Shared pytest fixtures for sourcedocs tests."""

import pytest

from sourcedocs import Config
from tests.helpers import discussion_xml


@pytest.fixture
def config():
    """Config with a fixed path prefix, independent of the working directory."""
    return Config(path_prefix="/work/project")


@pytest.fixture
def full_record():
    """A record with every field populated."""
    return {
        "name": "fetch(_:)",
        "parsedDeclaration": "func fetch(_ url: URL) -> Data",
        "docDeclaration": "func fetch(_ url: URL) throws -> Data",
        "docAbstract": "Fetches the contents of a URL.",
        "docDiscussionXML": discussion_xml(
            "<Para>Blocks until the download completes.</Para>",
            '<Para><Link href="https://example.com/net">Networking guide</Link></Para>',
            "<Note><Para>Not for the main thread.</Para></Note>",
        ),
        "docDiscussion": [
            {"Para": "Blocks until the download completes."},
            {"Note": "Not for the main thread."},
            {"Para": "Use the async variant instead."},
            {"Warning": "Throws on timeout."},
        ],
        "filePath": "/work/project/Sources/Net/Fetch.swift",
    }
