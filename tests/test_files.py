import mimetypes

import pytest

from shimkit.files import get_extension_by_mime_type


def test_markdown():
    assert get_extension_by_mime_type("text/markdown") == ".md"


def test_markdown_case_and_parameters_ignored():
    assert get_extension_by_mime_type("Text/Markdown; charset=utf-8") == ".md"


@pytest.mark.parametrize("mime_type", ["text/html", "image/png", "application/json"])
def test_known_type_round_trips(mime_type):
    ext = get_extension_by_mime_type(mime_type)
    assert ext.startswith(".")
    assert mimetypes.guess_type("file" + ext)[0] == mime_type


def test_unknown_type_gives_empty_string():
    assert get_extension_by_mime_type("application/x-shimkit-nothing") == ""


@pytest.mark.parametrize("mime_type", ["", "   ", "text//html", "text/", "/html", "te xt/html"])
def test_malformed_type_raises(mime_type):
    with pytest.raises(ValueError):
        get_extension_by_mime_type(mime_type)