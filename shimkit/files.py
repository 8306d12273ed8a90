"""Looking up file extensions by MIME type."""

import mimetypes
import re

# Extensions registered here win over whatever the platform tables list.
_EXTRA_EXTENSIONS = {
    "text/markdown": ".md",
}

_MIME_CHARS = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_MEDIA_TYPE = re.compile(rf"({_MIME_CHARS})(/{_MIME_CHARS})?")

for _mime, _ext in _EXTRA_EXTENSIONS.items():
    mimetypes.add_type(_mime, _ext)


def _media_type(mime_type: str) -> str:
    media = mime_type.split(";", 1)[0].strip()
    if not media:
        raise ValueError("mime: no media type")
    if not _MEDIA_TYPE.fullmatch(media):
        raise ValueError(f"mime: invalid media type {mime_type!r}")
    return media.lower()


def get_extension_by_mime_type(mime_type: str) -> str:
    """Return an extension (with leading dot) for ``mime_type``.

    Returns an empty string when the type is unknown and raises
    ``ValueError`` when ``mime_type`` is not a well-formed media type.
    Of several known extensions the alphabetically first is returned.
    """
    media = _media_type(mime_type)
    if media in _EXTRA_EXTENSIONS:
        return _EXTRA_EXTENSIONS[media]
    extensions = sorted(set(mimetypes.guess_all_extensions(media, strict=False)))
    return extensions[0] if extensions else ""