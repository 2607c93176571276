"""Names of the labels the labeler manages."""

INVALID_KIND_LABEL = "do-not-merge/kind-invalid"
INVALID_RELEASE_NOTE_LABEL = "do-not-merge/release-note-invalid"
RELEASE_NOTE_LABEL = "release-note"
DEPRECATED_RELEASE_NOTE_LABEL = "release-note-needed"
RELEASE_NOTE_NONE_LABEL = "release-note-none"

KIND_PREFIX = "kind/"


def kind_label(kind: str) -> str:
    """Return the label name used for a kind."""
    return KIND_PREFIX + kind