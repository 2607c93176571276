"""The /kind values a pull request may declare."""

DESIGN = "design"
DEPRECATION = "deprecation"
FEATURE = "feature"
FIX = "fix"
BREAKING_CHANGE = "breaking_change"
DOCUMENTATION = "documentation"
CLEANUP = "cleanup"
FLAKE = "flake"
INSTALL = "install"
BUMP = "bump"

DEPRECATED_NEW_FEATURE = "new_feature"
DEPRECATED_BUG_FIX = "bug_fix"

SUPPORTED_KINDS: tuple[str, ...] = (
    DESIGN,
    DEPRECATION,
    FEATURE,
    FIX,
    BREAKING_CHANGE,
    DOCUMENTATION,
    CLEANUP,
    FLAKE,
    INSTALL,
    BUMP,
)

DEPRECATED_KIND_MAP: dict[str, str] = {
    DEPRECATED_NEW_FEATURE: FEATURE,
    DEPRECATED_BUG_FIX: FIX,
}


def normalize_kind(kind: str) -> str:
    """Lower-case a kind and replace a deprecated kind with its successor."""
    lowered = kind.lower()
    return DEPRECATED_KIND_MAP.get(lowered, lowered)


def is_supported(kind: str) -> bool:
    """Return True if the kind is one of the supported kinds."""
    return kind in SUPPORTED_KINDS