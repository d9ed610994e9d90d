"""Directory names excluded from scanning.

Subtrees whose base name matches one of these names hold schemas or
per-profile/per-connection data that is never schema-bound, so walking
them would only report false positives.
"""

import posixpath

# Exact base-name matches; the whole subtree below a match is skipped.
# TODO: match on path prefixes or globs instead, "prefs" also hides app dirs named that way.
BLACKLISTED_DIR_NAMES: tuple[str, ...] = (
    "schemas",
    "profiles",
    "preferences",
    "prefs",
    "connected_servers",
    "wireless",
    "vpn_connections",
)


def is_blacklisted(path: str) -> bool:
    """Check if the last component of ``path`` is a blacklisted name.

    Args:
        path: Directory path (e.g. ``/apps/foo/prefs``).

    Returns:
        True if the directory and its subtree must be skipped.
    """
    return posixpath.basename(path.rstrip("/")) in BLACKLISTED_DIR_NAMES
