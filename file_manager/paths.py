"""Path resolution against the session's current directory."""

import os


def resolve(current_dir: str, fragment: str) -> str:
    """Return an absolute path for ``fragment``.

    Absolute fragments pass through unchanged; relative ones are joined to
    ``current_dir`` and normalised.
    """
    if os.path.isabs(fragment):
        return fragment
    return os.path.normpath(os.path.join(current_dir, fragment))


def parent(current_dir: str) -> str:
    return resolve(current_dir, "..")


def is_direct_child(current_dir: str, target: str) -> bool:
    # exact string comparison, no case folding or re-normalisation of current_dir
    return os.path.dirname(target) == current_dir
