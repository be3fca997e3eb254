"""Path matching against a dependency identifier."""

from pathlib import Path
from typing import Union

from .errors import InvocationError

COMPILED_CLASS_SUFFIX = ".class"


def normalize_identifier(raw: str) -> str:
    """Normalize a user-supplied dependency identifier.

    Args:
        raw: Bare name (``log4j``) or ``group:artifact`` pair

    Returns:
        Lower-cased, stripped identifier

    Raises:
        InvocationError: If the identifier is empty
    """
    identifier = (raw or "").strip().lower()
    if not identifier:
        raise InvocationError("Dependency identifier cannot be empty")
    return identifier


def is_match(absolute_path_lowercased: str, dependency_id: str) -> bool:
    """Check whether a lower-cased path contains the identifier.

    Plain substring test, so ``log4j`` also matches ``log4j-api`` and any
    unrelated segment that happens to contain the same letters.

    Args:
        absolute_path_lowercased: Absolute path, already lower-cased
        dependency_id: Normalized identifier

    Returns:
        True if the identifier is a contiguous substring of the path
    """
    return dependency_id in absolute_path_lowercased


def is_compiled_class(path: Union[str, Path], suffix: str = COMPILED_CLASS_SUFFIX) -> bool:
    """Check whether a path names a compiled class file."""
    return Path(path).name.endswith(suffix)


def matches_path(
    path: Union[str, Path],
    dependency_id: str,
    compiled_suffix: str = COMPILED_CLASS_SUFFIX
) -> bool:
    """Match a destination path, ignoring compiled class files.

    Args:
        path: Absolute destination path
        dependency_id: Normalized identifier
        compiled_suffix: File suffix excluded from matching

    Returns:
        True if the path matches and is not a compiled class file
    """
    if is_compiled_class(path, compiled_suffix):
        return False
    return is_match(str(path).lower(), dependency_id)
