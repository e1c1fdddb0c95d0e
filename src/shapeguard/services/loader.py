"""Resolve guard references such as ``myapp.shapes:Segment``.

A reference is ``module.path:attribute`` where the attribute part may be
dotted (``myapp.shapes:Shapes.Point``). Short aliases from the ``[guards]``
config section are expanded first. Modules are imported with the project
root on ``sys.path``, so guards living next to ``shapeguard.toml`` resolve
the same way from the installed script as from ``python -m shapeguard``.
"""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Any


class GuardReferenceError(LookupError):
    """A guard reference could not be resolved to a callable guard.

    Attributes:
        code: ``GUARD_NOT_FOUND`` or ``INVALID_GUARD_REFERENCE``.
        reference: The reference as resolved after alias expansion.
    """

    def __init__(self, code: str, message: str, *, reference: str) -> None:
        super().__init__(message)
        self.code = code
        self.reference = reference


def expand_alias(reference: str, aliases: Mapping[str, str]) -> str:
    """Return the target of *reference* if it names an alias, else itself."""
    return aliases.get(reference, reference)


@contextmanager
def _importable_from(search_path: Path | None) -> Iterator[None]:
    """Put *search_path* first on ``sys.path`` for the duration of an import."""
    entry = str(search_path) if search_path is not None else None
    if entry is None or entry in sys.path:
        yield
        return
    sys.path.insert(0, entry)
    importlib.invalidate_caches()
    try:
        yield
    finally:
        if entry in sys.path:
            sys.path.remove(entry)


def resolve_guard(
    reference: str,
    aliases: Mapping[str, str] | None = None,
    *,
    search_path: Path | None = None,
) -> Any:
    """Import and return the guard named by *reference*.

    *search_path* (usually the project root) is importable while the guard
    module loads.

    Raises:
        GuardReferenceError: When the reference is malformed, the module or
            attribute is missing, or the target is not callable.
    """
    target = expand_alias(reference, aliases or {})
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path or module_name.startswith("."):
        raise GuardReferenceError(
            "INVALID_GUARD_REFERENCE",
            f"Guard reference must look like 'package.module:name', got {target!r}",
            reference=target,
        )

    try:
        with _importable_from(search_path):
            obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise GuardReferenceError(
            "GUARD_NOT_FOUND",
            f"Cannot import module {module_name!r}: {exc}",
            reference=target,
        ) from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise GuardReferenceError(
                "GUARD_NOT_FOUND",
                f"{target!r} has no attribute {part!r}",
                reference=target,
            ) from exc

    if not callable(obj):
        raise GuardReferenceError(
            "INVALID_GUARD_REFERENCE",
            f"{target!r} is a {type(obj).__name__}, not a guard",
            reference=target,
        )
    return obj
