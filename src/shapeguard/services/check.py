"""CheckService: apply a configured guard to a JSON document.

The service resolves the guard reference (falling back to the ``[guards]``
default), parses the document, and runs the guard. All expected failures
come back as ``ok=False`` results with one of these codes:

- ``NO_GUARD``: no reference given and no default configured
- ``GUARD_NOT_FOUND`` / ``INVALID_GUARD_REFERENCE``: see :mod:`.loader`
- ``INVALID_JSON``: the document is not valid JSON
- ``VALIDATION_FAILED``: the guard rejected the value
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from shapeguard.guards.absent import ABSENT
from shapeguard.guards.contract import GUARD_FAILURES
from shapeguard.guards.errors import ValidationError
from shapeguard.services.loader import GuardReferenceError, resolve_guard
from shapeguard.services.result import ServiceResult

if TYPE_CHECKING:
    from shapeguard.config.settings import ShapeguardSettings

logger = logging.getLogger(__name__)


def parse_document(document: str) -> Any:
    """Parse a JSON document; a blank document means "no value" (``ABSENT``)."""
    if not document.strip():
        return ABSENT
    return json.loads(document)


class CheckService:
    """Validate and normalize documents against importable guards."""

    def __init__(self, settings: ShapeguardSettings) -> None:
        self._settings = settings

    def check(
        self,
        document: str,
        *,
        reference: str | None = None,
        name: str | None = None,
    ) -> ServiceResult:
        """Apply the guard named by *reference* to the JSON *document*."""
        op = "check"
        guards_config = self._settings.guards
        ref = reference or guards_config.default
        if not ref:
            return ServiceResult.failure(
                op,
                "NO_GUARD",
                "No guard reference given and no [guards] default configured",
            )

        try:
            guard = resolve_guard(
                ref, guards_config.aliases, search_path=self._settings.project_root
            )
        except GuardReferenceError as exc:
            return ServiceResult.failure(op, exc.code, str(exc), reference=exc.reference)
        logger.debug("Resolved guard %s to %r", ref, guard)

        try:
            value = parse_document(document)
        except json.JSONDecodeError as exc:
            return ServiceResult.failure(
                op,
                "INVALID_JSON",
                f"Invalid JSON: {exc.msg}",
                line=exc.lineno,
                column=exc.colno,
            )

        try:
            normalized = guard(value, name)
        except ValidationError as exc:
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                exc.message,
                kind=exc.kind.value,
                name=exc.name,
                type=exc.type_tag,
            )
        except GUARD_FAILURES as exc:
            # Raised by custom validator functions rather than built-in guards.
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                str(exc),
                exception=type(exc).__name__,
            )

        return ServiceResult.success(op, {"guard": ref, "value": normalized})

    def list_guards(self) -> ServiceResult:
        """Report the configured default guard and aliases."""
        guards_config = self._settings.guards
        aliases = [
            {"alias": alias, "reference": target}
            for alias, target in sorted(guards_config.aliases.items())
        ]
        warnings: list[str] = []
        if not aliases and guards_config.default is None:
            warnings.append("No guards configured in [guards]")
        return ServiceResult.success(
            "list_guards",
            {"default": guards_config.default, "aliases": aliases},
            warnings=warnings,
        )
