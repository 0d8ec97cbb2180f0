"""
Palette Picker Backend — Request Payload Validators
=====================================================

What:  One RequestSchema per route describing which keys must be present and
       how to word the error when one is not.
Why:   Every handler validates the same way and before touching the store.
How:   `schema.check(payload)` → ValidationResult(missing=[...]);
       `require(schema, payload)` raises ValidationError for the first gap.

Presence, not correctness:
    A key that exists satisfies its check whatever its value: "", null, a
    number where a string was expected. The one exception is the delete
    schemas, whose `id` must also be truthy (0, "", null are rejected).
"""

import math
import re
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

from palette_picker.exceptions import ValidationError
from palette_picker.models.palette import COLOR_FIELDS


class ValidationResult(BaseModel):
    """Outcome of checking one payload against one schema."""
    missing: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing

    @property
    def first_missing(self) -> Optional[str]:
        return self.missing[0] if self.missing else None


class RequestSchema(BaseModel):
    """
    Required-field contract for one route.

    Attributes:
        name:          Route label used in logs
        required:      Keys checked in order; the first absent one is reported
        message:       Error template; `{field}` is replaced with that key
        require_truthy: Also reject present-but-falsy values
    """
    name: str
    required: Tuple[str, ...]
    message: str
    require_truthy: bool = False

    model_config = {"frozen": True}

    def _present(self, payload: Mapping[str, Any], field: str) -> bool:
        if field not in payload:
            return False
        if self.require_truthy:
            return bool(payload[field])
        return True

    def check(self, payload: Optional[Mapping[str, Any]]) -> ValidationResult:
        payload = payload or {}
        return ValidationResult(
            missing=[field for field in self.required if not self._present(payload, field)]
        )

    def error_for(self, field: str) -> str:
        return self.message.format(field=field)


def require(schema: RequestSchema, payload: Optional[Mapping[str, Any]]) -> None:
    """
    Raise ValidationError unless every required field of `schema` is present.

    Raises:
        ValidationError: message names the first missing field,
                         context["missing"] lists all of them
    """
    result = schema.check(payload)
    if result.ok:
        return
    field = result.first_missing
    raise ValidationError(
        message=schema.error_for(field),
        field=field,
        context={"schema": schema.name, "missing": result.missing},
    )


# ══════════════════════════════════════════════════════════════════════════
# Route Schemas
# ══════════════════════════════════════════════════════════════════════════

PROJECT_CREATE = RequestSchema(
    name="project_create",
    required=("name",),
    message="You are missing a {field} property for this project",
)

# Same wording as create so clients handle both the same way
PROJECT_UPDATE = RequestSchema(
    name="project_update",
    required=("name",),
    message="You are missing a {field} property for this project",
)

PALETTE_CREATE = RequestSchema(
    name="palette_create",
    required=COLOR_FIELDS + ("project_id",),
    message="The expected format is: {{ project_id: <Integer> }}. You are missing the {field} property.",
)

PALETTE_PATCH = RequestSchema(
    name="palette_patch",
    required=("changeColor", "newColor"),
    message=(
        "The expected format is: {{ changeColor: <String>, newColor: <String> }}. "
        "You are missing the {field} property."
    ),
)

PROJECT_DELETE = RequestSchema(
    name="project_delete",
    required=("id",),
    message="The expected format is: {{ id: <Number> }}. You are missing the {field} property.",
    require_truthy=True,
)

PALETTE_DELETE = RequestSchema(
    name="palette_delete",
    required=("id",),
    message="The expected format is: {{ id: <Number> }}. You are missing the {field} property.",
    require_truthy=True,
)

COLOR_SEARCH = RequestSchema(
    name="color_search",
    required=("chosenColor",),
    message="The expected format is: ?chosenColor=<String>. You are missing the {field} property.",
)


def require_color_field(change_color: Any) -> str:
    """
    Ensure a PATCH targets one of the five color columns.

    Raises:
        ValidationError: any other column name (id, project_id, name, ...)
    """
    if change_color not in COLOR_FIELDS:
        raise ValidationError(
            message=f"The changeColor property must be one of: {', '.join(COLOR_FIELDS)}.",
            field="changeColor",
            context={"schema": PALETTE_PATCH.name, "value": repr(change_color)},
        )
    return change_color


_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def parse_integer_id(value: Any) -> Optional[int]:
    """
    Read a delete request's `id` the lenient way clients have always sent it.

    Integers pass through, floats are truncated, strings contribute their
    leading integer ("12", " 7 ", "42abc" → 42). Anything else, including
    booleans, yields None, which matches no row.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        return int(match.group(1)) if match else None
    return None
