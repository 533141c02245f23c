"""Request validators and the validation gate.

Validators never raise. Each one checks a single input (a path parameter
or the JSON body) and records problems on the request's
``ValidationContext``, so a client gets every field error in one response.
``validation_check`` is the gate that turns collected errors into a 400.
"""

from collections.abc import Awaitable, Callable
from typing import Annotated, TypeVar
from uuid import UUID

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from appointme.exceptions import FieldError, ValidationFailed
from appointme.models import UserRole

ModelT = TypeVar("ModelT", bound=BaseModel)


class ValidationContext:
    """Per-request list of field errors."""

    def __init__(self) -> None:
        self.errors: list[FieldError] = []

    def add(self, field: str, message: str) -> None:
        self.errors.append(FieldError(field=field, message=message))

    def add_pydantic_errors(self, exc: ValidationError) -> None:
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "body"
            message = err["msg"].removeprefix("Value error, ")
            self.add(field, message)

    @property
    def ok(self) -> bool:
        return not self.errors


async def get_validation_context(request: Request) -> ValidationContext:
    """The request's error list, created on first use."""
    ctx = getattr(request.state, "validation", None)
    if ctx is None:
        ctx = ValidationContext()
        request.state.validation = ctx
    return ctx


Context = Annotated[ValidationContext, Depends(get_validation_context)]


def _parse_id(value: str, field: str, label: str, ctx: ValidationContext) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        ctx.add(field, f"{label} must be a valid identifier")
        return None


# Path parameter validators
async def valid_business_id(business_id: str, ctx: Context) -> UUID | None:
    return _parse_id(business_id, "businessId", "Business ID", ctx)


async def valid_service_id(service_id: str, ctx: Context) -> UUID | None:
    return _parse_id(service_id, "serviceId", "Service ID", ctx)


async def valid_user_id(user_id: str, ctx: Context) -> UUID | None:
    return _parse_id(user_id, "userId", "User ID", ctx)


async def valid_user_type(user_type: str, ctx: Context) -> UserRole | None:
    try:
        return UserRole(user_type)
    except ValueError:
        allowed = ", ".join(role.value for role in UserRole)
        ctx.add("userType", f"User type must be one of: {allowed}")
        return None


def valid_body(schema: type[ModelT]) -> Callable[..., Awaitable[ModelT | None]]:
    """Build a validator that parses the JSON body into ``schema``.

    Unknown keys are reported by the schema itself (``extra="forbid"``).
    """

    async def validator(request: Request, ctx: Context) -> ModelT | None:
        try:
            payload = await request.json()
        except ValueError:
            ctx.add("body", "Request body must be valid JSON")
            return None
        if not isinstance(payload, dict):
            ctx.add("body", "Request body must be a JSON object")
            return None
        try:
            return schema.model_validate(payload)
        except ValidationError as exc:
            ctx.add_pydantic_errors(exc)
            return None

    validator.__name__ = f"valid_{schema.__name__}"
    return validator


async def validation_check(ctx: Context) -> None:
    """Stop the request with every collected field error, if there are any."""
    if not ctx.ok:
        raise ValidationFailed(ctx.errors)
