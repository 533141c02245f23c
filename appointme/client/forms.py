"""Client-side form schemas, checked before anything is sent."""

from pydantic import BaseModel, EmailStr, ValidationError, field_validator

from appointme.utils.passwords import password_problem


class LoginForm(BaseModel):
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def password_rules(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        problem = password_problem(value)
        if problem:
            raise ValueError(problem)
        return value


def login_form_errors(email: str, password: str) -> dict[str, str]:
    """Map of field name to the first problem with it; empty when valid."""
    try:
        LoginForm(email=email, password=password)
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][0])
            if field == "email":
                message = "A valid email is required" if email else "Email is required"
            else:
                message = err["msg"].removeprefix("Value error, ")
            errors.setdefault(field, message)
        return errors
    return {}
