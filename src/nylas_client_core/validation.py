"""Schema validation of JSON response bodies.

A schema is anything `pydantic.TypeAdapter` understands: a model class,
`typing.Any`, `dict[str, Any]`, `list[SomeModel]` and so on. Validation is
pluggable; anything with a matching `validate(schema, data)` method can
stand in for the default pydantic validator.

Example:
    ```python
    from nylas_client_core.validation import read_response

    grant = await read_response(response, Grant)
    ```
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, Protocol, TypeVar

import httpx
import pydantic

from nylas_client_core.errors.exceptions import NylasResponseValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of validating data against a schema.

    Exactly one of `value` (on success) or `error` (on failure) is meaningful.
    """

    success: bool
    value: T | None = None
    error: Exception | None = None

    @classmethod
    def ok(cls, value: T) -> "ValidationResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: Exception) -> "ValidationResult[T]":
        return cls(success=False, error=error)


class Validator(Protocol):
    def validate(self, schema: Any, data: Any) -> ValidationResult: ...


@lru_cache(maxsize=256)
def _type_adapter(schema: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(schema)


class PydanticValidator:
    """Validate data with a cached `pydantic.TypeAdapter` per schema."""

    def validate(self, schema: Any, data: Any) -> ValidationResult:
        try:
            value = _type_adapter(schema).validate_python(data)
        except pydantic.ValidationError as e:
            return ValidationResult.fail(e)
        return ValidationResult.ok(value)


default_validator = PydanticValidator()


def decode_payload(text: str, schema: Any, validator: Validator | None = None) -> ValidationResult:
    """Parse `text` as JSON and validate it against `schema`.

    Text that is not JSON is reported as a failed result, not raised.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return ValidationResult.fail(e)
    return (validator or default_validator).validate(schema, data)


async def read_text(response: httpx.Response) -> str:
    await response.aread()
    return response.text


async def read_response(response: httpx.Response, schema: Any, validator: Validator | None = None) -> Any:
    """Read a response body and return it validated against `schema`.

    The status code is not inspected; callers decide which responses reach
    this function.

    Args:
        response: Response to read.
        schema: Expected shape of the JSON body.
        validator: Validation capability, defaults to pydantic.

    Returns:
        The validated value.

    Raises:
        NylasResponseValidationError: If the body is not JSON or does not
            match the schema.
    """
    text = await read_text(response)
    result = decode_payload(text, schema, validator)
    if not result.success:
        logger.debug(f"Response with status {response.status_code} failed validation: {result.error}")
        raise NylasResponseValidationError(result.error)
    return result.value
