"""
A2A Protocol Types - JSON-RPC 2.0 envelope.

Every A2A call travels as a JSON-RPC 2.0 request; every answer is a response
carrying either a result or an error object. The envelope keys are identical
in snake_case and camelCase, so the models reuse the wire model base for its
projection and immutability rules.

Clients should ignore unknown fields for forward compatibility.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_serializer, model_validator

from ..errors import INTERNAL_ERROR, JSONRPCError, exception_for_code
from ..models.base import WireModel

JSONRPC_VERSION = "2.0"


def _project(value: Any) -> Any:
    """Project nested models (and lists/dicts of them) onto wire values."""
    if isinstance(value, WireModel):
        return value.to_dict()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [_project(item) for item in value]
    if isinstance(value, dict):
        return {key: _project(item) for key, item in value.items()}
    return value


class JsonRpcRequest(WireModel):
    """
    JSON-RPC 2.0 Request.

    A request without ``id`` is a notification: no response is expected.
    """

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    method: str = Field(..., description="Method name to invoke")
    params: dict[str, Any] | list[Any] | None = Field(
        default=None, description="Method parameters (object or array)"
    )
    id: str | int | None = Field(
        default=None, description="Request identifier (null for notifications)"
    )

    @property
    def is_notification(self) -> bool:
        return self.id is None

    @field_serializer("params")
    def _serialize_params(self, params: Any) -> Any:
        return _project(params)


class JsonRpcError(WireModel):
    """
    JSON-RPC 2.0 Error object.

    See :mod:`taskwire.errors` for the code table.
    """

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    data: Any | None = Field(default=None, description="Additional error data")

    @classmethod
    def from_exception(cls, exc: BaseException) -> JsonRpcError:
        """
        Convert an exception into a wire error.

        Protocol exceptions keep their code, message and data. Anything else
        becomes an internal error carrying only the exception message, so no
        implementation detail leaks over the wire.
        """
        if isinstance(exc, JSONRPCError):
            return cls(code=exc.code, message=exc.message, data=exc.data)
        return cls(code=INTERNAL_ERROR, message=str(exc))

    def to_exception(self) -> JSONRPCError:
        """Rebuild the named protocol exception for this error (not raised)."""
        return exception_for_code(self.code, self.message, self.data)


class JsonRpcResponse(WireModel):
    """
    JSON-RPC 2.0 Response.

    Either contains a result (success) or an error (failure). A response is
    successful exactly when ``error`` is absent.
    """

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: str | int | None = Field(default=None, description="Request identifier")
    result: Any | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _result_or_error(self) -> JsonRpcResponse:
        if self.error is not None and self.result is not None:
            raise ValueError("response must not carry both result and error")
        return self

    @field_serializer("result")
    def _serialize_result(self, result: Any) -> Any:
        return _project(result)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def from_result(cls, id: str | int | None, result: Any) -> JsonRpcResponse:
        """Create a success response."""
        return cls(id=id, result=result)

    @classmethod
    def from_error(
        cls, id: str | int | None, error: JsonRpcError | dict[str, Any] | BaseException
    ) -> JsonRpcResponse:
        """Create an error response from an error object, a wire dict or an exception."""
        if isinstance(error, BaseException):
            error = JsonRpcError.from_exception(error)
        return cls(id=id, error=error)

    def raise_for_error(self) -> None:
        """
        Raise the protocol exception carried by an error response.

        Raises:
            JSONRPCError: The exception matching ``error.code``
        """
        if self.error is not None:
            raise self.error.to_exception()
