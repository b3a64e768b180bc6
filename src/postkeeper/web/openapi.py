from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

PUBLIC_ENDPOINTS = {
    ("POST", "/api/register"),
    ("POST", "/api/login"),
    ("GET", "/health"),
}


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Postkeeper API",
            version="0.1.0",
            summary="Personal posts behind bearer-token authentication",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "description": "Signed token from POST /api/login, valid for one hour by default",
            },
        }
        openapi_schema["security"] = [{"BearerAuth": []}]

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in PUBLIC_ENDPOINTS:
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")
    error: str | None = Field(None, description="Underlying error text (store failures only)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Unauthorized", "type": "authentication_error"},
                {"message": "Invalid token", "type": "access_denied"},
                {"message": "Post not found", "type": "not_found"},
            ]
        }
    }


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str = Field(..., description="Human-readable result")
