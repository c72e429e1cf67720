"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "plate",
                "message": "Plate must follow the ABC1234 or ABC1D23 format",
                "code": "INVALID_FORMAT",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Vehicle with identifier '7' not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "year", "message": "Year must be greater than 1900", "code": "OUT_OF_RANGE"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier '7' not found", "code": "NOT_FOUND"},
                {
                    "detail": "A vehicle with plate ABC1D23 is already registered",
                    "code": "CONFLICT",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "year",
                            "message": "Year must be greater than 1900",
                            "code": "OUT_OF_RANGE",
                        },
                        {
                            "field": "price",
                            "message": "Price must be greater than zero",
                            "code": "OUT_OF_RANGE",
                        },
                    ],
                },
            ]
        }
    )
