"""
Apache Ignite REST response models

Explicit shapes for the JSON bodies returned by the Ignite REST API
(``/ignite?cmd=...``). Missing or mistyped keys raise a pydantic
ValidationError, which the adapter reports as the query error.

Example:
    >>> envelope = IgniteEnvelope.model_validate(
    ...     {"successStatus": 0, "response": {"fieldsMetadata": [], "items": []}}
    ... )
    >>> envelope.query_response().items
    []
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

DATE_TYPE = "java.sql.Date"
TIMESTAMP_TYPE = "java.sql.Timestamp"


class IgniteFieldMetadata(BaseModel):
    """Column description attached to a ``qryfldexe`` response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    field_name: str = Field(..., alias="fieldName")
    field_type_name: Optional[str] = Field(default=None, alias="fieldTypeName")


class IgniteQueryResponse(BaseModel):
    """Payload of a successful ``qryfldexe`` call."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    fields_metadata: List[IgniteFieldMetadata] = Field(..., alias="fieldsMetadata")
    items: List[List[Any]]


class IgniteEnvelope(BaseModel):
    """Top-level body of every Ignite REST response.

    ``response`` is command specific: a query payload for ``qryfldexe``,
    a boolean for ``authenticate``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success_status: Optional[int] = Field(default=None, alias="successStatus")
    error: Optional[str] = None
    session_token: Optional[str] = Field(default=None, alias="sessionToken")
    response: Any = None

    @property
    def succeeded(self) -> bool:
        return self.success_status == 0

    def query_response(self) -> IgniteQueryResponse:
        """Parse ``response`` as a query payload.

        Raises:
            pydantic.ValidationError: If the payload is missing or malformed
        """
        return IgniteQueryResponse.model_validate(self.response)
