"""Financial validation report schema."""

from typing import List

from pydantic import Field

from junket.schemas.base import CamelModel


class FinancialValidationResult(CamelModel):
    """
    Outcome of a trip sanity check.

    Errors make the result invalid; warnings are informational only.
    """

    is_valid: bool
    warnings: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
