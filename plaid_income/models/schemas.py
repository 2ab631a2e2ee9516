"""
Pydantic Models and Schemas
===========================

Response models for the income endpoints plus the result and error types
returned by every endpoint function.

Response models are populated by the decoder with ``model_construct``, so
field annotations document the provider's shape but are not enforced.
"""

from typing import Optional, List, Dict, Any

from pydantic import BaseModel, Field


# Error Models
class PlaidError(BaseModel):
    """Error details reported by Plaid or produced by the transport."""
    error_type: Optional[str] = Field(None, description="Broad error category")
    error_code: Optional[str] = Field(None, description="Specific error code")
    error_message: Optional[str] = Field(None, description="Developer-facing message")
    display_message: Optional[str] = Field(None, description="User-facing message")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")
    causes: List[Any] = Field(default_factory=list, description="Underlying causes")
    status_code: Optional[int] = Field(None, description="HTTP status, None for transport failures")
    documentation_url: Optional[str] = None
    suggested_action: Optional[str] = None


class PlaidClientError(Exception):
    """Exception raised when unwrapping a failed result."""

    def __init__(self, error: PlaidError):
        self.error = error
        super().__init__(
            f"{error.error_type or 'UNKNOWN'}: {error.error_code or ''} {error.error_message or ''}".strip()
        )


class Result(BaseModel):
    """Two-variant outcome of an endpoint call."""
    ok: bool = Field(..., description="Whether the call succeeded")
    value: Optional[Any] = Field(None, description="Decoded response when ok")
    error: Optional[PlaidError] = Field(None, description="Error details when not ok")

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: PlaidError) -> "Result":
        return cls(ok=False, error=error)

    def unwrap(self) -> Any:
        """Return the decoded value or raise ``PlaidClientError``."""
        if not self.ok:
            raise PlaidClientError(self.error or PlaidError())
        return self.value


# Item Models
class Item(BaseModel):
    """Plaid Item associated with an access token."""
    available_products: List[str] = Field(default_factory=list)
    billed_products: List[str] = Field(default_factory=list)
    consent_expiration_time: Optional[str] = None
    error: Optional[Dict[str, Any]] = None
    institution_id: Optional[str] = None
    item_id: Optional[str] = None
    update_type: Optional[str] = None
    webhook: Optional[str] = None


# Income Models
class IncomeStream(BaseModel):
    """A single detected income stream."""
    confidence: Optional[float] = None
    days: Optional[int] = None
    monthly_income: Optional[float] = None
    name: Optional[str] = None


class Income(BaseModel):
    """Income summary with its detected streams."""
    income_streams: List[IncomeStream] = Field(default_factory=list)
    last_year_income: Optional[float] = None
    last_year_income_before_tax: Optional[float] = None
    projected_yearly_income: Optional[float] = None
    projected_yearly_income_before_tax: Optional[float] = None
    max_number_of_overlapping_income_streams: Optional[float] = None
    number_of_income_streams: Optional[float] = None


class IncomeGetResponse(BaseModel):
    """Response of ``income/get``."""
    item: Optional[Item] = None
    income: Optional[Income] = None
    request_id: Optional[str] = None


# Credit Session Models
class CreditSessionBankIncomeResult(BaseModel):
    status: Optional[str] = None
    item_id: Optional[str] = None
    institution_id: Optional[str] = None


class CreditSessionItemAddResult(BaseModel):
    public_token: Optional[str] = None
    item_id: Optional[str] = None
    institution_id: Optional[str] = None


class CreditSessionPayrollIncomeResult(BaseModel):
    num_paystubs_retrieved: Optional[int] = None
    num_w2s_retrieved: Optional[int] = None
    institution_id: Optional[str] = None


class CreditSessionResults(BaseModel):
    """Per-session results grouped by product."""
    bank_income_results: List[CreditSessionBankIncomeResult] = Field(default_factory=list)
    item_add_results: List[CreditSessionItemAddResult] = Field(default_factory=list)
    payroll_income_results: List[CreditSessionPayrollIncomeResult] = Field(default_factory=list)


class CreditSession(BaseModel):
    """A Link session opened for a user token."""
    link_session_id: Optional[str] = None
    # ISO 8601 timestamp, kept as the provider's string
    session_start_time: Optional[str] = None
    results: Optional[CreditSessionResults] = None


class CreditSessionsGetResponse(BaseModel):
    """Response of ``credit/sessions/get``."""
    request_id: Optional[str] = None
    sessions: List[CreditSession] = Field(default_factory=list)


# Bank Income Models
class BankIncomeSummary(BaseModel):
    """Totals across all income sources of a bank income report."""
    total_amount: Optional[float] = None
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    income_sources_count: Optional[int] = None
    income_categories_count: Optional[int] = None
    income_transactions_count: Optional[int] = None


class BankIncome(BaseModel):
    """A bank income report."""
    bank_income_id: Optional[str] = None
    generated_time: Optional[str] = None
    days_requested: Optional[int] = None
    items: List[Dict[str, Any]] = Field(default_factory=list)
    bank_income_summary: Optional[BankIncomeSummary] = None
    warnings: List[Dict[str, Any]] = Field(default_factory=list)


class BankIncomeGetResponse(BaseModel):
    """Response of ``credit/bank_income/get``."""
    request_id: Optional[str] = None
    bank_income: List[BankIncome] = Field(default_factory=list)


# User Models
class UserCreateResponse(BaseModel):
    """Response of ``user/create``."""
    request_id: Optional[str] = None
    user_token: Optional[str] = None
    user_id: Optional[str] = None
