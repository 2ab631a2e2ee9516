"""
Income Endpoints
================

Functions for the Plaid income, bank income, credit session and user
endpoints. Each one builds a request, sends it through the configured
transport and decodes the response against its schema template.

Every function takes a parameter mapping and an optional config mapping.
``config["client"]`` selects the transport; the remaining entries override
settings (``client_id``, ``secret``, ``root_uri``, ``plaid_version``, ...).

Example::

    result = await income.get({"access_token": "access-sandbox-..."})
    if result.ok:
        streams = result.value.income.income_streams
"""

from typing import Any, Callable, Dict, Optional

from plaid_income.core.client.connection import new_client
from plaid_income.core.client.request import add_metadata, build_request
from plaid_income.core.client.transport import get_default_transport
from plaid_income.core.decoding.decoder import decoder_for
from plaid_income.core.decoding.schema import ListOf, Record
from plaid_income.models.schemas import (
    BankIncome,
    BankIncomeGetResponse,
    BankIncomeSummary,
    CreditSession,
    CreditSessionBankIncomeResult,
    CreditSessionItemAddResult,
    CreditSessionPayrollIncomeResult,
    CreditSessionResults,
    CreditSessionsGetResponse,
    Income,
    IncomeGetResponse,
    IncomeStream,
    Item,
    Result,
    UserCreateResponse,
)


INCOME_SCHEMA = Record(
    IncomeGetResponse,
    {
        "item": Record(Item),
        "income": Record(Income, {"income_streams": ListOf(Record(IncomeStream))}),
    },
)

BANK_INCOME_SCHEMA = Record(
    BankIncomeGetResponse,
    {
        "bank_income": ListOf(
            Record(BankIncome, {"bank_income_summary": Record(BankIncomeSummary)})
        ),
    },
)

CREDIT_SESSIONS_SCHEMA = Record(
    CreditSessionsGetResponse,
    {
        "sessions": ListOf(
            Record(
                CreditSession,
                {
                    "results": Record(
                        CreditSessionResults,
                        {
                            "bank_income_results": ListOf(Record(CreditSessionBankIncomeResult)),
                            "item_add_results": ListOf(Record(CreditSessionItemAddResult)),
                            "payroll_income_results": ListOf(
                                Record(CreditSessionPayrollIncomeResult)
                            ),
                        },
                    ),
                },
            )
        ),
    },
)

USER_CREATE_SCHEMA = Record(UserCreateResponse)


async def get(params: Dict[str, Any], config: Optional[Dict[str, Any]] = None) -> Result:
    """
    Get income data associated with an access token.

    Parameters::

        {"access_token": "access-env-identifier"}
    """
    return await _call("income/get", params, config, decoder_for(INCOME_SCHEMA))


async def get_bank_income(params: Dict[str, Any], config: Optional[Dict[str, Any]] = None) -> Result:
    """
    Get bank income reports for a user.

    Parameters::

        {"user_token": "user-environment-identifier", "options": {"count": 1}}
    """
    return await _call("credit/bank_income/get", params, config, decoder_for(BANK_INCOME_SCHEMA))


async def get_credit_sessions(
    params: Dict[str, Any], config: Optional[Dict[str, Any]] = None
) -> Result:
    """
    List Link sessions and their per-product results for a user.

    Parameters::

        {"user_token": "user-environment-identifier"}
    """
    return await _call(
        "credit/sessions/get", params, config, decoder_for(CREDIT_SESSIONS_SCHEMA)
    )


async def create_user(params: Dict[str, Any], config: Optional[Dict[str, Any]] = None) -> Result:
    """
    Create a user token for the income products.

    Parameters::

        {"client_user_id": "your-internal-user-id"}
    """
    return await _call("user/create", params, config, decoder_for(USER_CREATE_SCHEMA))


async def _call(
    endpoint: str,
    params: Dict[str, Any],
    config: Optional[Dict[str, Any]],
    decode_fn: Callable[[Any], Any],
) -> Result:
    config = config or {}
    transport = config.get("client") or get_default_transport()

    request = add_metadata(build_request(endpoint, params), config)
    response = await transport.send_request(request, new_client(config))
    return transport.handle_response(response, decode_fn)
