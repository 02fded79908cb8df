"""Transaction endpoints (register, grant, revoke, request).

Every POST is accepted on any path and handed to
:meth:`~access_ledger.router.TransactionRouter.handle`, which decides
whether the path is known.  Bodies are ``application/x-www-form-urlencoded``
and responses are plain text with status 200, whatever the outcome.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from access_ledger.router import TransactionRouter

ONLY_POST = "Only POST requests are supported"

_NON_POST_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


async def _form_params(request: Request) -> dict[str, str]:
    """Decode the form body, keeping only plain string fields."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def router(tx_router: TransactionRouter) -> APIRouter:
    """Build the transaction router around ``tx_router``."""
    api = APIRouter()

    @api.post("/{path:path}", response_class=PlainTextResponse)
    async def post_transaction(path: str, request: Request):
        """Record one access-control operation and return its status."""
        params = await _form_params(request)
        # handle() blocks on the ledger and table locks; keep it off the loop.
        return await run_in_threadpool(tx_router.handle, f"/{path}", params)

    @api.api_route("/{path:path}", methods=_NON_POST_METHODS, response_class=PlainTextResponse)
    async def reject_non_post(path: str):
        return ONLY_POST

    return api
