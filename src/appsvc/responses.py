"""Decode received HTTP responses into models.

Issuing requests is left to the caller's HTTP pipeline; these helpers only
take an :class:`httpx.Response` that has already arrived.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from .errors import DeserializationError, HttpError
from .models.base import AppServiceModel, PagedCollection
from .models.common import DefaultErrorResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=AppServiceModel)
PageT = TypeVar("PageT", bound=PagedCollection[Any])


def _error_details(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    try:
        return DefaultErrorResponse.model_validate(body)
    except ValidationError:
        logger.debug("Error body did not match DefaultErrorResponse; keeping raw JSON")
        return body


def raise_for_status(resp: httpx.Response) -> None:
    """Raise :class:`HttpError` for 4xx/5xx responses."""

    if resp.status_code < 400:
        return
    details = _error_details(resp)
    message = resp.reason_phrase
    if isinstance(details, DefaultErrorResponse) and details.error and details.error.message:
        message = details.error.message
    raise HttpError(resp.status_code, message, details=details)


def decode_response(resp: httpx.Response, model: type[ModelT]) -> ModelT:
    """Validate the JSON body of ``resp`` as ``model``."""

    raise_for_status(resp)
    if not resp.content:
        raise DeserializationError(model.__name__, "response body is empty")
    return model.from_json(resp.content)


def decode_page(resp: httpx.Response, collection: type[PageT]) -> PageT:
    """Validate one page of a listing response."""

    page = decode_response(resp, collection)
    logger.debug(
        "Decoded %s page with %d item(s); more pages: %s",
        collection.__name__,
        len(page.value),
        page.continuation() is not None,
    )
    return page


__all__ = ["decode_page", "decode_response", "raise_for_status"]
