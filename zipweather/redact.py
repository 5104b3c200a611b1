from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote, quote_plus

import httpx

API_KEY_PLACEHOLDER = '{api_key}'


def build_url(url: str, params: Mapping[str, str]) -> str:
    return str(httpx.URL(url, params=dict(params)))


def _credential_forms(credential: str) -> list[str]:
    # httpx's own query encoding may differ from urllib's on reserved chars
    httpx_form = str(httpx.QueryParams({'k': credential})).partition('=')[2]
    forms = {
        credential,
        httpx_form,
        quote(credential, safe=''),
        quote_plus(credential),
    }
    return sorted(forms, key=len, reverse=True)


def redact(url_or_params: str | Mapping[str, str], credential: str) -> str:
    """
    Render *url_or_params* with every occurrence of *credential* replaced
    by the literal ``{api_key}`` placeholder.

    A mapping is rendered as a query string first. The credential is matched
    raw as well as in its percent- and form-encoded spellings, so a key with
    reserved characters cannot slip through URL encoding.
    """
    if isinstance(url_or_params, Mapping):
        text = str(httpx.QueryParams(dict(url_or_params)))
    else:
        text = url_or_params
    if not credential:
        return text
    for form in _credential_forms(credential):
        text = text.replace(form, API_KEY_PLACEHOLDER)
    return text
