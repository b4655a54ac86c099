"""Redirects from old-shape tag URLs."""

from collections.abc import Mapping
from typing import Any

from tagbase.rules import REDIRECT_QUERY_VAR
from tagbase.types import Redirect
from tagbase.urls import trailingslashit, user_trailingslashit


class RequestTerminated(Exception):
    """Raised after a redirect has been emitted; no further handlers run."""

    def __init__(self, redirect: Redirect) -> None:
        super().__init__(f"Redirected to {redirect.location} ({redirect.status})")
        self.redirect = redirect


def decide_redirect(
    query_vars: Mapping[str, Any],
    home_url: str,
    *,
    trailing_slash: bool = True,
) -> Redirect | None:
    """Return a 301 to the base-less archive if the catch-all rule matched."""
    if REDIRECT_QUERY_VAR not in query_vars:
        return None
    slug = str(query_vars[REDIRECT_QUERY_VAR])
    location = trailingslashit(home_url) + user_trailingslashit(
        slug, trailing_slash=trailing_slash
    )
    return Redirect(location=location)
