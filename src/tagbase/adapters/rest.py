"""Tag source backed by the WordPress REST API."""

from __future__ import annotations

import logging
from typing import Any, cast

from tagbase.types import Tag

logger = logging.getLogger(__name__)

PER_PAGE = 100


class RestTagSource:
    """Enumerates every tag of a site through ``/wp/v2/tags``."""

    def __init__(
        self,
        site_url: str,
        *,
        auth: tuple[str, str] | None = None,
        per_page: int = PER_PAGE,
    ) -> None:
        import httpx

        self._client = httpx.Client(
            base_url=site_url.rstrip("/") + "/wp-json",
            auth=auth,
            headers={"Accept": "application/json"},
            timeout=30.0,
        )
        self._per_page = per_page

    def _fetch_page(self, page: int) -> tuple[list[dict[str, Any]], int]:
        """Fetch one page of tags and the total page count."""
        response = self._client.get(
            "/wp/v2/tags",
            params={
                "hide_empty": "false",
                "per_page": self._per_page,
                "page": page,
                "orderby": "id",
            },
        )
        if not response.is_success:
            try:
                error = response.json().get("message", "Request failed")
            except Exception:
                error = f"HTTP {response.status_code}"
            raise RuntimeError(error)
        total_pages = int(response.headers.get("X-WP-TotalPages", "1"))
        return cast(list[dict[str, Any]], response.json()), total_pages

    def all_tags(self) -> list[Tag]:
        """Return every tag, including tags with no posts."""
        tags: list[Tag] = []
        page = 1
        while True:
            items, total_pages = self._fetch_page(page)
            tags.extend(
                Tag(
                    slug=item["slug"],
                    name=item.get("name", ""),
                    count=item.get("count", 0),
                )
                for item in items
            )
            if page >= total_pages:
                break
            page += 1
        logger.debug("Fetched %s tags over %s pages", len(tags), page)
        return tags

    def disconnect(self) -> None:
        """Close the HTTP client."""
        self._client.close()
