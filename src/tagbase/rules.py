"""Rewrite rule generation for base-less tag archives."""

import logging
import re
from collections.abc import Iterable

from tagbase.types import RewriteRules, Tag
from tagbase.urls import normalize_tag_base

logger = logging.getLogger(__name__)

REDIRECT_QUERY_VAR = "rtb_tag_redirect"
TAG_PLACEHOLDER = "%post_tag%"
FEED_FORMATS = ("feed", "rdf", "rss", "rss2", "atom")
MULTISITE_BLOG_PREFIX = "blog/"


def blog_prefix(*, multisite: bool, subdomain_install: bool, main_site: bool) -> str:
    """Prefix for rules on the main site of a sub-directory multisite."""
    if multisite and not subdomain_install and main_site:
        return MULTISITE_BLOG_PREFIX
    return ""


def default_tag_permastruct(tag_base: str | None) -> str:
    """Host-style tag permastruct, e.g. ``/tag/%post_tag%``."""
    return f"/{normalize_tag_base(tag_base)}{TAG_PLACEHOLDER}"


def tag_rules(slug: str, pagination_base: str, prefix: str = "") -> RewriteRules:
    """Feed, pagination and bare archive rules for a single tag."""
    head = f"{prefix}({re.escape(slug)})"
    feeds = "|".join(FEED_FORMATS)
    return {
        f"{head}/(?:feed/)?({feeds})/?$": "index.php?tag=$matches[1]&feed=$matches[2]",
        f"{head}/{re.escape(pagination_base)}/?([0-9]{{1,}})/?$": (
            "index.php?tag=$matches[1]&paged=$matches[2]"
        ),
        f"{head}/?$": "index.php?tag=$matches[1]",
    }


def old_base_rule(tag_permastruct: str) -> RewriteRules:
    """Catch-all rule matching the old ``<base>/<slug>`` URL shape."""
    pattern = tag_permastruct.replace(TAG_PLACEHOLDER, "(.+)").strip("/")
    return {f"{pattern}$": f"index.php?{REDIRECT_QUERY_VAR}=$matches[1]"}


def generate_rewrite_rules(
    tags: Iterable[Tag],
    pagination_base: str,
    tag_permastruct: str,
    prefix: str = "",
) -> RewriteRules:
    """Build the full ordered rule set.

    Per-tag rules come first, in the order the tags are given, followed by
    the old-base catch-all. The host matcher is first-match-wins, so the
    catch-all must stay last.

    Args:
        tags: All tags, including empty ones
        pagination_base: Host pagination segment, usually ``page``
        tag_permastruct: Host tag permastruct containing ``%post_tag%``
        prefix: Multisite blog prefix, see ``blog_prefix()``

    Returns:
        Ordered mapping of pattern to query target
    """
    tags = list(tags)
    rules: RewriteRules = {}
    for tag in tags:
        rules.update(tag_rules(tag.slug, pagination_base, prefix))
    rules.update(old_base_rule(tag_permastruct))
    logger.debug("Generated %s rewrite rules for %s tags", len(rules), len(tags))
    return rules


def add_redirect_query_var(query_vars: list[str]) -> list[str]:
    """Register the redirect candidate as a public query variable."""
    if REDIRECT_QUERY_VAR in query_vars:
        return query_vars
    return [*query_vars, REDIRECT_QUERY_VAR]
