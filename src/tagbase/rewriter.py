"""The tag-base rewriter: host callbacks wired to the pure rule logic."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from tagbase.adapters.base import Host, OptionStore, TagSource
from tagbase.config import Settings, get_settings
from tagbase.hooks import HookTable
from tagbase.invalidation import FlushScheduler
from tagbase.permalink import remove_tag_base
from tagbase.redirect import RequestTerminated, decide_redirect
from tagbase.rules import add_redirect_query_var, generate_rewrite_rules
from tagbase.types import HookEvent, RewriteRules

logger = logging.getLogger(__name__)

INIT_PRIORITY = 999

TAG_BASE_OPTION = "tag_base"
HOME_OPTION = "home"


class TagBaseRewriter:
    """Removes the tag base from tag archive URLs.

    Collaborators are injected; call ``register()`` to install the callbacks
    into a ``HookTable``:

        rewriter = TagBaseRewriter(options, tags, host)
        hooks = HookTable()
        rewriter.register(hooks)
        hooks.apply(HookEvent.PERMALINK_GENERATED, "http://example.com/tag/news/")
        # "http://example.com/news/"
    """

    def __init__(
        self,
        options: OptionStore,
        tags: TagSource,
        host: Host,
        *,
        settings: Settings | None = None,
    ) -> None:
        self._options = options
        self._tags = tags
        self._host = host
        self._settings = settings or get_settings()
        self._scheduler = FlushScheduler(
            options, host, option_name=self._settings.flush_option
        )

    @property
    def scheduler(self) -> FlushScheduler:
        return self._scheduler

    @property
    def tag_base(self) -> str:
        """Configured tag base, falling back to the default when unset."""
        return str(
            self._options.get(TAG_BASE_OPTION) or self._settings.default_tag_base
        )

    def handlers(self) -> dict[HookEvent, tuple[Callable[..., Any], int]]:
        """Event -> (callback, priority) table."""
        return {
            HookEvent.INIT: (self.flush_rules, INIT_PRIORITY),
            HookEvent.TAG_CREATED: (self.schedule_flush, 10),
            HookEvent.TAG_EDITED: (self.schedule_flush, 10),
            HookEvent.TAG_DELETED: (self.schedule_flush, 10),
            HookEvent.QUERY_VARS_REQUESTED: (self.update_query_vars, 10),
            HookEvent.PERMALINK_GENERATED: (self.filter_tag_link, 10),
            HookEvent.REQUEST_RESOLVED: (self.redirect_old_tag_url, 10),
            HookEvent.REWRITE_RULES_REQUESTED: (self.tag_rewrite_rules, 10),
            HookEvent.ACTIVATED: (self.on_activation_and_deactivation, 10),
            HookEvent.DEACTIVATED: (self.on_activation_and_deactivation, 10),
        }

    def register(self, hooks: HookTable) -> None:
        """Install every callback into a hook table."""
        for event, (callback, priority) in self.handlers().items():
            hooks.add(event, callback, priority)

    # -------------------------------------------------------------------------
    # Callbacks
    # -------------------------------------------------------------------------

    def flush_rules(self) -> None:
        """On init, schedule a flush if tags changed since the last one."""
        self._scheduler.flush_if_dirty()

    def schedule_flush(self, *_args: Any) -> None:
        """Called when a tag is created, edited or deleted."""
        self._scheduler.mark_dirty()

    def update_query_vars(self, query_vars: list[str]) -> list[str]:
        return add_redirect_query_var(query_vars)

    def filter_tag_link(self, permalink: str, *_args: Any) -> str:
        return remove_tag_base(permalink, self.tag_base)

    def redirect_old_tag_url(self, query_vars: Mapping[str, Any]) -> Mapping[str, Any]:
        """Redirect requests that matched the old-base catch-all rule.

        Raises:
            RequestTerminated: After the redirect has been sent
        """
        home = str(self._options.get(HOME_OPTION) or "")
        target = decide_redirect(
            query_vars, home, trailing_slash=self._settings.trailing_slash
        )
        if target is None:
            return query_vars
        logger.info("Redirecting old tag URL to %s", target.location)
        self._host.redirect(target.location, target.status)
        raise RequestTerminated(target)

    def tag_rewrite_rules(self, _rules: RewriteRules | None = None) -> RewriteRules:
        """Replace the host's tag rules with base-less ones."""
        return generate_rewrite_rules(
            self._tags.all_tags(),
            self._settings.pagination_base,
            self._settings.permastruct_for(self.tag_base),
            self._settings.blog_prefix,
        )

    def on_activation_and_deactivation(self, *_args: Any) -> None:
        self._host.flush_rewrite_rules()
