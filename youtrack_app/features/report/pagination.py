"""Page window arithmetic and the page-link strip."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from markupsafe import Markup

from youtrack_app.core.config import PAGINATION_PARAM
from youtrack_app.visual.templates import PAGINATION_SINGLE, Renderer

BOLD = "font-weight:bold;"
NORMAL = "font-weight:normal;"


def int_value_of(raw: Any, default: int) -> int:
    """Parse a positive int parameter, falling back to ``default``."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value > 0 else default


def start_index(current_page: int, page_size: int) -> int:
    """0-based index of the first issue shown on ``current_page``.

    Page 1 starts at 0 and page ``n > 1`` at ``(n - 1) * page_size + 1``, so
    index ``page_size`` itself is never shown. Kept as is: existing report
    consumers account for it.
    """
    if current_page == 1:
        return 0
    return (current_page - 1) * page_size + 1


@dataclass(slots=True, frozen=True)
class PageLink:
    num: int
    current: bool

    @property
    def style(self) -> str:
        return BOLD if self.current else NORMAL


@dataclass(slots=True)
class Paginator:
    page_size: int
    current_page: int
    num_pages: int

    @property
    def start(self) -> int:
        return start_index(self.current_page, self.page_size)

    def links(self) -> list[PageLink]:
        return [PageLink(num=i, current=i == self.current_page) for i in range(1, self.num_pages + 1)]

    def render_strip(
        self,
        renderer: Renderer,
        page_url: str | None,
        base_context: Mapping[str, Any] | None = None,
        param: str = PAGINATION_PARAM,
    ) -> Markup:
        """Render every page link; empty when the host page has no resolvable URL."""
        if not page_url:
            return Markup("")
        parts = []
        for link in self.links():
            context = {
                **(base_context or {}),
                "num": str(link.num),
                "param": param,
                "url": page_url,
                "style": link.style,
            }
            parts.append(renderer.render(PAGINATION_SINGLE, context))
        return Markup("").join(parts)
