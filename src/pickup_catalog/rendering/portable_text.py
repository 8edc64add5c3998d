import logging
from collections.abc import Iterable
from typing import Any

from markupsafe import Markup, escape

from pickup_catalog.cms.asset_urls import image_url
from pickup_catalog.config import CatalogSettings

log = logging.getLogger(__name__)

BLOCK_TAGS = {
    "normal": "p",
    "h1": "h1",
    "h2": "h2",
    "h3": "h3",
    "blockquote": "blockquote",
}
LIST_TAGS = {"bullet": "ul", "number": "ol"}
MARK_TAGS = {"strong": "strong", "em": "em", "code": "code"}

INLINE_IMAGE_WIDTH = 600
INLINE_IMAGE_HEIGHT = 400


class PortableTextRenderer:
    """Renders CMS rich text (portable text blocks) to HTML."""

    def __init__(self, settings: CatalogSettings):
        self.settings = settings

    def render(self, blocks: Iterable[dict[str, Any]]) -> Markup:
        parts: list[str] = []
        open_list: str | None = None

        for block in blocks:
            list_tag = None
            if block.get("_type") == "block":
                list_tag = LIST_TAGS.get(block.get("listItem", ""))

            if open_list and list_tag != open_list:
                parts.append(f"</{open_list}>")
                open_list = None
            if list_tag and open_list is None:
                parts.append(f'<{list_tag} class="vhs-list">')
                open_list = list_tag

            if list_tag:
                parts.append(f"<li>{self._render_spans(block)}</li>")
            elif block.get("_type") == "block":
                parts.append(self._render_block(block))
            elif block.get("_type") == "image":
                parts.append(self._render_image(block))
            else:
                log.debug("Skipping unsupported block type %r", block.get("_type"))

        if open_list:
            parts.append(f"</{open_list}>")
        return Markup("".join(parts))

    def _render_block(self, block: dict[str, Any]) -> str:
        tag = BLOCK_TAGS.get(block.get("style", "normal"), "p")
        return f"<{tag}>{self._render_spans(block)}</{tag}>"

    def _render_spans(self, block: dict[str, Any]) -> str:
        rendered: list[str] = []
        for span in block.get("children") or []:
            text = str(escape(span.get("text") or ""))
            # Outermost mark first, so wrap in reverse
            for mark in reversed(span.get("marks") or []):
                tag = MARK_TAGS.get(mark)
                if tag:
                    text = f"<{tag}>{text}</{tag}>"
            rendered.append(text)
        return "".join(rendered)

    def _render_image(self, block: dict[str, Any]) -> str:
        ref = (block.get("asset") or {}).get("_ref")
        if not ref:
            return ""
        try:
            src = image_url(
                ref, self.settings, width=INLINE_IMAGE_WIDTH, height=INLINE_IMAGE_HEIGHT
            )
        except ValueError:
            log.warning("Skipping inline image with bad asset ref %r", ref)
            return ""

        html = (
            f'<figure class="vhs-figure"><img src="{escape(src)}" alt="{escape(block.get("alt") or "")}"'
            f' width="{INLINE_IMAGE_WIDTH}" height="{INLINE_IMAGE_HEIGHT}">'
        )
        if block.get("caption"):
            html += f"<figcaption>{escape(block['caption'])}</figcaption>"
        return html + "</figure>"


def render_portable_text(
    blocks: Iterable[dict[str, Any]], settings: CatalogSettings
) -> Markup:
    return PortableTextRenderer(settings).render(blocks)
