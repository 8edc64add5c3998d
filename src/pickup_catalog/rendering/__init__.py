from pickup_catalog.rendering.portable_text import PortableTextRenderer, render_portable_text

__all__ = [
    "PortableTextRenderer",
    "render_portable_text",
]
