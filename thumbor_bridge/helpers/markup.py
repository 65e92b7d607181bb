from html import escape
from typing import Optional
from thumbor_bridge.helpers.file_utils import content_type_from_extension


def _attr(value) -> str:
    return escape("" if value is None else str(value), quote=True)


def picture_element(
    src: str,
    width: Optional[int],
    height: Optional[int],
    srcset: str = "",
    sizes: str = "",
    webp_srcset: str = "",
    webp_sizes: str = "",
    alt: str = "",
    css_class: str = "",
) -> str:
    """Render a ``<picture>`` with a webp source ahead of the original.

    All URLs are expected to be built already; this only assembles markup.
    """
    webp_type = content_type_from_extension("webp")
    return (
        "<picture>"
        f'<source srcset="{_attr(webp_srcset)}" sizes="{_attr(webp_sizes)}" '
        f'type="{webp_type}" />'
        f'<source srcset="{_attr(srcset)}" sizes="{_attr(sizes)}" />'
        f'<img width="{_attr(width)}" height="{_attr(height)}" '
        f'src="{_attr(src)}" class="{_attr(css_class)}" alt="{_attr(alt)}" />'
        "</picture>"
    )
