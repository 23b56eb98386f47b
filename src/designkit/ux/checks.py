"""Product grid checks, loosely following Baymard-style listing guidelines.

Each check is a function taking a Page and returning True when the markup
meets the guideline. Matching is heuristic and regex based.
"""

from __future__ import annotations

import re

from designkit.ux.model import Check, Page

_CURRENCY_RE = re.compile(r"\$|€|£|\d+\.\d{2}")
_PRICE_WORD_RE = re.compile(r"price|cost", re.IGNORECASE)
_CTA_RE = re.compile(
    r"add to cart|add to bag|buy now|view product|shop now", re.IGNORECASE
)
_TITLE_RE = re.compile(
    r'<h[23]|class="[^"]*title[^"]*"|class="[^"]*name[^"]*"|itemprop="name"'
)
_IMAGE_LINK_RE = re.compile(r'<a[^>]*>[\s\S]*?<img|href="[^"]*"[^>]*>[\s\S]*?<img')
_STRUCTURE_RE = re.compile(r'<article|role="listitem"|class="[^"]*product[^"]*"')


def check_visible_price(page: Page) -> bool:
    """A currency amount is visible and the markup labels it as a price."""
    if not _CURRENCY_RE.search(page.text):
        return False
    return bool(_PRICE_WORD_RE.search(page.html)) or 'itemprop="price"' in page.html


def check_cta(page: Page) -> bool:
    return bool(_CTA_RE.search(page.text))


def check_product_title(page: Page) -> bool:
    return bool(_TITLE_RE.search(page.html))


def check_image_link(page: Page) -> bool:
    """Product images sit inside a link to the detail page."""
    return bool(_IMAGE_LINK_RE.search(page.html))


def check_semantic_structure(page: Page) -> bool:
    return bool(_STRUCTURE_RE.search(page.html))


PRODUCT_GRID_CHECKS: tuple[Check, ...] = (
    Check("visible-price", "Price visible on listing", check_visible_price),
    Check("cta-add-cart", "Clear add-to-cart or view CTA", check_cta),
    Check("product-title", "Product title/name present", check_product_title),
    Check("image-link", "Product image linked to PDP", check_image_link),
    Check("semantic-structure", "Semantic structure (article/card)", check_semantic_structure),
)
