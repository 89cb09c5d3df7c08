# src/site_urls/url_resolver.py
"""URL resolution for relative URLs in HTML content.

This module converts relative ``href`` and ``src`` values in markup to
absolute URLs, using the site URL for root-relative values and the URL of
the current item (post, page) for everything else. Used when content leaves
the site, e.g. in feeds and emails, where relative links stop working.

The decision of whether a value gets rewritten (``should_absolutize``) is a
pure function and knows nothing about markup; ``HtmlAbsolutizer`` walks the
parsed document and applies it. Rewritten values are spliced back into the
caller's markup at their source positions, so everything else (entities,
quoting, void elements) comes back byte-identical.
"""

import html as html_lib
import re
from dataclasses import dataclass
from typing import NamedTuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

from .config import DEFAULT_STATIC_IMAGE_URL_PREFIX, UrlConfig
from .joiner import url_join
from .utils import log_op

# HTML attributes that contain single URLs, rewritten in this order
URL_ATTRIBUTES = ("href", "src")

# Tokenizing of a start tag, following html.parser's tolerant attribute rules
_TAG_OPEN = re.compile(r"<[a-zA-Z][^\s/>]*")
_ATTRIBUTE_GAP = re.compile(r"[\s/]*")
_ATTRIBUTE = re.compile(
    r"""([^\s/>][^\s/=>]*)(?:\s*=+\s*('[^']*'|"[^"]*"|(?!['"])[^>\s]*))?"""
)


def should_absolutize(
    value: str | None,
    assets_only: bool = False,
    static_image_url_prefix: str = DEFAULT_STATIC_IMAGE_URL_PREFIX,
) -> bool:
    """Decide whether an attribute value is a relative URL to rewrite.

    Absolute URLs, protocol-relative URLs and anchors are left alone. In
    assets-only mode, so is anything outside the image prefix. An empty
    value is relative and points at the current item.
    """
    if value is None:
        return False

    try:
        parsed = urlparse(value)
    except ValueError as e:
        log_op("url_rewrite_skipped", value=value, error=str(e))
        return False

    if parsed.scheme:
        return False

    # Do not convert protocol relative URLs
    if value.startswith("//"):
        return False

    # Don't convert internal links
    if value.startswith("#"):
        return False

    if assets_only and static_image_url_prefix not in value:
        return False

    return True


# =============================================================================
# Source positions
# =============================================================================


class _AttributeValue(NamedTuple):
    """Where an attribute value sits in the markup, as written."""

    start: int
    end: int
    raw: str
    quote: str
    bare: bool


def _line_offsets(markup: str) -> list[int]:
    """Offset of the first character of each line, counted the way html.parser does."""
    offsets = [0]
    offsets.extend(match.end() for match in re.finditer("\n", markup))
    return offsets


def _find_attribute(markup: str, tag_start: int, name: str) -> _AttributeValue | None:
    """Locate the value of attribute ``name`` in the start tag at ``tag_start``."""
    opening = _TAG_OPEN.match(markup, tag_start)
    if opening is None:
        return None

    pos = opening.end()
    while True:
        pos = _ATTRIBUTE_GAP.match(markup, pos).end()
        if pos >= len(markup) or markup[pos] == ">":
            return None

        attribute = _ATTRIBUTE.match(markup, pos)
        if attribute is None or attribute.end() == pos:
            return None

        if attribute.group(1).lower() == name:
            value = attribute.group(2)
            if value is None:
                name_end = attribute.end(1)
                return _AttributeValue(name_end, name_end, "", '"', True)

            quote = value[0] if value[:1] in ("'", '"') else ""
            raw = value[1:-1] if quote else value
            return _AttributeValue(attribute.start(2), attribute.end(2), raw, quote, False)

        pos = attribute.end()


@dataclass
class RewrittenHtml:
    """Output of ``HtmlAbsolutizer.absolutize``.

    ``document`` is the parsed tree carrying the rewritten values; ``html``
    (and ``str()``) is the input markup with only those values replaced.
    """

    document: BeautifulSoup
    html: str

    def __str__(self) -> str:
        return self.html


class HtmlAbsolutizer:
    """Rewrites relative resource URLs in HTML to absolute URLs.

    Example:
        absolutizer = HtmlAbsolutizer(UrlConfig(site_url="https://example.com"))
        result = absolutizer.absolutize(
            '<img src="/content/images/photo.jpg">',
            "https://example.com/",
            "https://example.com/my-post/",
        )
        str(result)
        # Result: '<img src="https://example.com/content/images/photo.jpg">'
    """

    def __init__(self, config: UrlConfig) -> None:
        self._config = config

    def absolutize(
        self,
        html: str | None,
        site_url: str,
        item_url: str | None,
        assets_only: bool = False,
    ) -> RewrittenHtml:
        """Rewrite qualifying href/src values.

        Values are read and replaced exactly as written in the markup, so
        entity references inside them are carried over undecoded.

        Args:
            html: Markup to process, None is treated as empty.
            site_url: Base for values starting with ``/`` (may include a sub-directory).
            item_url: Base for other relative values; they are skipped when None.
            assets_only: Only rewrite values under the static image prefix.

        Returns:
            The parsed document and the rewritten markup.
        """
        markup = html or ""
        document = BeautifulSoup(markup, "html.parser")
        line_offsets = _line_offsets(markup)
        edits: list[tuple[int, int, str]] = []

        for attribute_name in URL_ATTRIBUTES:
            for element in document.find_all(attrs={attribute_name: True}):
                located = self._locate(markup, line_offsets, element, attribute_name)
                if located is None:
                    log_op(
                        "url_rewrite_skipped",
                        value=element.get(attribute_name),
                        error="attribute not found in source markup",
                    )
                    continue

                resolved = self._resolve_value(located.raw, site_url, item_url, assets_only)
                if resolved is None:
                    continue

                element[attribute_name] = html_lib.unescape(resolved)
                if located.bare:
                    replacement = f'="{resolved}"'
                else:
                    replacement = f"{located.quote}{resolved}{located.quote}"
                edits.append((located.start, located.end, replacement))

        # Splice from the end so earlier offsets stay valid
        for start, end, replacement in sorted(edits, reverse=True):
            markup = markup[:start] + replacement + markup[end:]

        return RewrittenHtml(document=document, html=markup)

    @staticmethod
    def _locate(
        markup: str, line_offsets: list[int], element: Tag, attribute_name: str
    ) -> _AttributeValue | None:
        if element.sourceline is None or element.sourcepos is None:
            return None
        tag_start = line_offsets[element.sourceline - 1] + element.sourcepos
        return _find_attribute(markup, tag_start, attribute_name)

    def _resolve_value(
        self,
        value: str,
        site_url: str,
        item_url: str | None,
        assets_only: bool,
    ) -> str | None:
        """Return the absolute form of ``value``, or None to leave it untouched."""
        if not should_absolutize(
            value,
            assets_only=assets_only,
            static_image_url_prefix=self._config.static_image_url_prefix,
        ):
            return None

        # Root-relative values use the site URL (including sub-directory),
        # everything else is relative to the current item
        base_url = site_url if value.startswith("/") else item_url
        if base_url is None:
            return None

        return url_join([base_url, value], self._config.site_url)
