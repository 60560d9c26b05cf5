"""Markdown rendering for chat messages.

Chat text is parsed as markdown and the resulting HTML is filtered through an
allow-list sanitizer, so the output can be inserted into the message display
as-is.
"""

import re
from functools import partial
from types import MappingProxyType
from typing import Optional

import bleach
import structlog
from bleach import html5lib_shim
from bleach.linkifier import LinkifyFilter
from bleach.sanitizer import Cleaner
from markdown_it import MarkdownIt

logger = structlog.get_logger()

# Allowed HTML tags for rendered messages
ALLOWED_TAGS = frozenset({
    # Inline
    "strong", "em", "s", "code", "a", "br",
    # Block
    "p", "pre", "ul", "ol", "li", "blockquote",
})

# Allowed attributes for tags
ALLOWED_ATTRIBUTES = MappingProxyType({
    "a": ("href", "target", "rel"),
    "code": ("class",),
})

# Allowed protocols for href attributes
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# Elements removed together with their content
DROP_CONTENT_TAGS = frozenset({"script", "style", "textarea", "option", "noscript"})

# Bare text is only linked when it starts with http(s):// or www.
URL_RE = re.compile(
    r"""\(*  # Match any opening parentheses.
    \b(?<![@.])(?:https?://(?:(?:\w+:)?\w+@)?|www\.)
    [\w-]+(?:\.[\w-]+)*(?::[0-9]+)?  # host(:port)?
    (?:[/?\#][^\s\{\}\|\\\^`<>"]*)?  # /path?query#fragment
    """,
    re.IGNORECASE | re.VERBOSE | re.UNICODE,
)

# Tags whose text is never autolinked
LINKIFY_SKIP_TAGS = ("pre", "code")


class DropContentFilter(html5lib_shim.Filter):
    """Remove ``DROP_CONTENT_TAGS`` elements and every token inside them."""

    def __iter__(self):
        depth = 0
        for token in super().__iter__():
            if token.get("name") in DROP_CONTENT_TAGS:
                if token["type"] == "StartTag":
                    depth += 1
                    continue
                if token["type"] == "EndTag":
                    depth = max(depth - 1, 0)
                    continue
            if not depth:
                yield token


class MessageCleaner(Cleaner):
    """
    bleach ``Cleaner`` that drops script-like elements with their content.

    bleach's parser turns tags outside the allow-list into text before any
    filter runs, so the drop tags are added to the parser's tag set and
    ``DropContentFilter`` wraps the tree walker, ahead of the sanitizer.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.parser = html5lib_shim.BleachHTMLParser(
            tags=self.tags | DROP_CONTENT_TAGS,
            strip=self.strip,
            consume_entities=False,
            namespaceHTMLElements=False,
        )
        tree_walker = self.walker
        self.walker = lambda dom: DropContentFilter(tree_walker(dom))


def _secure_link(attrs: dict, new: bool = False) -> dict:
    """
    Force every link to open in a new tab without an opener reference.

    Applied to links already present in the markup as well as bare URLs
    and email addresses linkified during cleaning. Values from the input
    are overwritten.

    Args:
        attrs: Link attributes keyed by (namespace, name)
        new: Whether the link was created by linkify

    Returns:
        Modified attributes dictionary
    """
    attrs[(None, "target")] = "_blank"
    attrs[(None, "rel")] = "noopener noreferrer"
    return attrs


def _build_parser() -> MarkdownIt:
    """Markdown parser with line breaks, tables and strikethrough enabled."""
    # commonmark passes raw HTML through; the cleaner deals with it
    md = MarkdownIt("commonmark", {"breaks": True})
    md.enable(["table", "strikethrough"])
    return md


def _build_cleaner() -> MessageCleaner:
    """Allow-list cleaner that also linkifies URLs and email addresses."""
    return MessageCleaner(
        tags=ALLOWED_TAGS,
        attributes={tag: list(attrs) for tag, attrs in ALLOWED_ATTRIBUTES.items()},
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        filters=[
            partial(
                LinkifyFilter,
                callbacks=[_secure_link],
                skip_tags=LINKIFY_SKIP_TAGS,
                parse_email=True,
                url_re=URL_RE,
            )
        ],
    )


_parser = _build_parser()
_cleaner = _build_cleaner()


def render_markdown(content: str) -> str:
    """
    Render chat message markdown to sanitized HTML.

    Single newlines become line breaks, tables and strikethrough are parsed,
    and bare ``http(s)://``/``www.`` URLs and email addresses are linked.
    Tags outside the allow-list are removed with their text kept in place,
    except script-like elements, which are dropped with their content.
    Disallowed attributes are removed and every link gets
    ``target="_blank"`` and ``rel="noopener noreferrer"``.

    Args:
        content: Raw, untrusted markdown

    Returns:
        HTML fragment safe for direct insertion
    """
    if not content:
        return ""

    rendered = _cleaner.clean(_parser.render(content))

    logger.debug(
        "message_rendered",
        input_length=len(content),
        output_length=len(rendered),
    )
    return rendered


def render_message(content: str, content_type: str = "text") -> Optional[str]:
    """
    Render message content according to its chat content type.

    Text messages are markdown, system (``info``) messages are shown as
    escaped plain text, and media messages (``image``, ``gif``) carry a URL
    or data payload with nothing to render.

    Raises:
        ValueError: If the content type is unknown
    """
    if content_type == "text":
        return render_markdown(content)
    if content_type == "info":
        return escape_html(content)
    if content_type in ("image", "gif"):
        return None
    raise ValueError(f"Unknown content type: {content_type}")


def strip_all_html(content: str) -> str:
    """
    Remove all HTML tags from content.

    Args:
        content: Content with potential HTML tags

    Returns:
        Plain text content
    """
    if not content:
        return content

    return bleach.clean(content, tags=set(), strip=True)


def escape_html(content: str) -> str:
    """
    Escape HTML special characters.

    Args:
        content: Raw content

    Returns:
        HTML-escaped content
    """
    if not content:
        return content

    return (
        content
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )
