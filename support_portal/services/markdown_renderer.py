import logging
import re

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml, unescapeAll

from support_portal.services.headings import headings_by_line

logger = logging.getLogger(__name__)

_LANGUAGE_RE = re.compile(r"\w+")


class MarkdownRenderer:
    """
    Markdown -> HTML for article bodies.

    Headings picked up by the table of contents get the same anchor ids the
    extractor computed; code blocks get a language label and a copy button.
    """

    def __init__(self):
        self.md = MarkdownIt("commonmark", {"html": False, "linkify": True}).enable(
            ["table", "strikethrough", "linkify"]
        )
        self.md.add_render_rule("heading_open", _render_heading_open)
        self.md.add_render_rule("code_inline", _render_code_inline)
        self.md.add_render_rule("fence", _render_fence)
        self.md.add_render_rule("code_block", _render_code_block)
        self.md.add_render_rule("link_open", _render_link_open)

    def render(self, markdown: str) -> str:
        markdown = markdown or ""
        env = {"headings": headings_by_line(markdown)}
        html = self.md.render(markdown, env)
        logger.debug(
            f"Rendered {len(markdown)} chars of markdown with {len(env['headings'])} anchors"
        )
        return html


def code_language(info: str) -> str:
    """Language tag from a fence info string, e.g. "python {1,3}" -> "python"."""
    info = unescapeAll(info or "").strip()
    if not info:
        return ""
    match = _LANGUAGE_RE.match(info.split(maxsplit=1)[0])
    return match.group(0) if match else ""


def render_code_block(code: str, lang: str = "") -> str:
    code = code[:-1] if code.endswith("\n") else code
    label = escapeHtml(lang or "code")
    lang_attr = escapeHtml(lang)
    class_attr = f' class="language-{lang_attr}"' if lang else ""
    return (
        '<div class="code-block">\n'
        '<div class="code-block__header">'
        f'<span class="code-block__lang">{label}</span>'
        '<button type="button" class="code-block__copy" data-copy-code>Copy</button>'
        "</div>\n"
        f'<pre class="code-block__body"><code{class_attr} data-lang="{lang_attr}">'
        f"{escapeHtml(code)}</code></pre>\n"
        "</div>\n"
    )


def _render_heading_open(self, tokens, idx, options, env):
    token = tokens[idx]
    level = int(token.tag[1:])
    token.attrJoin("class", f"article-heading article-heading--h{level}")

    heading = None
    if token.map:
        heading = env.get("headings", {}).get(token.map[0])
    if heading is not None and heading.level == level:
        token.attrSet("id", heading.id)

    return self.renderToken(tokens, idx, options, env)


def _render_code_inline(self, tokens, idx, options, env):
    return f'<code class="inline-code">{escapeHtml(tokens[idx].content)}</code>'


def _render_fence(self, tokens, idx, options, env):
    token = tokens[idx]
    return render_code_block(token.content, code_language(token.info))


def _render_code_block(self, tokens, idx, options, env):
    return render_code_block(tokens[idx].content)


def _render_link_open(self, tokens, idx, options, env):
    tokens[idx].attrJoin("class", "article-link")
    return self.renderToken(tokens, idx, options, env)
