"""
Inline markdown -> ReportLab paragraph markup.
"""

import logging
import re

logger = logging.getLogger(__name__)

CODE_SPAN_RE = re.compile(r'`([^`]+)`')
PLACEHOLDER_RE = re.compile('\x00(\\d+)\x00')
TAG_RE = re.compile(r'<(/?)([bi])>')


def escape_text(text: str) -> str:
    """Escape HTML special characters"""
    text = text.replace("&", "&amp;")
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    return text


def is_balanced(markup: str) -> bool:
    """True if every <b>/<i> closes in the reverse order it opened"""
    stack = []
    for match in TAG_RE.finditer(markup):
        closing, tag = match.groups()
        if not closing:
            stack.append(tag)
        elif not stack or stack.pop() != tag:
            return False
    return not stack


def to_markup(text: str, mono_font: str) -> str:
    """
    Convert inline bold, italic and code spans to ReportLab markup.

    Overlapping emphasis such as ``**a *b** c*`` cannot be nested; such
    text is kept literally (escaped) rather than emitting markup the
    paragraph parser rejects.
    """
    # Code spans are set aside so their content is not formatted
    spans = []

    def stash(match):
        spans.append(escape_text(match.group(1)))
        return f"\x00{len(spans) - 1}\x00"

    plain = escape_text(CODE_SPAN_RE.sub(stash, text))

    # Bold **text**
    markup = re.sub(r'\*\*(.+?)\*\*', r'<b>\1</b>', plain)

    # Italic *text* and _text_ (word-internal underscores stay, e.g. __init__)
    markup = re.sub(r'(?<!\*)\*(?!\s)(.+?)(?<!\s)\*(?!\*)', r'<i>\1</i>', markup)
    markup = re.sub(r'(?<![\w_])_([^_]+)_(?![\w_])', r'<i>\1</i>', markup)

    if not is_balanced(markup):
        logger.warning(f"Overlapping emphasis kept as plain text: {text!r}")
        markup = plain

    return PLACEHOLDER_RE.sub(
        lambda m: f'<font name="{mono_font}">{spans[int(m.group(1))]}</font>',
        markup,
    )
