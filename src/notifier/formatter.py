"""Per-channel content adaptation.

Each rule receives the caller's Content and returns a new Content. Channels
without a rule get an unmodified copy, so a newly registered channel works
before anyone writes a rule for it.

SMS has no rule: its 160-character limit is enforced by the SMS
channel itself (see ``notifier.channel.sms_port``).
"""

from collections.abc import Callable
from html import escape

from notifier.channel.base import normalize_channel_name
from notifier.content import Content, truncate

PUSH_MAX_BODY_LENGTH = 100
DEFAULT_ACTION_TEXT = "Click here"

FormatRule = Callable[[Content], Content]


def format_email(content: Content) -> Content:
    """Synthesize an HTML body when the content does not carry one.

    Title, body, URL and label are HTML-escaped before interpolation, so
    ``A & B`` renders as ``A &amp; B`` rather than the raw text. A caller
    supplied ``html_body`` is passed through untouched.
    """
    if content.html_body is not None:
        return content.evolve()

    html = f"<html><body><h1>{escape(content.title, quote=False)}</h1><p>{escape(content.plain_body, quote=False)}</p>"
    if content.action_url:
        label = content.action_text or DEFAULT_ACTION_TEXT
        html += f'<p><a href="{escape(content.action_url)}">{escape(label, quote=False)}</a></p>'
    html += "</body></html>"
    return content.evolve(html_body=html)


def format_push(content: Content) -> Content:
    return content.evolve(plain_body=truncate(content.plain_body, PUSH_MAX_BODY_LENGTH))


def pass_through(content: Content) -> Content:
    return content.evolve()


class ContentFormatter:
    """Maps a channel name to its formatting rule."""

    def __init__(self):
        self._rules: dict[str, FormatRule] = {
            "email": format_email,
            "sms": pass_through,
            "push": format_push,
        }

    def register_rule(self, channel_name: str, rule: FormatRule) -> None:
        """Add or replace the rule used for ``channel_name``."""
        key = normalize_channel_name(channel_name)
        if not key:
            raise ValueError("Channel name for a formatting rule cannot be empty")
        self._rules[key] = rule

    def format(self, channel_name: str, content: Content) -> Content:
        rule = self._rules.get(normalize_channel_name(channel_name), pass_through)
        return rule(content)
