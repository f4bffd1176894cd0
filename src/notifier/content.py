"""Content value object: the logical notification payload.

Content is frozen. Channel formatting and length limits always produce a new
instance through ``Content.evolve``, so the caller's instance is safe to reuse
after a dispatch.
"""

from dataclasses import dataclass, replace

from notifier.exceptions import ValidationError

ELLIPSIS = "..."


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, ending with an ellipsis when cut."""
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


@dataclass(frozen=True)
class Content:
    title: str
    plain_body: str
    html_body: str | None = None
    action_url: str | None = None
    action_text: str | None = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ValidationError unless title and plain_body are non-empty text."""
        errors: dict[str, list[str]] = {}
        for field in ("title", "plain_body"):
            value = getattr(self, field)
            if not isinstance(value, str) or not value.strip():
                errors[field] = [f"{field} is required and cannot be empty"]
        for field in ("html_body", "action_url", "action_text"):
            value = getattr(self, field)
            if value is not None and not isinstance(value, str):
                errors[field] = [f"{field} must be text"]
        if errors:
            raise ValidationError(errors, code="invalid_content")

    def evolve(self, **changes) -> "Content":
        """Return a copy with ``changes`` applied. The original is untouched."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "plain_body": self.plain_body,
            "html_body": self.html_body,
            "action_url": self.action_url,
            "action_text": self.action_text,
        }
