"""Parse ``code[:title]`` field lists into report column descriptors."""

from __future__ import annotations

from dataclasses import dataclass

from youtrack_app.core.config import COMMENTS_CODE, COMMENTS_VERBOSE_CODE


@dataclass(slots=True, frozen=True)
class FieldDescriptor:
    code: str
    title: str

    @classmethod
    def parse(cls, spec: str) -> FieldDescriptor:
        code, sep, title = spec.partition(":")
        code = code.strip()
        title = title.strip() if sep else ""
        return cls(code=code, title=title or code)

    @property
    def is_comments(self) -> bool:
        return self.code in (COMMENTS_CODE, COMMENTS_VERBOSE_CODE)

    @property
    def is_verbose(self) -> bool:
        return self.code == COMMENTS_VERBOSE_CODE


def parse_field_spec(text: str | None) -> list[FieldDescriptor]:
    """Split a comma-separated field list, preserving order; blank entries are skipped.

    Malformed entries never raise: an entry without a colon (or with an empty
    title) is titled by its code.
    """
    out: list[FieldDescriptor] = []
    for part in (text or "").split(","):
        if not part.strip():
            continue
        out.append(FieldDescriptor.parse(part))
    return out
