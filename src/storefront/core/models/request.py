"""Request-scoped context handed to every orchestrator operation."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadedFile:
    """A file posted with a form, already read into memory."""

    filename: str
    content: bytes
    content_type: str | None = None


@dataclass(frozen=True)
class RequestContext:
    """The authenticated principal plus the submitted form of one request."""

    principal: str
    roles: frozenset[str] = frozenset()
    form: Mapping[str, str] = field(default_factory=dict)
    files: Sequence[UploadedFile] = ()

    def is_in_role(self, role: str) -> bool:
        return role in self.roles
