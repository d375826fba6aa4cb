"""Record models produced by the parse, analyze, and batch steps"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    """Immutable model serialized with camelCase keys."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-safe dict using the serialized key names."""
        return self.model_dump(mode="json", by_alias=True)


class Link(_Record):
    type: Literal["markdown", "html", "url"]
    text: str
    url: str


class ContentAnalysis(_Record):
    """Derived view of a document body; pure function of the body text."""
    raw_content: str
    plain_text: str
    links: list[Link] = Field(default_factory=list)
    headers: list[str] = Field(default_factory=list)
    word_count: int = Field(default=0, ge=0)
    reading_time: int = Field(default=0, ge=0)    # minutes


class Content(ContentAnalysis):
    chunks: list[str] = Field(default_factory=list)


class Embeddings(_Record):
    """Fields handed to the downstream embedding step."""
    title: str
    summary: str
    tags: list[str]
    category: str


class OutputRecord(_Record):
    id: str
    metadata: dict[str, Any]        # normalized frontmatter + derived tags
    content: Content
    embeddings: Embeddings


class SourceFile(_Record):
    """A named text input supplied by the file-reading layer."""
    name: str
    text: str


class BatchItem(_Record):
    filename: str
    status: Literal["success", "error"]
    data: Optional[OutputRecord] = None
    error: Optional[str] = None


class BatchResult(_Record):
    """Per-file outcomes in input order."""
    items: list[BatchItem] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def succeeded(self) -> int:
        return sum(1 for i in self.items if i.status == "success")

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    def summary(self) -> str:
        return f"{self.succeeded} succeeded, {self.failed} failed"
