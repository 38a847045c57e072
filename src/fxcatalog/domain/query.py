from dataclasses import dataclass, field
from typing import List, Optional

from .models import ResourceSource


@dataclass
class SearchOptions:
    """Catalog search object - Fluent API for building search conditions"""

    query: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    complexity: Optional[str] = None
    offset: int = 0
    limit: Optional[int] = None
    source: Optional[ResourceSource] = None

    def matching(self, text: str):
        self.query = text
        return self

    def in_category(self, category: str):
        self.category = category
        return self

    def with_tags(self, *tags: str):
        self.tags = list(tags)
        return self

    def with_complexity(self, complexity: str):
        self.complexity = complexity
        return self

    def from_source(self, source: ResourceSource):
        self.source = source
        return self

    def paginate(self, page: int, page_size: int):
        self.offset = (page - 1) * page_size
        self.limit = page_size
        return self
