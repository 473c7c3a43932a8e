"""
ページ分割されたコレクションのドメインエンティティ
"""
import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """
    順序付きコレクションの一部分

    current_page は1始まり。total_pages は total_count と page_size から導出する
    """
    items: List[T] = field(default_factory=list)
    total_count: int = 0
    current_page: int = 1
    page_size: int = 1

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
