"""
ページネーション用データ転送オブジェクト
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class PaginationMetadata:
    """一覧と一緒に返すナビゲーション情報"""
    previous_page_link: Optional[str]
    next_page_link: Optional[str]
    total_count: int
    page_size: int
    current_page: int
    total_pages: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "previousPageLink": self.previous_page_link,
            "nextPageLink": self.next_page_link,
            "totalCount": self.total_count,
            "pageSize": self.page_size,
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
        }

    def to_header_value(self) -> str:
        """X-Pagination ヘッダー用のJSON文字列"""
        return json.dumps(self.to_dict())
