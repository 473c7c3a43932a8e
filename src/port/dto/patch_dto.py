"""
部分更新（JSON Patch）用データ転送オブジェクト
"""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class PatchOperation:
    """JSON Patchの1操作"""
    op: str
    path: str
    value: Any = None
    from_path: Optional[str] = None
