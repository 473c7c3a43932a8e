from typing import Any, Dict, Protocol


class LinkGenerator(Protocol):
    """
    エンドポイント名とパラメータからURLを生成するインターフェース。

    REST層では Request.url_for を元に実装される。
    """

    def __call__(self, endpoint: str, params: Dict[str, Any]) -> str:
        ...
