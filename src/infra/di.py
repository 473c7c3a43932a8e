from typing import Optional
from ..usecase.user_management.user_mapper import UserMapper
from .config import Settings
from .memory_client.user_repository import InMemoryUserRepository
from .tortoise_client.user_repository import TortoiseUserRepository
from ..port.user_repository import UserRepository as UserRepositoryPort

class DIContainer:
    """依存性注入コンテナ"""
    
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._user_repository: Optional[UserRepositoryPort] = None
        self._user_mapper: Optional[UserMapper] = None
    
    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings
    
    @property
    def user_repository(self) -> UserRepositoryPort:
        """ユーザーリポジトリのシングルトンインスタンスを取得（バックエンドは設定で選択）"""
        if self._user_repository is None:
            if self.settings.repository_backend == "memory":
                self._user_repository = InMemoryUserRepository()
            else:
                self._user_repository = TortoiseUserRepository()
        return self._user_repository
    
    @property
    def user_mapper(self) -> UserMapper:
        """マッパーのシングルトンインスタンスを取得"""
        if self._user_mapper is None:
            self._user_mapper = UserMapper()
        return self._user_mapper

# グローバルDIコンテナインスタンス
_container = DIContainer()

def get_user_repository() -> UserRepositoryPort:
    """ユーザーリポジトリを取得"""
    return _container.user_repository

def get_user_mapper() -> UserMapper:
    """マッパーを取得"""
    return _container.user_mapper

def get_container() -> DIContainer:
    """DIコンテナを取得（テスト用）"""
    return _container
