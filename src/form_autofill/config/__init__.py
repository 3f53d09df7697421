"""設定読み込みモジュール"""

from .manager import (
    ConfigManager,
    config_manager,
    get_classifier_config,
    get_fill_config,
    get_profile_store_config,
)

__all__ = [
    'ConfigManager',
    'config_manager',
    'get_classifier_config',
    'get_fill_config',
    'get_profile_store_config',
]
