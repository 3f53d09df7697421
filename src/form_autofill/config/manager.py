"""設定ファイル読み込みと管理を行うユーティリティモジュール"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from form_autofill.utils.env import get_profile_path_override

_DEFAULT_CLASSIFIER_CONFIG: Dict[str, Any] = {"min_score": 3, "input_type_boost": 3}
_DEFAULT_FILL_CONFIG: Dict[str, Any] = {
    "trace": True,
    "element_selector": "input, textarea, select",
    "skip_input_types": ["hidden", "submit", "button", "reset", "image", "file", "password"],
}
_DEFAULT_PROFILE_STORE_CONFIG: Dict[str, Any] = {
    "path": "~/.form_autofill/autofill_data.json",
    "storage_key": "autofill_data",
}


class ConfigManager:
    """設定ファイルの読み込みと管理を行うクラス"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path(__file__).parent
        self._autofill_config: Optional[Dict[str, Any]] = None

    def get_autofill_config(self) -> Dict[str, Any]:
        """autofill_config.json 全体を取得（読み込み失敗時は既定値）"""
        if self._autofill_config is None:
            try:
                cfg = self._load_config("autofill_config.json")
                if not isinstance(cfg, dict):
                    raise ValueError("autofill_config must be a dict")
            except Exception as e:
                logging.getLogger(__name__).warning(
                    f"autofill_config.json missing or invalid, using defaults: {e}"
                )
                cfg = {}
            self._autofill_config = cfg
        return self._autofill_config

    def get_classifier_config(self) -> Dict[str, Any]:
        """分類器設定を取得（整数化・下限クランプ付き）"""
        section = self.get_autofill_config().get("classifier")
        merged = dict(_DEFAULT_CLASSIFIER_CONFIG)
        if isinstance(section, dict):
            merged.update(section)
        for name, default in _DEFAULT_CLASSIFIER_CONFIG.items():
            try:
                v = int(merged.get(name, default))
            except (TypeError, ValueError):
                v = default
            # 0 以下の閾値は全要素を拾ってしまうため 1 に丸める
            merged[name] = max(1, v) if name == "min_score" else max(0, v)
        return merged

    def get_fill_config(self) -> Dict[str, Any]:
        """入力処理の設定を取得"""
        section = self.get_autofill_config().get("fill")
        merged = dict(_DEFAULT_FILL_CONFIG)
        if isinstance(section, dict):
            merged.update(section)
        merged["trace"] = bool(merged.get("trace", True))
        skip: List[str] = merged.get("skip_input_types") or []
        if not isinstance(skip, list):
            skip = list(_DEFAULT_FILL_CONFIG["skip_input_types"])
        merged["skip_input_types"] = [str(t).lower() for t in skip]
        return merged

    def get_profile_store_config(self) -> Dict[str, Any]:
        """プロフィール保存先設定を取得（環境変数 FORM_AUTOFILL_PROFILE_PATH が優先）"""
        section = self.get_autofill_config().get("profile_store")
        merged = dict(_DEFAULT_PROFILE_STORE_CONFIG)
        if isinstance(section, dict):
            merged.update(section)
        override = get_profile_path_override()
        path = override if override is not None else Path(str(merged["path"])).expanduser()
        merged["path"] = path
        return merged

    def _load_config(self, filename: str) -> Dict[str, Any]:
        """設定ファイルを読み込み"""
        config_path = self.config_dir / filename

        if not config_path.exists():
            raise FileNotFoundError(f"設定ファイルが見つかりません: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"設定ファイルの形式が不正です ({filename}): {e}")
        except Exception as e:
            raise RuntimeError(f"設定ファイルの読み込みに失敗しました ({filename}): {e}")


# グローバルな設定マネージャーインスタンス
config_manager = ConfigManager()


def get_classifier_config() -> Dict[str, Any]:
    """分類器設定を取得する便利関数"""
    return config_manager.get_classifier_config()


def get_fill_config() -> Dict[str, Any]:
    """入力処理設定を取得する便利関数"""
    return config_manager.get_fill_config()


def get_profile_store_config() -> Dict[str, Any]:
    """プロフィール保存先設定を取得する便利関数"""
    return config_manager.get_profile_store_config()
