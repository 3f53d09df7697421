"""
プロフィール保存層

JSON ファイルに {storage_key: {activeProfileId, profiles: [...]}} の形で保存する。
取り込み（import）・書き出し（export）・一覧・アクティブ切替・読み込みを提供する。
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .schemas import (
    ProfileDocument,
    ProfileDocumentError,
    empty_document,
    parse_profile_document,
)

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "autofill_data"


@dataclass(frozen=True)
class ImportResult:
    ok: bool
    error: Optional[str] = None


class ProfileStore:
    """プロフィール文書のファイル保存を扱うクラス"""

    def __init__(self, path: Union[str, Path], storage_key: str = DEFAULT_STORAGE_KEY):
        self.path = Path(path).expanduser()
        self.storage_key = storage_key

    def _read(self) -> ProfileDocument:
        if not self.path.exists():
            return empty_document()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ProfileDocumentError(f"保存済みプロフィールの形式が不正です ({self.path}): {e}") from e

        stored = raw.get(self.storage_key) if isinstance(raw, dict) else None
        if stored is None:
            return empty_document()
        return parse_profile_document(stored, default_active=False)

    def _write(self, document: ProfileDocument) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump({self.storage_key: document.to_payload()}, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self.path)

    def import_from(self, payload: Union[str, bytes, Dict[str, Any]]) -> ImportResult:
        """me.json を取り込み、既存の保存内容を置き換える"""
        try:
            document = parse_profile_document(payload)
        except ProfileDocumentError as e:
            logger.warning(f"Profile import rejected: {e}")
            return ImportResult(ok=False, error=str(e))
        self._write(document)
        logger.info(f"Imported {len(document.profiles)} profiles (active={document.activeProfileId})")
        return ImportResult(ok=True)

    def export_current(self) -> Dict[str, Any]:
        """保存されている文書全体を返す"""
        return self._read().to_payload()

    def list_profiles(self) -> List[Dict[str, Optional[str]]]:
        return [p.summary() for p in self._read().profiles]

    def get_active_profile_id(self) -> Optional[str]:
        return self._read().activeProfileId

    def set_active(self, profile_id: Optional[str]) -> None:
        document = self._read()
        document.activeProfileId = profile_id or None
        self._write(document)
        logger.info(f"Active profile set: {document.activeProfileId}")

    def load(self) -> Optional[Dict[str, Any]]:
        """アクティブなプロフィール（id/name/data）を返す。無ければ None"""
        profile = self._read().active_profile()
        if profile is None:
            return None
        return profile.dict()
