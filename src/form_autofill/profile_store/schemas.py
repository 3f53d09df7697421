from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, validator


class ProfileDocumentError(ValueError):
    """プロフィール文書（me.json）の検証に失敗した場合の例外。"""


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class ProfileEntry(BaseModel):
    """1件のプロフィール。未知のキーも保持し、書き出し時にそのまま返す"""

    id: Optional[str] = None
    name: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        extra = "allow"

    @validator("id", "name", pre=True)
    def coerce_text(cls, value: Any) -> Optional[str]:  # type: ignore[override]
        return _optional_text(value)

    @validator("data", pre=True)
    def default_data(cls, value: Any) -> Dict[str, Any]:  # type: ignore[override]
        if value is None:
            return {}
        return value

    def summary(self) -> Dict[str, Optional[str]]:
        return {"id": self.id, "name": self.name}


class ProfileDocument(BaseModel):
    activeProfileId: Optional[str] = None
    profiles: List[ProfileEntry] = Field(default_factory=list)

    class Config:
        extra = "allow"

    @validator("activeProfileId", pre=True)
    def blank_active_to_none(cls, value: Any) -> Optional[str]:  # type: ignore[override]
        return _optional_text(value)

    def find(self, profile_id: Optional[str]) -> Optional[ProfileEntry]:
        if profile_id is None:
            return None
        for p in self.profiles:
            if p.id == profile_id:
                return p
        return None

    def active_profile(self) -> Optional[ProfileEntry]:
        """アクティブなプロフィール、無ければ先頭、それも無ければ None"""
        return self.find(self.activeProfileId) or (self.profiles[0] if self.profiles else None)

    def to_payload(self) -> Dict[str, Any]:
        """保存・書き出し用の辞書（取り込み時の未知キーを含む）"""
        return self.dict()


def empty_document() -> ProfileDocument:
    return ProfileDocument(activeProfileId=None, profiles=[])


def parse_profile_document(
    payload: Union[str, bytes, Dict[str, Any]],
    default_active: bool = True,
) -> ProfileDocument:
    """JSON 文字列または辞書からプロフィール文書を検証・構築する。

    default_active が真の場合、activeProfileId が未指定なら先頭プロフィールを選ぶ（取り込み時の挙動）。
    id の無いプロフィールも受け付ける（その場合 load は先頭プロフィールを返す）。

    Raises:
        ProfileDocumentError: JSON として不正、または profiles がリストでない場合
    """
    if isinstance(payload, (str, bytes)):
        try:
            incoming = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ProfileDocumentError(f"Invalid me.json: {e}") from e
    else:
        incoming = payload

    if not isinstance(incoming, dict) or not isinstance(incoming.get("profiles"), list):
        raise ProfileDocumentError("Invalid me.json: profiles missing")

    try:
        document = ProfileDocument(**incoming)
    except (ValidationError, TypeError) as e:
        raise ProfileDocumentError(f"Invalid me.json: {e}") from e

    if default_active and not document.activeProfileId and document.profiles:
        document.activeProfileId = document.profiles[0].id
    return document
