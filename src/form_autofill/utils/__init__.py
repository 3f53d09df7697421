"""共通ユーティリティ"""
