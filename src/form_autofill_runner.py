#!/usr/bin/env python3
"""
Form Autofill Runner

プロフィールの取り込み/書き出し/切替と、指定 URL のフォームへの自動入力を行う。

想定起動:
  python src/form_autofill_runner.py import me.json
  python src/form_autofill_runner.py list
  python src/form_autofill_runner.py use work
  python src/form_autofill_runner.py fill https://example.com/contact [--headless false]
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from form_autofill.config.manager import get_classifier_config, get_fill_config, get_profile_store_config
from form_autofill.profile_store import ProfileDocumentError, ProfileStore
from form_autofill.utils.log_sanitizer import setup_sanitized_logging

logger = logging.getLogger("form_autofill.runner")


def _build_store(path: Optional[str]) -> ProfileStore:
    cfg = get_profile_store_config()
    return ProfileStore(path or cfg["path"], storage_key=cfg.get("storage_key", "autofill_data"))


def _cmd_import(store: ProfileStore, args: argparse.Namespace) -> int:
    source = Path(args.file)
    if not source.exists():
        logger.error(f"Select me.json first: {source} not found")
        return 1
    result = store.import_from(source.read_text(encoding="utf-8"))
    if not result.ok:
        logger.error(f"Import failed: {result.error}")
        return 1
    logger.info(f"Imported; {len(store.list_profiles())} profiles loaded")
    return 0


def _cmd_export(store: ProfileStore, args: argparse.Namespace) -> int:
    text = json.dumps(store.export_current(), ensure_ascii=False, indent=2)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        logger.info(f"Exported to {args.output}")
    else:
        print(text)
    return 0


def _cmd_list(store: ProfileStore, args: argparse.Namespace) -> int:
    active = store.get_active_profile_id()
    profiles = store.list_profiles()
    for p in profiles:
        marker = "*" if p["id"] is not None and p["id"] == active else " "
        print(f"{marker} {p['id'] or '-'}\t{p['name'] or p['id'] or ''}")
    logger.info(f"Loaded {len(profiles)} profiles")
    return 0


def _cmd_use(store: ProfileStore, args: argparse.Namespace) -> int:
    known = {p["id"] for p in store.list_profiles()}
    if args.profile_id not in known:
        logger.error(f"Failed to set active profile: unknown id '{args.profile_id}'")
        return 1
    store.set_active(args.profile_id)
    return 0


async def _fill(url: str, headless: bool, profile: dict) -> List[str]:
    from playwright.async_api import async_playwright

    from form_autofill.analyzer import FieldClassifier
    from form_autofill.worker.input_handler import FormAutofillHandler

    cls_cfg = get_classifier_config()
    fill_cfg = get_fill_config()
    classifier = FieldClassifier(min_score=cls_cfg["min_score"], type_boost=cls_cfg["input_type_boost"])

    async with async_playwright() as pw:
        browser = await pw.chromium.launch(headless=headless)
        try:
            page = await browser.new_page()
            await page.goto(url, wait_until="domcontentloaded")
            handler = FormAutofillHandler(page, fill_config=fill_cfg, classifier=classifier)
            filled = await handler.fill_page(profile)
            if not headless:
                # 手動でページを閉じるまで待機
                await page.wait_for_event("close", timeout=0)
            return filled
        finally:
            await browser.close()


def _cmd_fill(store: ProfileStore, args: argparse.Namespace) -> int:
    profile = store.load()
    if profile is None:
        logger.error("No profile stored; run 'import' first")
        return 1
    headless = args.headless != "false"
    filled = asyncio.run(_fill(args.url, headless, profile))
    logger.info(f"Filled fields: {', '.join(filled) if filled else '(none)'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Form Autofill Runner (profile-driven JP form filling)")
    p.add_argument("--store", default=None, help="profile store JSON path (default: config/env)")
    p.add_argument("--debug", action="store_true", help="enable per-field debug trace")
    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("import", help="import a me.json profile document")
    sp.add_argument("file")
    sp.set_defaults(func=_cmd_import)

    sp = sub.add_parser("export", help="export the stored profile document")
    sp.add_argument("--output", default=None)
    sp.set_defaults(func=_cmd_export)

    sp = sub.add_parser("list", help="list stored profiles")
    sp.set_defaults(func=_cmd_list)

    sp = sub.add_parser("use", help="set the active profile")
    sp.add_argument("profile_id")
    sp.set_defaults(func=_cmd_use)

    sp = sub.add_parser("fill", help="open URL and fill its form with the active profile")
    sp.add_argument("url")
    sp.add_argument("--headless", choices=["true", "false"], default="true")
    sp.set_defaults(func=_cmd_fill)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )
    setup_sanitized_logging()

    try:
        store = _build_store(args.store)
        return args.func(store, args)
    except ProfileDocumentError as e:
        logger.error(f"Stored profile document is invalid: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
