from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Tuple
import json
import os
import re

SITE_URL = "https://ganjoor.net"
API_BASE = "https://api.ganjoor.net/api/ganjoor"

REQUEST_TIMEOUT = 15
HEADERS = {"User-Agent": "GanjoorPrinter/1.0 (+print; contact@example.com)"}

UNTITLED = "بدون عنوان"
UNKNOWN_POET = "شاعر ناشناس"
HEMISTICH_SEPARATOR = "   "

# seconds before a success banner hides itself
STATUS_HIDE_AFTER = 3

THEME_KEY = "theme"

EXTRACTOR_CONFIG_PATH = os.path.join("inputs", "config", "extractor.json")

MSG_INVALID_LINK = "لینک وارد شده معتبر نیست."
MSG_LOADING_POEM = "در حال دریافت شعر از API گنجور..."
MSG_POEM_OK = "شعر با موفقیت استخراج شد!"
MSG_POEM_ERR = "خطا در دریافت شعر: "
MSG_LOADING_RANDOM = "در حال دریافت شعر تصادفی..."
MSG_RANDOM_OK = "شعر تصادفی بارگذاری شد!"
MSG_RANDOM_ERR = "خطا در دریافت شعر تصادفی: "
MSG_EMPTY_BODY = "لطفاً متن شعر را وارد کنید."
MSG_MANUAL_OK = "شعر با موفقیت نمایش داده شد!"
MSG_LOADING_PAGE = "در حال خواندن صفحه..."
MSG_PAGE_EMPTY = "متن شعری در صفحه پیدا نشد."
MSG_PAGE_ERR = "خطا در خواندن صفحه: "


@dataclass
class ExtractorConfig:
    breadcrumb_marker: str = "گنجور"
    breadcrumb_separator: str = "»"
    terminators: Tuple[str, ...] = ("با انتخاب متن", "هوش مصنوعی", "پیشنهاد تصاویر")
    # checked after the short-line skip, so a short margin-notes line is skipped
    late_terminators: Tuple[str, ...] = ("حاشیه",)
    min_line_length: int = 10
    min_poetry_length: int = 20
    max_poetry_length: int = 200
    continuation_length: int = 20
    script_pattern: str = r"[\u0600-\u06FF]"
    rhyme_endings: Tuple[str, ...] = ("رفت", "شد", "است")

    def has_script(self, line: str) -> bool:
        return re.search(self.script_pattern, line) is not None


def load_extractor_config(path: str = EXTRACTOR_CONFIG_PATH) -> ExtractorConfig:
    """
    Build an ExtractorConfig, overriding defaults with keys found in a JSON file.
    Missing file means defaults; unknown keys are ignored.
    """
    if not os.path.exists(path):
        return ExtractorConfig()
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    known = {fld.name for fld in fields(ExtractorConfig)}
    kwargs = {}
    for key, value in raw.items():
        if key not in known:
            continue
        if isinstance(value, list):
            value = tuple(value)
        kwargs[key] = value
    return ExtractorConfig(**kwargs)


# prefill for the manual form
SAMPLE_POET = "ادیب الممالک"
SAMPLE_TITLE = "مقطعات - شماره ۳۴"
SAMPLE_POEM = """بیچاره آدمی که گرفتار عقل شد
خوش آن کسی که کره خر آمد الاغ رفت
ای باغبان منال ز رنج دی و خزان
بنشین بجای و فاتحه برخوان که باغ رفت
ای پاسبان مخسب که در غارت سرای
دزد دغل به خانه تو با چراغ رفت
ای دهخدا عراق و ری و طوس هم نماند
چو بانه رفت و سقز و ساوجبلاغ رفت
یاران حذر کنید که در بوستان عدل
امروز جوقه جوقه بسی بوم و زاغ رفت"""
