#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import math
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from ..pager.types import PAGINATION_MODES, PagerConfig, PaginationMode
from .installer import DEFAULT_TEMPLATE_PATH, resolve_config_path

DEFAULT_PAGE_WIDTH_MM = 210.0
DEFAULT_PAGE_HEIGHT_MM = 297.0
DEFAULT_HEADER_HEIGHT_MM = 30.0
DEFAULT_FOOTER_HEIGHT_MM = 15.0
DEFAULT_MIN_LAST_PAGE_ROWS = 3
DEFAULT_ITEMS_PER_PAGE = 10


@dataclass(frozen=True)
class AppConfig:
    pager: PagerConfig
    mode: PaginationMode
    items_per_page: int
    page_width_mm: float
    template_path: Path
    config_path: Path


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    pager_cfg = _get_dict(data, "pager")
    pagination_cfg = _get_dict(data, "pagination")
    page_cfg = _get_dict(data, "page")
    return AppConfig(
        pager=build_pager_config(pager_cfg),
        mode=_parse_mode(pagination_cfg.get("mode"), field="pagination.mode"),
        items_per_page=_parse_positive_int(
            pagination_cfg.get("items_per_page"),
            field="pagination.items_per_page",
            default=DEFAULT_ITEMS_PER_PAGE,
        ),
        page_width_mm=_parse_positive_float(
            page_cfg.get("width_mm"),
            field="page.width_mm",
            default=DEFAULT_PAGE_WIDTH_MM,
        ),
        template_path=_resolve_template_path(_get_dict(data, "template"), config_path),
        config_path=config_path,
    )


def build_pager_config(cfg: dict[str, object] | None = None) -> PagerConfig:
    cfg = cfg or {}
    return PagerConfig(
        page_height_mm=_parse_positive_float(
            cfg.get("page_height_mm"),
            field="pager.page_height_mm",
            default=DEFAULT_PAGE_HEIGHT_MM,
        ),
        header_height_mm=_parse_non_negative_float(
            cfg.get("header_height_mm"),
            field="pager.header_height_mm",
            default=DEFAULT_HEADER_HEIGHT_MM,
        ),
        footer_height_mm=_parse_non_negative_float(
            cfg.get("footer_height_mm"),
            field="pager.footer_height_mm",
            default=DEFAULT_FOOTER_HEIGHT_MM,
        ),
        min_last_page_rows=_parse_non_negative_int(
            cfg.get("min_last_page_rows"),
            field="pager.min_last_page_rows",
            default=DEFAULT_MIN_LAST_PAGE_ROWS,
        ),
    )


def _resolve_template_path(cfg: dict[str, object], config_path: Path) -> Path:
    value = cfg.get("path")
    if value is None:
        user_template = config_path.parent / "templates" / DEFAULT_TEMPLATE_PATH.name
        if user_template.is_file():
            return user_template
        return DEFAULT_TEMPLATE_PATH
    if not isinstance(value, str) or not value.strip():
        raise ValueError("template.path must be a non-empty string")
    candidate = Path(value.strip()).expanduser()
    if not candidate.is_absolute():
        candidate = config_path.parent / candidate
    return candidate


def _parse_mode(value: object, *, field: str) -> PaginationMode:
    if value is None:
        return "measured"
    if not isinstance(value, str) or value.strip().lower() not in PAGINATION_MODES:
        raise ValueError(f"{field} must be one of: {', '.join(PAGINATION_MODES)}")
    return cast(PaginationMode, value.strip().lower())


def _parse_number(value: object, *, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be a number")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{field} must be finite")
    return number


def _parse_positive_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    number = _parse_number(value, field=field)
    if number <= 0:
        raise ValueError(f"{field} must be positive")
    return number


def _parse_non_negative_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    number = _parse_number(value, field=field)
    if number < 0:
        raise ValueError(f"{field} must be non-negative")
    return number


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field} must be an integer")
    return value


def _parse_positive_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    number = _parse_int_strict(value, field=field)
    if number <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return number


def _parse_non_negative_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    number = _parse_int_strict(value, field=field)
    if number < 0:
        raise ValueError(f"{field} must be a non-negative integer")
    return number


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}
