"""Readers for Notion page property values.

Each reader takes a page's ``properties`` mapping and a property name and
returns the raw value or ``None`` when the property is missing, empty or of
an unexpected shape. Defaults are applied by the transformers, per field.
"""

from typing import Any, Optional

Number = int | float


def _prop(props: dict[str, Any], name: str) -> dict[str, Any]:
    value = props.get(name)
    return value if isinstance(value, dict) else {}


def first_plain_text(props: dict[str, Any], name: str, kind: str = "rich_text") -> Optional[str]:
    """Plain text of the first segment of a ``rich_text`` or ``title`` property."""
    segments = _prop(props, name).get(kind) or []
    if not segments:
        return None
    return segments[0].get("plain_text") or None


def title_text(props: dict[str, Any], name: str) -> Optional[str]:
    return first_plain_text(props, name, kind="title")


def select_name(props: dict[str, Any], name: str) -> Optional[str]:
    option = _prop(props, name).get("select") or {}
    return option.get("name") or None


def multi_select_names(props: dict[str, Any], name: str) -> list[str]:
    options = _prop(props, name).get("multi_select") or []
    return [option.get("name") or "" for option in options]


def status_name(props: dict[str, Any], name: str) -> Optional[str]:
    status = _prop(props, name).get("status") or {}
    return status.get("name") or None


def number(props: dict[str, Any], name: str) -> Optional[Number]:
    return _prop(props, name).get("number")


def rollup_number(props: dict[str, Any], name: str) -> Optional[Number]:
    rollup = _prop(props, name).get("rollup") or {}
    return rollup.get("number")


def formula_number(props: dict[str, Any], name: str) -> Optional[Number]:
    formula = _prop(props, name).get("formula") or {}
    return formula.get("number")


def date_start(props: dict[str, Any], name: str) -> Optional[str]:
    date = _prop(props, name).get("date") or {}
    return date.get("start") or None


def first_person_name(props: dict[str, Any], name: str) -> Optional[str]:
    people = _prop(props, name).get("people") or []
    if not people:
        return None
    return people[0].get("name") or None


def url(props: dict[str, Any], name: str) -> Optional[str]:
    return _prop(props, name).get("url") or None


def first_file_url(props: dict[str, Any], name: str) -> Optional[str]:
    """URL of the first entry of a ``files`` property.

    An externally hosted link wins over a Notion-hosted upload.
    """
    files = _prop(props, name).get("files") or []
    if not files:
        return None
    entry = files[0]
    external = (entry.get("external") or {}).get("url")
    hosted = (entry.get("file") or {}).get("url")
    return external or hosted or None
