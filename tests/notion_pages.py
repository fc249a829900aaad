"""Builders for raw Notion page objects as returned by a database query."""

from typing import Any, Optional


def rich_text(text: str) -> dict:
    return {
        "type": "rich_text",
        "rich_text": [{"type": "text", "text": {"content": text}, "plain_text": text}],
    }


def title(text: str) -> dict:
    return {
        "type": "title",
        "title": [{"type": "text", "text": {"content": text}, "plain_text": text}],
    }


def select(name: Optional[str]) -> dict:
    return {"type": "select", "select": {"name": name} if name is not None else None}


def multi_select(*names: Optional[str]) -> dict:
    return {"type": "multi_select", "multi_select": [{"name": name} for name in names]}


def status(name: str) -> dict:
    return {"type": "status", "status": {"name": name}}


def number(value: Optional[float]) -> dict:
    return {"type": "number", "number": value}


def rollup_number(value: Optional[float]) -> dict:
    return {"type": "rollup", "rollup": {"type": "number", "number": value}}


def formula_number(value: Optional[float]) -> dict:
    return {"type": "formula", "formula": {"type": "number", "number": value}}


def date(start: Optional[str]) -> dict:
    return {"type": "date", "date": {"start": start, "end": None} if start else None}


def people(*names: str) -> dict:
    return {"type": "people", "people": [{"object": "user", "name": name} for name in names]}


def url(value: Optional[str]) -> dict:
    return {"type": "url", "url": value}


def files(external: Optional[str] = None, hosted: Optional[str] = None) -> dict:
    entries = []
    if external or hosted:
        entry: dict[str, Any] = {"name": "thumbnail"}
        if external:
            entry["type"] = "external"
            entry["external"] = {"url": external}
        if hosted:
            entry.setdefault("type", "file")
            entry["file"] = {"url": hosted, "expiry_time": "2024-12-15T00:00:00.000Z"}
        entries.append(entry)
    return {"type": "files", "files": entries}


def page(page_id: str, properties: dict) -> dict:
    return {"object": "page", "id": page_id, "properties": properties}


def campaign_page(page_id: str = "campaign-1", **overrides: dict) -> dict:
    """A fully populated campaign page; keyword overrides replace or add properties."""
    properties = {
        "캠페인명": title("스웻이프"),
        "카테고리": select("뷰티"),
        "캠페인 유형": select("유료"),
        "협찬 제품": multi_select("선크림", "토너"),
        "캠페인 총 참여 인원": rollup_number(12),
        "캠페인 시작일": date("2024-12-01"),
        "캠페인 종료일": date("2024-12-31"),
        "담당자": people("김담당", "이보조"),
        "상태": status("진행중"),
        "예산(만원)": number(500),
        "총 맨션 피드 수": formula_number(34),
    }
    properties.update(overrides)
    return page(page_id, properties)


def mention_page(
    page_id: str,
    handle: Optional[str] = None,
    *,
    full_name: Optional[str] = None,
    posted_at: Optional[str] = None,
    external_thumbnail: Optional[str] = None,
    hosted_thumbnail: Optional[str] = None,
    **extra: dict,
) -> dict:
    """A mention page with only the given properties set."""
    properties: dict[str, Any] = {}
    if handle is not None:
        properties["ownerUsername"] = rich_text(handle) if handle else {"type": "rich_text", "rich_text": []}
    if full_name is not None:
        properties["ownerFulName"] = rich_text(full_name)
    if posted_at is not None:
        properties["피드게시일"] = date(posted_at)
    if external_thumbnail or hosted_thumbnail:
        properties["displayUrl"] = files(external_thumbnail, hosted_thumbnail)
    properties.update(extra)
    return page(page_id, properties)


def query_response(*pages: dict, has_more: bool = False) -> dict:
    return {
        "object": "list",
        "results": list(pages),
        "has_more": has_more,
        "next_cursor": "cursor-2" if has_more else None,
    }
