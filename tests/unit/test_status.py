"""Unit tests for open-string campaign status classification."""

import pytest

from macha.normalization.status import classify_status, is_active, is_completed


@pytest.mark.parametrize("status", ["active", "paused", "진행중", "일시정지", "진행", " Active "])
def test_active_labels(status):
    assert is_active(status)
    assert not is_completed(status)
    assert classify_status(status) == "active"


@pytest.mark.parametrize("status", ["completed", "완료", "종료"])
def test_completed_labels(status):
    assert is_completed(status)
    assert not is_active(status)
    assert classify_status(status) == "completed"


@pytest.mark.parametrize("status", ["", None, "draft", "검토 대기", "진행 예정"])
def test_unknown_labels_are_unclassified(status):
    """Labels outside the known sets belong to neither group."""
    assert classify_status(status) is None
