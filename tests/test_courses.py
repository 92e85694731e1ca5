from __future__ import annotations

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from pacrecords.core.courses import invalid_course_payload, select_course


@pytest.mark.parametrize(
    ("params", "expected"),
    [
        ({"SCY": "1"}, "SCY"),
        ({"SCM": ""}, "SCM"),
        ({"LCM": "x"}, "LCM"),
        ({"SCM": "1", "SCY": "1"}, "SCY"),
        ({"LCM": "1", "SCM": "1"}, "SCM"),
        ({"scy": "1"}, None),
        ({}, None),
    ],
)
def test_select_course_priority(params, expected):
    assert select_course(params) == expected


def test_invalid_course_payload():
    assert invalid_course_payload() == [{"status": "-10", "error": "Invalid COURSE"}]
