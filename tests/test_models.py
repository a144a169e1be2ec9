import pytest

from lintrelay.domain.models import Finding, LintResult


def test_finding_to_dict_uses_wire_keys():
    assert Finding("a.proto", 3, 5, "m").to_dict() == {"path": "a.proto", "firstLine": 3, "lastLine": 5, "message": "m"}


@pytest.mark.parametrize("first, last", [(0, 1), (-1, -1), (9, 0), (4, 3)])
def test_finding_rejects_invalid_line_ranges(first, last):
    with pytest.raises(ValueError):
        Finding("a.proto", first, last, "m")


def test_single_line_finding_is_valid():
    assert Finding("a.proto", 1, 1, "m").last_line == 1


def test_lint_result_success_is_empty():
    assert LintResult.success().to_dict() == {"isSuccess": True, "warning": [], "error": []}
