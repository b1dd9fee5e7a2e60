"""Unit tests for the client-side record filter."""

from dataclasses import dataclass

from backoffice.domain.filtering import ALL, RecordFilter, filter_records


@dataclass
class Row:
    code: str
    name: str
    status: str
    team: str | None = None


ROWS = (
    Row("CC001", "Finance", "active"),
    Row("CC002", "Engineering", "inactive", team="Platform"),
    Row("OPS10", "Operations", "active"),
)


def _filter(**kwargs) -> RecordFilter:
    return RecordFilter(text_fields=("code", "name", "team"), **kwargs)


def test_empty_text_and_all_status_keep_everything_in_order():
    assert filter_records(ROWS, _filter()) == ROWS


def test_text_is_case_insensitive_substring_of_any_field():
    assert filter_records(ROWS, _filter(text="cc0")) == ROWS[:2]
    assert filter_records(ROWS, _filter(text="ENGIN")) == (ROWS[1],)
    assert filter_records(ROWS, _filter(text="platf")) == (ROWS[1],)


def test_absent_fields_never_match():
    assert filter_records(ROWS, _filter(text="none")) == ()


def test_status_filter_is_exact_equality():
    assert filter_records(ROWS, _filter(status="active")) == (ROWS[0], ROWS[2])
    assert filter_records(ROWS, _filter(status="act")) == ()


def test_text_and_status_are_combined():
    combined = _filter(text="o", status="active")
    assert filter_records(ROWS, combined) == (ROWS[2],)


def test_with_text_and_with_status_return_new_filters():
    base = _filter()
    narrowed = base.with_text("fin").with_status("active")
    assert base.text == "" and base.status == ALL
    assert filter_records(ROWS, narrowed) == (ROWS[0],)


def test_custom_status_field():
    by_team = RecordFilter(text_fields=("name",), status_field="team", status="Platform")
    assert filter_records(ROWS, by_team) == (ROWS[1],)
