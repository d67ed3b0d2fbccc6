"""Unit tests for PageRequest / Page arithmetic."""

from gateway.domain.entities import Page, PageRequest


def test_offset_is_zero_based():
    assert PageRequest(page=1, limit=20).offset == 0
    assert PageRequest(page=3, limit=10).offset == 20


def test_clamped_caps_limit_silently():
    assert PageRequest(page=2, limit=101).clamped(20) == PageRequest(page=2, limit=20)
    assert PageRequest(page=2, limit=5).clamped(20) == PageRequest(page=2, limit=5)


def test_empty_result_is_page_one_of_zero():
    page = Page(request=PageRequest(page=4, limit=10), total=0)

    assert page.page_total == 0
    assert page.page_current == 1
    assert page.have_next_page is False
    assert page.have_previous_page is False


def test_page_flags_in_the_middle():
    page = Page(request=PageRequest(page=2, limit=10), total=25)

    assert page.page_total == 3
    assert page.have_next_page is True
    assert page.have_previous_page is True


def test_last_page_has_no_next():
    page = Page(request=PageRequest(page=3, limit=10), total=25)

    assert page.have_next_page is False
    assert page.have_previous_page is True
