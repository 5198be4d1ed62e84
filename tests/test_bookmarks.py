import pytest

from tikzkit.bookmarks import BookmarkList


def test_toggle_keeps_sorted_and_removes():
    marks = BookmarkList()
    for line in (5, 2, 8):
        marks.toggle(line, 10)
    assert list(marks) == [2, 5, 8]
    marks.toggle(5, 10)
    assert list(marks) == [2, 8]
    assert 5 not in marks


@pytest.mark.parametrize("line", [0, -1, 11])
def test_toggle_ignores_out_of_range(line):
    marks = BookmarkList()
    marks.toggle(line, 10)
    assert len(marks) == 0


def test_bookmark_by_index():
    marks = BookmarkList()
    marks.set_bookmarks([3, 1], 10)
    assert marks.bookmark(0) == 1
    assert marks.bookmark(1) == 3
    assert marks.bookmark(2) == -1
    assert marks.bookmark(-1) == -1


def test_set_bookmarks_drops_invalid_and_toggles_duplicates():
    marks = BookmarkList()
    marks.set_bookmarks([4, 20, 0, 2, 4, 7], 10)
    assert list(marks) == [2, 7]


def test_previous_and_next():
    marks = BookmarkList()
    marks.set_bookmarks([2, 5, 8], 10)
    assert marks.previous(5) == 2
    assert marks.previous(6) == 5
    assert marks.previous(2) is None
    assert marks.next(5) == 8
    assert marks.next(1) == 2
    assert marks.next(8) is None


def test_recalculate_shifts_after_inserted_lines():
    marks = BookmarkList(old_line_count=10)
    marks.set_bookmarks([2, 5], 10)
    marks.recalculate(3, 10 + 2)
    assert list(marks) == [2, 5 + 2]
    assert marks.old_line_count == 12


def test_recalculate_removes_bookmarks_on_deleted_lines():
    marks = BookmarkList(old_line_count=10)
    marks.set_bookmarks([2, 4, 5, 9], 10)
    # lines 4 and 5 removed
    marks.recalculate(4, 10 - 2)
    assert list(marks) == [2, 9 - 2]


def test_recalculate_without_line_change_keeps_bookmarks():
    marks = BookmarkList(old_line_count=10)
    marks.set_bookmarks([3, 6], 10)
    marks.recalculate(1, 10)
    assert list(marks) == [3, 6]