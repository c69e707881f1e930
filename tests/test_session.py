import pytest

from quilledit.session import EditorSession, auto_close_pair


def test_auto_close_pairs():
    assert auto_close_pair("(") == ")"
    assert auto_close_pair("<") == ">"
    assert auto_close_pair("a") is None


def test_initial_font_size():
    assert EditorSession().font_size == 12


def test_zoom_in_stops_at_max():
    session = EditorSession()
    for _ in range(50):
        session.zoom_in()
    assert session.font_size == 48


def test_zoom_out_stops_at_min():
    session = EditorSession()
    for _ in range(50):
        session.zoom_out()
    assert session.font_size == 6


def test_zoom_round_trip():
    session = EditorSession()
    start = session.font_size
    bigger = session.zoom_in()
    assert bigger > start
    assert session.zoom_out() == start


def test_undo_redo_cycle():
    session = EditorSession()
    session.begin_user_action("a")
    session.end_user_action("ab")
    assert session.text == "ab"
    assert session.undo() == "a"
    assert session.text == "a"
    assert str(session.table) == "a"
    assert session.redo() == "ab"
    assert session.text == "ab"


def test_undo_with_no_history():
    session = EditorSession()
    assert session.undo() is None
    assert session.redo() is None


def test_end_without_begin_records_nothing():
    session = EditorSession()
    session.end_user_action("xyz")
    assert session.text == "xyz"
    assert session.undo() is None


def test_new_file_creates_empty_file(tmp_path):
    target = tmp_path / "notes.txt"
    session = EditorSession()
    session.set_text("old")
    session.new_file(target)
    assert target.read_text() == ""
    assert session.text == ""
    assert session.title() == "notes.txt - Text Editor"


def test_open_and_save(tmp_path):
    target = tmp_path / "doc.txt"
    target.write_text("hello")
    session = EditorSession()
    assert session.open_file(target) == "hello"
    assert str(session.table) == "hello"
    session.set_text("hello world")
    assert session.save() == target
    assert target.read_text() == "hello world"


def test_save_to_new_path(tmp_path):
    target = tmp_path / "Untitled.txt"
    session = EditorSession()
    session.set_text("content")
    session.save(target)
    assert target.read_text() == "content"
    assert session.filename == target


def test_save_without_name_raises():
    with pytest.raises(ValueError):
        EditorSession().save()


def test_open_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        EditorSession().open_file(tmp_path / "missing.txt")


def test_title_without_file():
    assert EditorSession().title() == "Untitled - Text Editor"


def test_search_selects_occurrence():
    session = EditorSession()
    session.set_text("abcabcab")
    start, end = session.search("bc")
    assert session.text[start:end] == "bc"
    assert session.current_selection() == (start, end)


def test_next_match_wraps_around():
    session = EditorSession()
    session.set_text("ab ab ab")
    first = session.search("ab")
    seen = [first]
    for _ in range(2):
        seen.append(session.next_match())
    assert len(set(seen)) == len(seen)
    assert all(session.text[s:e] == "ab" for s, e in seen)
    assert session.next_match() == first


def test_previous_undoes_next():
    session = EditorSession()
    session.set_text("xx yy xx yy xx")
    first = session.search("xx")
    session.next_match()
    assert session.previous_match() == first
    last = session.previous_match()
    assert last[0] > first[0]


def test_search_without_results():
    session = EditorSession()
    session.set_text("abc")
    assert session.search("zz") is None
    assert session.search("") is None
    assert session.next_match() is None
    assert session.previous_match() is None