from quilledit.window_title import window_title


def test_no_path_is_untitled():
    assert window_title(None) == "Untitled - Text Editor"


def test_empty_path_is_untitled():
    assert window_title("") == "Untitled - Text Editor"


def test_missing_file_is_untitled(tmp_path):
    assert window_title(tmp_path / "absent.txt") == "Untitled - Text Editor"


def test_existing_file_uses_basename(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("content")
    assert window_title(str(path)) == "notes.txt - Text Editor"


def test_accepts_path_objects(tmp_path):
    path = tmp_path / "draft.md"
    path.write_text("")
    assert window_title(path) == f"{path.name} - Text Editor"


def test_existing_directory_uses_its_name(tmp_path):
    folder = tmp_path / "project"
    folder.mkdir()
    assert window_title(str(folder) + "/") == "project - Text Editor"