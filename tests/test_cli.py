import pytest

from snippetbox.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("SNIPPETS_BACKEND", "SNIPPETS_DIR", "SNIPPETS_STORAGE_KEY", "SNIPPETS_LOG_LEVEL", "REDIS_URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def run(tmp_path, capsys):
    def _run(*argv):
        code = main(["--backend", "file", "--dir", str(tmp_path), *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


def test_empty_collection_lists_nothing(run):
    code, out, _ = run("list")

    assert code == 0
    assert out.strip() == "No snippets saved yet."


def test_add_list_show_edit_delete(run, tmp_path):
    code, out, _ = run("add", "--title", "Hello", "--language", "Java", "--code", "int x = 1;")
    assert code == 0
    assert "(index 0)" in out

    run("add", "--title", "Second", "--description", "another one", "--code", "return;")

    code, out, _ = run("list")
    assert "List of Snippets (2)" in out
    assert "[0] Hello" in out
    assert "[1] Second" in out
    assert "Description: No description provided." in out

    code, out, _ = run("show", "0", "--html")
    assert '<span class="keyword">int</span>' in out

    code, out, _ = run("edit", "1", "--code", "return 2;")
    assert code == 0
    assert "Changes saved successfully!" in out

    code, out, _ = run("show", "1")
    assert "return 2;" in out

    code, out, _ = run("delete", "0")
    assert '"Hello" deleted successfully.' in out

    code, out, _ = run("search", "another")
    assert "[0] Second" in out
    assert (tmp_path / "codeSnippets.json").exists()


def test_code_can_be_read_from_a_file(run, tmp_path):
    source = tmp_path / "Snippet.java"
    source.write_text("class Snippet {}\n", encoding="utf-8")

    code, _, _ = run("add", "--title", "From file", "--code-file", str(source))
    assert code == 0

    _, out, _ = run("show", "0")
    assert "class Snippet {}" in out


def test_rejected_actions_exit_with_error(run):
    code, _, err = run("add", "--title", "   ")
    assert code == 1
    assert "Please provide a title or some code" in err

    code, _, err = run("delete", "3")
    assert code == 1
    assert "out of range" in err


def test_search_without_matches(run):
    run("add", "--title", "Hello", "--code", "x")

    code, out, _ = run("search", "missing")

    assert code == 0
    assert out.strip() == "No snippets found."


def test_corrupt_storage_is_reported_but_not_fatal(run, tmp_path):
    (tmp_path / "codeSnippets.json").write_bytes(b"{broken")

    code, out, err = run("list")

    assert code == 0
    assert out.strip() == "No snippets saved yet."
    assert "DeserializationError" in err
