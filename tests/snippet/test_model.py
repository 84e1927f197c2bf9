from snippetbox.snippet import Snippet


def test_display_defaults_for_empty_fields():
    snippet = Snippet()

    assert snippet.display_title == "Untitled"
    assert snippet.display_language == "Unknown"
    assert snippet.display_description == "No description provided."
    assert snippet.display_code == "No code found."


def test_stored_values_are_coerced_to_text():
    snippet = Snippet.model_validate({"title": None, "language": 8, "code": "x", "unknown": True})

    assert snippet.to_dict() == {"title": "", "language": "8", "code": "x", "description": ""}
