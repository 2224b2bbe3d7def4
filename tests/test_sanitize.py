from contactform.services.sanitize import sanitize_input, sanitize_submission


def test_none_becomes_empty():
    assert sanitize_input(None) == ""


def test_script_tag_has_no_raw_angle_brackets():
    out = sanitize_input("<script>alert(1)</script>")
    assert "<" not in out and ">" not in out
    assert out == "&lt;script&gt;alert(1)&lt;/script&gt;"


def test_quotes_escaped_and_whitespace_trimmed():
    assert sanitize_input('  say "hi" it\'s me  ') == "say &quot;hi&quot; it&#x27;s me"


def test_backslashes_removed():
    assert sanitize_input(r"O\'Brien") == "O&#x27;Brien"
    assert sanitize_input("a\\\\b") == "a\\b"


def test_escaping_twice_double_encodes():
    once = sanitize_input("a & b")
    assert once == "a &amp; b"
    assert sanitize_input(once) == "a &amp;amp; b"


def test_sanitize_submission_fills_missing_fields():
    s = sanitize_submission({"name": " Ada ", "email": None})
    assert s.name == "Ada"
    assert s.email == ""
    assert s.subject == ""
    assert s.message == ""


def test_non_string_value_treated_as_absent():
    assert sanitize_input(b"bytes") == ""
    assert sanitize_input(42) == ""
