import pytest
from pyright_review.review import markers


KEY = "0123456789abcdef"


@pytest.mark.unit
@pytest.mark.parametrize("prefix", ["pyright-review", "p", "tool2-x"])
@pytest.mark.parametrize("key", [KEY, "f" * 64, "a1b2c3d4e5f60718"])
def test_decode_reverses_attach(prefix, key):
    body = markers.attach("## Some content", prefix, key)

    assert markers.decode(prefix, body) == key


@pytest.mark.unit
def test_footer_is_last_line_after_blank_line():
    body = markers.attach("content\n\n", "pyright-review", KEY)

    assert body.splitlines()[-2:] == ["", f"###### [pyright-review:{KEY}]"]


@pytest.mark.unit
def test_encode_rejects_invalid_input():
    with pytest.raises(ValueError):
        markers.encode("pyright-review", "not-a-key")
    with pytest.raises(ValueError):
        markers.encode("Bad Prefix", KEY)
    with pytest.raises(ValueError):
        markers.encode("pyright-review", "abc")


@pytest.mark.unit
def test_decode_does_not_match_other_prefix_with_same_stem():
    body = markers.attach("content", "pyright-review-old", KEY)

    assert markers.decode("pyright-review", body) is None
    assert markers.decode("pyright", body) is None


@pytest.mark.unit
@pytest.mark.parametrize("body", [
    None,
    "",
    "just a comment",
    f"content\n###### [pyright-review:{KEY}]",
    f"content\n\n###### [pyright-review:{KEY}] trailing",
    f"content\n\n##### [pyright-review:{KEY}]",
    f"content\n\n###### [pyright-review:{KEY.upper()}]",
    f"content\n\n###### [pyright-review:{KEY}\n",
])
def test_decode_returns_none_for_missing_or_malformed_footer(body):
    assert markers.decode("pyright-review", body) is None


@pytest.mark.unit
def test_decode_ignores_marker_inside_content():
    quoted = f"> ###### [pyright-review:{KEY}]\n\nI disagree with this."

    assert markers.decode("pyright-review", quoted) is None


@pytest.mark.unit
def test_decode_accepts_crlf_bodies():
    body = markers.attach("line one\nline two", "pyright-review", KEY).replace("\n", "\r\n")

    assert markers.decode("pyright-review", body) == KEY


@pytest.mark.unit
def test_legacy_footers_are_recognised():
    assert markers.is_legacy(f"## Pyright Summary\n\n###### {KEY}")
    assert markers.is_legacy(f"## Pyright Summary\n\n###### [{KEY}]")
    assert markers.is_legacy("**Pyright Warning/Error**\n\n###### [pyright-file:main.py]")


@pytest.mark.unit
def test_legacy_requires_pyright_content():
    assert not markers.is_legacy(f"Deploy preview ready\n\n###### [{KEY}]")
    assert not markers.is_legacy("## Pyright Summary\n\nNo footer here")


@pytest.mark.unit
def test_legacy_ignores_other_workflows_comments():
    sha = "0123456789abcdef0123456789abcdef01234567"
    assert not markers.is_legacy(f"Deploy for pyright bump\n\n## {sha}")
    assert not markers.is_legacy(f"Coverage report (pyright job)\n\n###### [{KEY}]")
    assert not markers.is_legacy(f"## Pyright status\n\n###### {KEY}")


@pytest.mark.unit
def test_legacy_comparison_heading_is_recognised():
    assert markers.is_legacy(f"## Pyright Summary Comparison\n| | Base |\n\n###### {KEY}")
