from ghosttext import compose, MatchMode, MatchResult, MatchSource

def test_sentence_mode_shows_full_candidate():
    m = MatchResult(candidate="hello world wide web", source=MatchSource.PRIORITY)
    d = compose("hello wor", m, MatchMode.SENTENCE)
    assert d.display_text == "hello world wide web"
    assert d.visible_text == "ld wide web"

def test_unknown_mode_falls_back_to_default(caplog):
    m = MatchResult(candidate="hello world wide web", source=MatchSource.PRIORITY)
    d = compose("hello wor", m, "paragraph")
    assert d.display_text == "hello world "
    assert "Unknown match mode" in caplog.text

def test_mode_strings_are_case_insensitive():
    assert MatchMode.coerce("SENTENCE") is MatchMode.SENTENCE
    assert MatchMode.coerce(" word ") is MatchMode.WORD

def test_directive_to_dict():
    m = MatchResult(candidate="cat food", source=MatchSource.FALLBACK)
    out = compose("ca", m, MatchMode.SENTENCE).to_dict()
    assert out == {"display_text": "cat food", "hidden_range": [0, 2], "visible_text": "t food"}
