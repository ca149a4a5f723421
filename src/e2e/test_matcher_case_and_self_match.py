from ghosttext import compose, find, is_match, MatchMode

def test_case_insensitive_prefix():
    r = find("CA", [], ["cat"])
    assert r.found and r.candidate == "cat"

def test_self_match_is_excluded():
    assert not find("cat", [], ["cat"]).found

def test_self_match_excluded_ignoring_case():
    assert not find("CAT", ["Cat"], ["cat"]).found

def test_self_match_skipped_then_longer_candidate_found():
    r = find("cat", ["cat", "CAT"], ["catalog"])
    assert r.candidate == "catalog"

def test_shorter_candidate_never_matches():
    assert not find("category", [], ["cat", "categ"]).found

def test_empty_term_is_not_found():
    assert not find("", ["", "a", "anything"], ["b"]).found

def test_predicate_keeps_both_clauses():
    assert is_match("hello", "he")
    assert not is_match("hello", "hello")
    assert not is_match("he", "hello")
    assert not is_match("yellow", "he")

def test_unicode_casefold():
    assert find("STRA", [], ["straße"]).candidate == "straße"

def test_folding_that_changes_length_does_not_misalign_remainder():
    # "straß" folds to "strass", but only the first five characters of a
    # candidate are compared, so "STRASSE" is no completion of it
    assert not find("straß", [], ["STRASSE"]).found
    r = find("straß", [], ["STRASSE", "Straßenbahn"])
    assert r.candidate == "Straßenbahn"
    d = compose("straß", r, MatchMode.SENTENCE)
    assert d.display_text == "straßenbahn"
    assert d.visible_text == "enbahn"
