from ghosttext import GhostTextField, MatchMode, MatchSource
from ghosttext import config as CFG

def _field(**kw) -> GhostTextField:
    return GhostTextField(["hello world wide web", "help desk"], preferred=["helicopter"], **kw)

def test_text_changed_returns_directive_and_tracks_suggestion():
    f = _field()
    d = f.text_changed("hel")
    assert d.display_text == "helicopter "
    assert f.current_suggestion() == "helicopter"
    assert f.match.source is MatchSource.PRIORITY
    assert f.text == "hel"

def test_text_setter_routes_through_matching():
    f = _field(mode="sentence")
    f.text = "hello"
    assert f.directive.display_text == "hello world wide web"
    f.text = None
    assert f.text == "" and f.directive.is_empty
    assert f.current_suggestion() is None

def test_each_keystroke_recomputes_from_scratch():
    f = _field(mode=MatchMode.SENTENCE)
    f.text_changed("help")
    assert f.current_suggestion() == "help desk"
    f.text_changed("hello")
    assert f.current_suggestion() == "hello world wide web"
    f.text_changed("hellx")
    assert f.current_suggestion() is None

def test_force_suggestion_bypasses_matching():
    f = _field(mode="sentence")
    f.text_changed("he")
    d = f.force_suggestion("heavy metal")
    assert d.display_text == "heavy metal"
    assert f.match.source is MatchSource.FORCED
    assert f.current_suggestion() == "heavy metal"

def test_force_empty_clears_overlay():
    f = _field()
    f.text_changed("hel")
    assert f.force_suggestion("").is_empty
    assert f.force_suggestion(None).is_empty
    assert f.current_suggestion() is None

def test_accept_commits_display_text():
    f = _field()
    f.text_changed("hello wo")
    assert f.accept() == "hello world "
    assert f.text == "hello world "
    # the accepted text is searched again right away
    assert f.directive.display_text == "hello world wide "

def test_accept_without_suggestion_is_noop():
    f = _field()
    f.text_changed("zzz")
    assert f.accept() == "zzz"
    assert f.text == "zzz"

def test_refresh_after_mode_change():
    f = _field()
    f.text_changed("hello wor")
    assert f.directive.display_text == "hello world "
    f.mode = "sentence"
    assert f.refresh().display_text == "hello world wide web"

def test_listeners_receive_each_directive_and_failures_are_isolated(caplog):
    f = _field()
    seen = []
    def boom(_d):
        raise ValueError("listener bug")
    f.subscribe(boom)
    f.subscribe(seen.append)
    f.subscribe(seen.append)  # ignored duplicate
    f.text_changed("hel")
    f.text_changed("help d")
    assert [d.display_text for d in seen] == ["helicopter ", "help desk "]
    assert "listener" in caplog.text
    f.unsubscribe(seen.append)
    f.unsubscribe(seen.append)  # already gone
    f.text_changed("h")
    assert len(seen) == 2

def test_lists_are_settable_and_defaults_come_from_config():
    f = GhostTextField()
    assert f.mode.value == CFG.DEFAULT_MODE
    assert f.completion_color == CFG.COMPLETION_COLOR
    assert f.padding == CFG.DEFAULT_PADDING
    f.bordered = True
    assert f.padding == CFG.BORDERED_PADDING
    f.padding = 3
    assert f.padding == 3
    assert f.text_changed("ca").is_empty
    f.suggestions = ["cat"]
    assert f.text_changed("ca").display_text == "cat "
    f.preferred = ["camel"]
    assert f.text_changed("ca").display_text == "camel "
