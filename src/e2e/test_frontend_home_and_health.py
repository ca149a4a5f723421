import pytest
from frontend.web import app as flask_app, _css_color

@pytest.mark.e2e
def test_home_page_renders(ready):
    r = flask_app.test_client().get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "ghost" in html and "/api/suggest" in html
    assert "__ghost__" not in html and "__mode__" not in html

@pytest.mark.e2e
def test_health_reports_list_sizes(ready):
    data = flask_app.test_client().get("/api/health").get_json()
    assert data == {"ok": True, "preferred": 1, "suggestions": 4, "mode": "word"}

def test_css_color_conversion():
    assert _css_color("#00000038") == "rgba(255,255,255,0.22)"
    assert _css_color("#ff000080") == "rgba(255,0,0,0.50)"
    assert _css_color("gray") == "gray"
