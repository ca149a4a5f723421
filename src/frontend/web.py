from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response

import frontend as api
from ghosttext import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)

# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    q = request.args.get("q", "", type=str)
    mode = request.args.get("mode", None, type=str)
    return jsonify(api.payload(q, mode))


@app.get("/api/health")
def api_health():
    f = api.field()
    return jsonify({
        "ok": True,
        "preferred": len(f.preferred),
        "suggestions": len(f.suggestions),
        "mode": f.mode.value,
    })


@app.errorhandler(api.NotInitializedError)
def not_ready(exc: api.NotInitializedError):
    log.error("Request before initialization: %s", exc)
    return jsonify({"ok": False, "error": str(exc)}), 503

# ---------- UI ----------
@app.get("/")
def home():
    # One input with a ghost layer behind it. No external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Ghost text • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --border:#1c2530;
  --ghost:__GHOST__;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:720px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap }
.field{ position:relative; flex:1; min-width:240px }
.field input, .field .ghost{
  width:100%; padding:12px 14px; border-radius:12px; font-size:16px;
  font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace;
  white-space:pre;
}
.field input{
  position:relative; z-index:1; border:1px solid var(--border);
  background:transparent; color:var(--ink); outline:none;
}
.field input:focus{ border-color:var(--accent) }
.field .ghost{
  position:absolute; inset:0; z-index:0; border:1px solid transparent;
  background:#0b1117; pointer-events:none; overflow:hidden;
}
.ghost .hidden{ color:transparent }
.ghost .visible{ color:var(--ghost) }
select{
  padding:10px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink);
}
.meta{ display:flex; justify-content:space-between; color:var(--muted); font-size:13px; margin-top:6px }
kbd{ background:#111825; border:1px solid var(--border); padding:1px 6px; border-radius:6px; color:var(--ink) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Ghost text autocomplete</h1>
      <div class="controls">
        <div class="field">
          <div id="ghost" class="ghost"></div>
          <input id="q" type="text" placeholder="Start typing…" autocomplete="off" autofocus />
        </div>
        <select id="mode">
          <option value="word">word</option>
          <option value="sentence">sentence</option>
        </select>
      </div>
      <div class="meta">
        <div id="stats">Ready.</div>
        <div><kbd>Tab</kbd> or <kbd>→</kbd> to accept</div>
      </div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), ghost = $("#ghost"), mode = $("#mode"), stats = $("#stats");
mode.value = "__MODE__";
let last = null;

function esc(s){ return s.replace(/[&<>]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;"}[c])); }

function paint(d){
  last = d;
  if(!d || !d.display_text){ ghost.innerHTML = ""; return; }
  const [start, len] = d.hidden_range;
  const hidden = d.display_text.slice(start, start + len);
  const visible = d.display_text.slice(start + len);
  ghost.innerHTML = `<span class="hidden">${esc(hidden)}</span><span class="visible">${esc(visible)}</span>`;
}

async function update(){
  const text = q.value;
  try{
    const resp = await fetch(`/api/suggest?q=${encodeURIComponent(text)}&mode=${mode.value}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const d = await resp.json();
    if(q.value !== text) return;  // a newer keystroke owns the overlay
    paint(d);
    stats.textContent = d.candidate ? `${d.source}: ${d.candidate}` : "No suggestion.";
  }catch(e){
    paint(null);
    stats.textContent = `Error: ${e.message ?? e}`;
  }
}

q.addEventListener("input", update);
mode.addEventListener("change", update);
q.addEventListener("keydown", (ev)=>{
  const atEnd = q.selectionStart === q.value.length;
  if(last && last.display_text && (ev.key === "Tab" || (ev.key === "ArrowRight" && atEnd))){
    ev.preventDefault();
    q.value = last.display_text;
    update();
  }else if(ev.key === "Escape"){
    q.value = ""; paint(null); stats.textContent = "Ready.";
  }
});
</script>
</body>
</html>
"""
    html = html.replace("__GHOST__", _css_color(CFG.COMPLETION_COLOR))
    html = html.replace("__MODE__", api.field().mode.value if api.ready() else CFG.DEFAULT_MODE)
    return Response(html, mimetype="text/html")


def _css_color(hex_rgba: str) -> str:
    """#RRGGBBAA -> rgba(); pure black becomes white on the dark page."""
    h = hex_rgba.lstrip("#")
    if len(h) != 8:
        return hex_rgba
    r, g, b, a = (int(h[i:i + 2], 16) for i in range(0, 8, 2))
    if (r, g, b) == (0, 0, 0):
        r = g = b = 255
    return f"rgba({r},{g},{b},{a / 255:.2f})"


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the ghost-text Flask UI")
    ap.add_argument("--candidates", nargs="+", default=[], help="Files/folders with suggestions (one per line)")
    ap.add_argument("--priority", nargs="+", default=[], help="Files/folders with preferred suggestions")
    ap.add_argument("--mode", choices=[m.value for m in api.MatchMode], default=CFG.DEFAULT_MODE)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if not args.candidates and not args.priority:
        ap.error("give at least one of --candidates / --priority")

    api.initialize(args.candidates, args.priority, mode=args.mode, verbose=args.verbose)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
