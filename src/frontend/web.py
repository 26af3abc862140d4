from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
import frontend as api
from focusindex import config as CFG
from focusindex.engine import SelectionError
from focusindex.loader import load_paths

app = Flask(__name__)

# ---------- API ----------
@app.errorhandler(RuntimeError)
def not_ready(exc: RuntimeError):
    # no open items yet
    return jsonify({"ok": False, "error": str(exc)}), 503

@app.get("/health")
def health():
    return jsonify({"ok": True, "items": api.current().count()})

@app.get("/api/items")
def api_items():
    q = request.args.get("q", "", type=str)
    rows = api.items(q)
    return jsonify({"total": api.current().count(), "items": [r.to_dict() for r in rows]})

@app.post("/api/select")
def api_select():
    payload = request.get_json(silent=True) or {}
    value = str(payload.get("value", ""))
    try:
        path = api.select(value)
    except SelectionError as err:
        return jsonify({"ok": False, "error": err.message}), 404
    return jsonify({"ok": True, "path": path})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Focus by index</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --mark-bg:rgba(110,231,255,.2);
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:760px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
.input input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.input input:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.err{
  display:none; margin-top:12px; padding:10px 12px; border-radius:10px;
  background:rgba(255,93,93,.12); border:1px solid rgba(255,93,93,.35); color:#ffb0b0;
}
.ok{ display:none; margin-top:12px; color:var(--accent) }
.results{ margin-top:16px; border-radius:12px; border:1px solid var(--border) }
.row{ padding:10px 14px; border-top:1px solid var(--border); cursor:pointer }
.row:first-child{ border-top:none }
.row.active, .row:hover{ background:#0d131a }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Focus by index</h1>
      <div class="input">
        <input id="q" type="text" placeholder="__PLACEHOLDER__" autocomplete="off" autofocus />
      </div>
      <div class="meta" id="stats">Ready.</div>
      <div id="err" class="err"></div>
      <div id="ok" class="ok mono"></div>
      <div id="out" class="results"></div>
    </div>
  </div>

<script>
const LIMIT = __LIMIT__;
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), out = $("#out"), err = $("#err"), ok = $("#ok"), stats = $("#stats");
let rows = [], total = 0, active = 0;

function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }

function render(){
  if(rows.length === 0){ out.innerHTML = '<div class="empty">No matches.</div>'; return; }
  out.innerHTML = rows.map((r,i)=>
    `<div class="row mono${i===active?" active":""}" data-text="${esc(r.text)}" title="${esc(r.path)}">${esc(r.text)}</div>`
  ).join("");
}

async function load(){
  const resp = await fetch(`/api/items?q=${encodeURIComponent(q.value)}`);
  const data = await resp.json();
  rows = data.items; total = data.total; active = 0;
  stats.textContent = `${rows.length} of ${total} open`;
  render();
}

async function select(value){
  err.style.display = "none"; ok.style.display = "none";
  const resp = await fetch("/api/select", {
    method: "POST", headers: {"Content-Type": "application/json"}, body: JSON.stringify({value})
  });
  const data = await resp.json();
  if(data.ok){ ok.textContent = data.path; ok.style.display = "block"; }
  else { err.textContent = data.error; err.style.display = "block"; }
}

q.addEventListener("input", ()=>{
  if(q.value.length === 1 && total < LIMIT && /[0-9]/.test(q.value)){
    // out-of-range digits do nothing
    const n = Number(q.value); if(n >= 1 && n <= total) select(q.value);
    return;
  }
  load();
});
out.addEventListener("click", (ev)=>{
  const row = ev.target.closest(".row"); if(row) select(row.dataset.text);
});
window.addEventListener("keydown", (ev)=>{
  if(ev.key === "ArrowDown"){ active = Math.min(rows.length - 1, active + 1); render(); }
  else if(ev.key === "ArrowUp"){ active = Math.max(0, active - 1); render(); }
  else if(ev.key === "Enter" && rows[active]){ select(rows[active].text); }
  else if(ev.key === "Escape"){ q.value = ""; load(); }
});
load();
</script>
</body>
</html>
"""
    html = html.replace("__PLACEHOLDER__", CFG.PLACEHOLDER).replace("__LIMIT__", str(CFG.DIGIT_JUMP_LIMIT))
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Flask picker UI")
    ap.add_argument("paths", nargs="*", help="Open file paths, in tab order")
    ap.add_argument("--from", dest="sources", action="append", default=[],
                    help="Read paths from a file, one per line ('-' for stdin). Repeatable.")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    paths = load_paths(args.sources, extra=args.paths, verbose=args.verbose)
    if not paths:
        ap.error("no open paths given (positional or --from)")
    try:
        api.initialize(paths, verbose=args.verbose)
    except ValueError as exc:
        ap.error(str(exc))

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        api.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
