from __future__ import annotations
import argparse
import logging

from flask import Flask, request, jsonify, Response

from linematch import filter_candidates, to_host, MatchConfig

log = logging.getLogger(__name__)

app = Flask(__name__)


# ---------- API ----------
@app.get("/api/health")
def api_health():
    return jsonify({"ok": True})


@app.post("/api/filter")
def api_filter():
    body = request.get_json(silent=True) or {}
    query = body.get("query", "")
    candidates = body.get("candidates", [])
    if not isinstance(query, str) or not isinstance(candidates, list):
        return jsonify({"error": "expected {query: str, candidates: [str]}"}), 400
    if not all(isinstance(c, str) for c in candidates):
        return jsonify({"error": "candidates must be strings"}), 400

    try:
        config = MatchConfig.from_env(
            winwidth=body.get("winwidth"),
            enable_icon=body.get("enable_icon"),
            line_splitter=body.get("line_splitter"),
            algo=body.get("algo"),
        )
        indices, lines, truncated_map = to_host(filter_candidates(query, candidates, config))
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"indices": indices, "lines": lines, "truncated_map": truncated_map})


# ---------- UI ----------
@app.get("/")
def home():
    # Paste candidates, type a query; matched bytes are highlighted client-side.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>linematch</title>
<style>
body{margin:24px auto;max-width:900px;background:#0b0f14;color:#cfd8e3;font:15px/1.4 system-ui,sans-serif}
textarea,input{width:100%;background:#0b1117;color:#cfd8e3;border:1px solid #1c2530;border-radius:8px;padding:8px}
textarea{height:140px;font-family:ui-monospace,monospace}
#out div{font-family:ui-monospace,monospace;white-space:pre;padding:2px 0}
.mark{color:#6ee7ff;font-weight:600}
.meta{color:#8a94a6;font-size:13px;margin:6px 0}
</style>
</head>
<body>
  <h1>linematch</h1>
  <textarea id="cands" placeholder="One candidate per line"></textarea>
  <input id="q" type="text" placeholder="Type to filter…" autocomplete="off" />
  <div id="stats" class="meta">Ready.</div>
  <div id="out"></div>
<script>
const $ = (s) => document.querySelector(s);
const enc = new TextEncoder();
let t;

function esc(s){return s.replace(/[&<>]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;"}[c]));}

// positions are UTF-8 byte offsets; walk characters and test their first byte
function highlight(line, positions){
  const hit = new Set(positions);
  let out = "", b = 0;
  for (const ch of line){
    out += hit.has(b) ? `<span class="mark">${esc(ch)}</span>` : esc(ch);
    b += enc.encode(ch).length;
  }
  return out;
}

async function run(){
  const candidates = $("#cands").value.split("\n").filter(Boolean);
  const resp = await fetch("/api/filter", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify({query: $("#q").value, candidates}),
  });
  const data = await resp.json();
  if(!resp.ok){ $("#stats").textContent = `Error: ${data.error}`; return; }
  $("#stats").textContent = `Matched ${data.lines.length} of ${candidates.length}`;
  $("#out").innerHTML = data.lines.map((l, i) => `<div>${highlight(l, data.indices[i])}</div>`).join("");
}

$("#q").addEventListener("input", () => { clearTimeout(t); t = setTimeout(run, 120); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the linematch Flask API")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    log.info("Serving on http://%s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
