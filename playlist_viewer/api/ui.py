"""Browser front-end: one page bound to the proxy endpoints.

Tokens live in localStorage under the same two keys the terminal client uses
in its session file.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from playlist_viewer.config import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY

router = APIRouter()

_PAGE = """
<html>
  <head><title>Digital to Vinyl</title></head>
  <body style="font-family: sans-serif; padding: 24px; background: #000; color: #fff;">
    <h1>DIGITAL TO VINYL</h1>
    <p>Transform your digital playlists into vinyl treasures.</p>

    <div id="account">
      <a id="login" href="/login"
         style="display:inline-block;padding:10px 14px;background:#1DB954;color:#fff;text-decoration:none;border-radius:6px;">
         Connect Spotify
      </a>
      <button id="logout" style="display:none;">Log out</button>
      <p id="account-error" style="color:#f55;"></p>
      <ul id="playlists"></ul>
    </div>

    <hr>
    <input id="playlist-url" type="text" size="60" placeholder="Paste your Spotify playlist URL here">
    <button id="import">Import from URL</button>
    <p id="import-error" style="color:#f55;"></p>
    <ul id="tracks"></ul>

    <script>
      const ACCESS_KEY = "__ACCESS_KEY__";
      const REFRESH_KEY = "__REFRESH_KEY__";
      let generation = 0;
      let inFlight = false;

      function el(id) { return document.getElementById(id); }

      function renderLoggedIn(loggedIn) {
        el("login").style.display = loggedIn ? "none" : "inline-block";
        el("logout").style.display = loggedIn ? "inline-block" : "none";
      }

      async function guarded(fn) {
        if (inFlight) return;
        inFlight = true;
        const mine = generation;
        try { await fn(() => mine === generation); } finally { inFlight = false; }
      }

      function loadPlaylists() {
        return guarded(async (current) => {
          el("account-error").textContent = "";
          try {
            const r = await fetch("/playlists", {
              headers: { Authorization: "Bearer " + localStorage.getItem(ACCESS_KEY) },
            });
            const data = await r.json();
            if (!current()) return;
            if (!r.ok) { el("account-error").textContent = data.error; return; }
            el("playlists").innerHTML = "";
            for (const p of data.playlists) {
              const li = document.createElement("li");
              li.textContent = p.name + " (" + ((p.tracks || {}).total || 0) + " tracks)";
              el("playlists").appendChild(li);
            }
          } catch (e) {
            if (current()) el("account-error").textContent = "Failed to connect to the server.";
          }
        });
      }

      function stripRedirectParams() {
        const url = new URL(window.location.href);
        url.searchParams.delete("code");
        url.searchParams.delete("state");
        url.searchParams.delete("error");
        window.history.replaceState({}, "", url.toString());
      }

      async function exchangeCode(code) {
        let loggedIn = false;
        await guarded(async (current) => {
          try {
            const r = await fetch("/callback", {
              method: "POST",
              headers: { "Content-Type": "application/json" },
              body: JSON.stringify({ code }),
            });
            const data = await r.json();
            if (!current()) return;
            if (!r.ok) { el("account-error").textContent = data.error; return; }
            localStorage.setItem(ACCESS_KEY, data.access_token);
            if (data.refresh_token) localStorage.setItem(REFRESH_KEY, data.refresh_token);
            loggedIn = true;
          } catch (e) {
            if (current()) el("account-error").textContent = "Failed to connect to the server.";
          }
        });
        renderLoggedIn(loggedIn);
        if (loggedIn) loadPlaylists();
      }

      el("logout").onclick = () => {
        generation += 1;
        localStorage.removeItem(ACCESS_KEY);
        localStorage.removeItem(REFRESH_KEY);
        el("playlists").innerHTML = "";
        el("account-error").textContent = "";
        renderLoggedIn(false);
      };

      el("import").onclick = () => guarded(async (current) => {
        el("import").disabled = true;
        el("import").textContent = "Importing...";
        el("import-error").textContent = "";
        el("tracks").innerHTML = "";
        try {
          const r = await fetch("/playlist", {
            method: "POST",
            headers: { "Content-Type": "application/json" },
            body: JSON.stringify({ playlistUrl: el("playlist-url").value }),
          });
          const data = await r.json();
          if (!current()) return;
          if (!r.ok) { el("import-error").textContent = data.error || "An unknown error occurred"; return; }
          for (const t of data.tracks) {
            const li = document.createElement("li");
            li.textContent = t.name + " - " + t.artists;
            el("tracks").appendChild(li);
          }
        } catch (e) {
          el("import-error").textContent = "Failed to connect to the server.";
        } finally {
          el("import").disabled = false;
          el("import").textContent = "Import from URL";
        }
      });

      const params = new URLSearchParams(window.location.search);
      const code = params.get("code");
      const authError = params.get("error");
      stripRedirectParams();
      if (localStorage.getItem(ACCESS_KEY)) {
        renderLoggedIn(true);
        loadPlaylists();
      } else if (code) {
        exchangeCode(code);
      } else {
        renderLoggedIn(false);
        if (authError) el("account-error").textContent = "Spotify authorization failed: " + authError;
      }
    </script>
  </body>
</html>
""".replace("__ACCESS_KEY__", ACCESS_TOKEN_KEY).replace("__REFRESH_KEY__", REFRESH_TOKEN_KEY)


@router.get("/", response_class=HTMLResponse)
def index() -> str:
    return _PAGE
