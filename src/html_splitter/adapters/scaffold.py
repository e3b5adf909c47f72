"""Generated scaffold files for the emitted application."""

from __future__ import annotations

import json

ENTRY_SCRIPT_FILENAME = "main.js"
MANIFEST_FILENAME = "package.json"
HTML_FILENAME = "index.html"

_ENTRY_SCRIPT_TEMPLATE = """\
const {{ app, BrowserWindow }} = require('electron');
const path = require('path');

function createWindow() {{
    const win = new BrowserWindow({{
        width: 1200,
        height: 800,
        title: {title},
        webPreferences: {{
            nodeIntegration: false,
            contextIsolation: true
        }}
    }});

    win.loadFile(path.join(__dirname, '{html}'));
}}

app.whenReady().then(() => {{
    createWindow();

    app.on('activate', () => {{
        if (BrowserWindow.getAllWindows().length === 0) {{
            createWindow();
        }}
    }});
}});

app.on('window-all-closed', () => {{
    if (process.platform !== 'darwin') {{
        app.quit();
    }}
}});
"""


def render_entry_script(app_name: str) -> str:
    """Render the bootstrap that opens one window loading ``index.html``."""
    return _ENTRY_SCRIPT_TEMPLATE.format(
        title=json.dumps(app_name, ensure_ascii=False),
        html=HTML_FILENAME,
    )


def render_manifest(app_name: str, app_version: str) -> str:
    """Render ``package.json`` for the generated application."""
    payload = {
        "name": app_name,
        "version": app_version,
        "description": f"{app_name} desktop application",
        "main": ENTRY_SCRIPT_FILENAME,
        "scripts": {"start": "electron ."},
    }
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
