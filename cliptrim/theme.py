"""Dark theme QSS stylesheet for the trim window."""

DARK_THEME = """
/* ── Global ─────────────────────────────────────────── */
QWidget {
    background-color: #1b1a2e;
    color: #e4e4ed;
    font-family: "Segoe UI Variable", "Segoe UI", sans-serif;
    font-size: 13px;
    border: none;
}
QWidget:focus { outline: none; }

/* ── Buttons ────────────────────────────────────────── */
QPushButton#CtrlBtn {
    height: 34px;
    padding: 0 18px;
    border-radius: 6px;
    border: 1px solid #3d3b55;
    background-color: #28263e;
    color: #e4e4ed;
    font-size: 13px;
    font-weight: 500;
}
QPushButton#CtrlBtn:hover {
    background-color: #353350;
    border-color: #4e4c68;
}
QPushButton#CtrlBtn:disabled {
    color: #5a5873;
    border-color: #2d2b45;
}
QPushButton#ExportBtn {
    height: 34px;
    padding: 0 18px;
    border-radius: 6px;
    background-color: #8b5cf6;
    color: #ffffff;
    font-weight: 600;
}
QPushButton#ExportBtn:hover { background-color: #7c3aed; }
QPushButton#ExportBtn:disabled {
    background-color: #28263e;
    color: #5a5873;
}

/* ── Trim control ───────────────────────────────────── */
#TrimArea {
    background-color: #131221;
    border-top: 1px solid #2d2b45;
}
#PlayBtn {
    background-color: #28263e;
    color: #e4e4ed;
    border: 1px solid #3d3b55;
    border-radius: 8px;
    min-width: 50px; max-width: 50px;
    min-height: 56px; max-height: 56px;
    font-size: 20px;
}
#PlayBtn:hover {
    background-color: #353350;
    border-color: #4e4c68;
}
#TimeDisplay {
    color: #e4e4ed;
    font-size: 12px;
    font-weight: 500;
    background: transparent;
    font-family: "Segoe UI Variable", "Segoe UI", monospace;
}
#TimeDisplayDim {
    color: #5a5873;
    font-size: 12px;
    font-weight: 500;
    background: transparent;
    font-family: "Segoe UI Variable", "Segoe UI", monospace;
}

/* ── Status bar ─────────────────────────────────────── */
#StatusLabel {
    color: #5a5873;
    font-size: 11px;
    background: transparent;
}
QLabel#Muted { color: #5a5873; font-size: 12px; }
"""
