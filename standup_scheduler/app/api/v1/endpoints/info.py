"""
Information page for API v1.

``GET /`` returns a short HTML page listing the available endpoints so
that a browser pointed at the service shows something useful.  The
machine-readable description is the OpenAPI document at
``/openapi.json``.
"""

import html

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from standup_scheduler.app.core.config import settings

router = APIRouter()

ENDPOINTS = [
    ("GET", "/users", "All users with their team"),
    ("GET", "/teamname/{team_id}", "A single team"),
    ("GET", "/teams/members/{team_id}", "Members of a team"),
    ("GET", "/standups/previous/{team_id}", "Most recent past standups (default 5)"),
    ("GET", "/standups/next/{team_id}", "Next upcoming standup"),
    ("GET", "/standups/{standup_id}", "A single standup"),
    ("POST", "/standups/{team_id}", "Schedule a standup"),
    ("PUT", "/standups/{standup_id}", "Reschedule a standup"),
    ("PUT", "/standups/notes/{standup_id}", "Replace standup notes"),
    ("GET", "/standups/activities/{standup_id}", "Activities of a standup"),
    ("POST", "/activity/{standup_id}", "Add an activity"),
    ("PUT", "/activity/{activity_id}", "Edit an activity"),
]


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def info_page() -> HTMLResponse:
    rows = "\n".join(
        f"<tr><td>{method}</td><td><code>{html.escape(settings.api_prefix + path)}</code></td>"
        f"<td>{html.escape(description)}</td></tr>"
        for method, path, description in ENDPOINTS
    )
    title = html.escape(settings.project_name)
    page = f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{title}</title></head>
<body>
<h1>{title}</h1>
<p>Version {html.escape(settings.api_version)}.  See <a href="/docs">/docs</a> for the interactive reference.</p>
<table>
<thead><tr><th>Method</th><th>Path</th><th>Description</th></tr></thead>
<tbody>
{rows}
</tbody>
</table>
</body>
</html>
"""
    return HTMLResponse(content=page)
