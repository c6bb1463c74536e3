"""
Data access layer.

Design rules:
- Views call ONLY functions in `data.service` (plus the pure helpers in `refine` / `forms`).
- Backend failures surface as `BackendError`; listing reads fall back to sample data or an empty table.
- No env var reads here (config-only).
"""
