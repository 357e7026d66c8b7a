# Drive Gallery HTTP API
# Created: 2026-10-19
#
# Versioned REST endpoints used by the gallery page, mounted at /api/v1/.
