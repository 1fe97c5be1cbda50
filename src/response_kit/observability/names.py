# src/response_kit/observability/names.py

"""Standard metric names for response-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Formatting Metrics
# ============================================================================

# Duration (label: mode=structured|markdown)
FORMAT_DURATION = "format_duration"

# Counters
FORMAT_REQUESTS_TOTAL = "format_requests_total"
FORMAT_JSON_FALLBACK_TOTAL = "format_json_fallback_total"


# ============================================================================
# Rendering Metrics
# ============================================================================

# Counters
HIGHLIGHT_ERRORS_TOTAL = "highlight_errors_total"
RENDER_DEPTH_LIMIT_TOTAL = "render_depth_limit_total"
