# src/shared/error_codes.py
# Central mapping for the HTTP error contract.
# Keep keys stable; API clients rely on these.
ERROR_CODES = {
    # ─── Validation & Requests ──────────────────────────────────────────────
    "validation_error": {
        "http": 400,
        "message": "Validation failed for one or more fields."
    },
    "invalid_phone_number": {
        "http": 400,
        "message": "Invalid phone number format. Must be 10-15 digits."
    },
    "invalid_message": {
        "http": 400,
        "message": "Message must be between 1 and 160 characters."
    },

    # ─── Resources ─────────────────────────────────────────────────────────
    "not_found": {
        "http": 404,
        "message": "Resource not found."
    },
    "method_not_allowed": {
        "http": 405,
        "message": "Method not allowed."
    },

    # ─── Dependencies ──────────────────────────────────────────────────────
    "service_unavailable": {
        "http": 503,
        "message": "A required backing service is unavailable."
    },

    # ─── Catch-all ─────────────────────────────────────────────────────────
    "internal_error": {
        "http": 500,
        "message": "An unexpected error occurred."
    },
}
