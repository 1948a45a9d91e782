"""All magic values live here — no inline literals anywhere else."""

# Vision backends
PROVIDER_ANTHROPIC = "anthropic"
PROVIDER_OPENAI = "openai"
SUPPORTED_PROVIDERS = (PROVIDER_ANTHROPIC, PROVIDER_OPENAI)
DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-20250514"
DEFAULT_OPENAI_MODEL = "gpt-4o"

# Upper bound on model output, in tokens. Not adjustable per request.
MAX_OUTPUT_TOKENS = 4000

# Exactly one attempt per request; the UI owns "try again".
SDK_MAX_RETRIES = 0

# HTTP surface
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
GENERATE_ROUTE = "/api/generate"
HEALTH_ROUTE = "/health"

# Request body keys
FIELD_IMAGE = "image"
FIELD_FRAMEWORK = "framework"
FIELD_CODE = "code"
FIELD_ERROR = "error"

# Status codes
STATUS_OK = 200
STATUS_BAD_REQUEST = 400
STATUS_SERVER_ERROR = 500
STATUS_MAX_ERROR = 599

# Embedded image grammar: data:image/<subtype>;base64,<data>
DATA_URL_PATTERN = r"data:image/([a-zA-Z]+);base64,(.*)"
MEDIA_TYPE_PREFIX = "image/"

# Markdown fence cleanup (start/end of the trimmed text only)
FENCE_OPEN_PATTERN = r"\A```[\w+-]*\n"
FENCE_CLOSE_PATTERN = r"\n```\Z"
SEGMENT_SEPARATOR = "\n"

# User-facing error messages
MSG_ERR_NOT_OBJECT = "Request body must be a JSON object"
MSG_ERR_INVALID_JSON = "Invalid JSON body"
MSG_ERR_MISSING_FIELDS = "Missing required fields"
MSG_ERR_INVALID_FRAMEWORK = "Invalid framework. Use react, vue, or html."
MSG_ERR_NO_API_KEY = "API key not configured"
MSG_ERR_INVALID_IMAGE = "Invalid data URL"
MSG_ERR_UPSTREAM_UNAVAILABLE = "Could not reach the vision model — please try again later"
MSG_ERR_UPSTREAM = "Vision model request failed (status %s)"
MSG_ERR_GENERATION_FAILED = "Failed to generate code"

# Log messages
MSG_SERVER_STARTING = "Starting screen2code on %s:%s (provider: %s, model: %s)"
MSG_GENERATING = "→ %s (%s) for %s"
MSG_GENERATED = "✓ Generated %d chars of %s (%.1fs)"
MSG_EMPTY_RESPONSE = "Vision model returned no text content"
MSG_CLIENT_ERROR = "✗ Rejected request: %s"
MSG_SERVER_ERROR = "✗ Error generating code: %s"
