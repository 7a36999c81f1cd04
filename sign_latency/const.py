"""Constants for the signing latency tester."""

# Default configuration values
DEFAULT_BASE_URL = "https://api.turnkey.com"
DEFAULT_ITERATIONS = 10
DEFAULT_PAYLOAD = "hello from Turnkey !"
DEFAULT_ENV_FILE = ".env.local"

# Environment variable names
ENV_API_PRIVATE_KEY = "TURNKEY_API_PRIVATE_KEY"
ENV_API_PUBLIC_KEY = "TURNKEY_API_PUBLIC_KEY"
ENV_ORGANIZATION_ID = "TURNKEY_ORGANIZATION_ID"
ENV_SIGN_WITH = "TURNKEY_SIGN_WITH"
ENV_ITERATIONS = "ITERATIONS"
ENV_BASE_URL = "TURNKEY_BASE_URL"
ENV_PAYLOAD = "SIGN_PAYLOAD"
ENV_LOG_LEVEL = "LOG_LEVEL"

REQUIRED_ENV_VARS = (
    ENV_API_PRIVATE_KEY,
    ENV_API_PUBLIC_KEY,
    ENV_ORGANIZATION_ID,
    ENV_SIGN_WITH,
)
OPTIONAL_ENV_VARS = {
    ENV_ITERATIONS: f"(default: {DEFAULT_ITERATIONS})",
    ENV_BASE_URL: f"(default: {DEFAULT_BASE_URL})",
    ENV_PAYLOAD: f'(default: "{DEFAULT_PAYLOAD}")',
    ENV_LOG_LEVEL: "(default: WARNING)",
}

# Logging configuration
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

# API surface
SIGN_RAW_PAYLOAD_PATH = "/public/v1/submit/sign_raw_payload"
ACTIVITY_TYPE_SIGN_RAW_PAYLOAD_V2 = "ACTIVITY_TYPE_SIGN_RAW_PAYLOAD_V2"
PAYLOAD_ENCODING_TEXT_UTF8 = "PAYLOAD_ENCODING_TEXT_UTF8"
HASH_FUNCTION_SHA256 = "HASH_FUNCTION_SHA256"
HASH_FUNCTION_NOT_APPLICABLE = "HASH_FUNCTION_NOT_APPLICABLE"
ADDRESS_PREFIX = "0x"

CURVE_LABEL_ECDSA = "secp256k1/P-256 (ECDSA)"
CURVE_LABEL_ED25519 = "Ed25519"

# Request stamping
STAMP_HEADER_NAME = "X-Stamp"
STAMP_SIGNATURE_SCHEME = "SIGNATURE_SCHEME_TK_API_P256"

# HTTP
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_TYPE_JSON = "application/json"
CONNECTION_HEADER = "Connection"

# Report placeholders
MISSING_VALUE = "—"
RULE_WIDTH = 50
