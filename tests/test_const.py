"""Constants used across all test files."""

# Configuration values
TEST_PRIVATE_KEY = "c9afa9d845ba75166b5c215767b1d6934e50c3db36e89b127b8a622b120f6721"
TEST_PUBLIC_KEY = "0260fed4ba255a9d31c961eb74c6356d68c049b8923b61fa6ce669622e60f29fb6"
TEST_ORGANIZATION_ID = "org-1234"
TEST_SIGN_WITH_ADDRESS = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
TEST_SIGN_WITH_SOLANA = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
TEST_BASE_URL = "https://api.example.test"

TEST_ENV = {
    "TURNKEY_API_PRIVATE_KEY": TEST_PRIVATE_KEY,
    "TURNKEY_API_PUBLIC_KEY": TEST_PUBLIC_KEY,
    "TURNKEY_ORGANIZATION_ID": TEST_ORGANIZATION_ID,
    "TURNKEY_SIGN_WITH": TEST_SIGN_WITH_ADDRESS,
    "TURNKEY_BASE_URL": TEST_BASE_URL,
}

ALL_ENV_VARS = (
    "TURNKEY_API_PRIVATE_KEY",
    "TURNKEY_API_PUBLIC_KEY",
    "TURNKEY_ORGANIZATION_ID",
    "TURNKEY_SIGN_WITH",
    "TURNKEY_BASE_URL",
    "ITERATIONS",
    "SIGN_PAYLOAD",
    "LOG_LEVEL",
)

# Mock return values
MOCK_SIGN_RESPONSE = {
    "activity": {
        "status": "ACTIVITY_STATUS_COMPLETED",
        "result": {"signRawPayloadResult": {"r": "ab", "s": "cd", "v": "00"}},
    }
}
TEST_STAMP_VALUE = "test-stamp"

# Sample latencies
TEN_SAMPLES = [10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0, 80.0, 90.0, 100.0]
