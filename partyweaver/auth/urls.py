SIGN_IN_URL = "/api/v1/auth/sign-in"
VERIFY_SIGN_IN_URL = "/api/v1/auth/verify"
CURRENT_USER_URL = "/api/v1/auth/me"
