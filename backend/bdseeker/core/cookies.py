from fastapi import Request, Response

AUTH_COOKIE = "auth_token"
REFRESH_COOKIE = "refresh_token"
SESSION_COOKIE = "session_id"
REFRESH_COOKIE_PATH = "/api/v1/auth/refresh"


def set_auth_cookie(response: Response, token: str, max_age: int, secure: bool = False) -> None:
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        max_age=max_age,
        path="/",
        httponly=True,
        secure=secure,
        samesite="lax",
    )


def get_auth_cookie(request: Request) -> str | None:
    return request.cookies.get(AUTH_COOKIE) or None


def clear_auth_cookie(response: Response, secure: bool = False) -> None:
    response.delete_cookie(key=AUTH_COOKIE, path="/", httponly=True, secure=secure, samesite="lax")


def clear_refresh_cookie(response: Response, secure: bool = False) -> None:
    response.delete_cookie(key=REFRESH_COOKIE, path=REFRESH_COOKIE_PATH, httponly=True, secure=secure, samesite="strict")


def clear_session_cookie(response: Response, secure: bool = False) -> None:
    response.delete_cookie(key=SESSION_COOKIE, path="/", httponly=True, secure=secure, samesite="lax")


def clear_all_auth_cookies(response: Response, secure: bool = False) -> None:
    clear_auth_cookie(response, secure)
    clear_refresh_cookie(response, secure)
    clear_session_cookie(response, secure)
