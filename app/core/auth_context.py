from fastapi import Request

from app.core.errors import NotAuthenticated

TOKEN_COOKIE = "access_token"


def get_current_token(request: Request) -> str:
    # cookie (web console)
    token = request.cookies.get(TOKEN_COOKIE)

    # Authorization header (scripts, mobile)
    if not token:
        auth = request.headers.get("Authorization")
        if auth and auth.startswith("Bearer "):
            token = auth.split(" ", 1)[1]

    if not token:
        raise NotAuthenticated()

    return token
