from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class ScannerPreflightMiddleware(BaseHTTPMiddleware):
    """
    스캐너 웹훅 경로의 OPTIONS 요청은 출처와 상관없이 빈 200 + 고정 CORS 헤더로 응답
    - CORSMiddleware 바깥에 등록해야 브라우저 preflight 도 여기서 끝남
    """

    def __init__(self, app, paths, headers: dict):
        super().__init__(app)
        self.paths = frozenset(paths)
        self.headers = dict(headers)

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" and request.url.path in self.paths:
            return Response(status_code=200, headers=self.headers)
        return await call_next(request)
