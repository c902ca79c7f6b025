import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
# HTTP 라이브러리 디버그 로그 비활성화
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers
from middlewares.preflight import ScannerPreflightMiddleware

# ✅ DB (모델은 라우터 임포트 시 함께 로드됨)
from database.db import Base, engine

# ✅ 라우터 임포트
from routers import (
    attendance, dashboard, finger_login_logs, scanner, students, users,
)

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS 설정 (대시보드 프론트엔드 + 지문 스캐너 장치)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
app.add_middleware(TimingMiddleware)

# ✅ 스캐너 웹훅 OPTIONS 는 CORS 미들웨어보다 먼저 빈 200 으로 응답 (마지막 등록 = 가장 바깥)
app.add_middleware(
    ScannerPreflightMiddleware,
    paths=scanner.SCANNER_PATHS,
    headers=scanner.CORS_HEADERS,
)

# ✅ 전역 에러 핸들러 등록 (일관된 JSON 에러 포맷)
add_error_handlers(app)

# ✅ 스캐너 웹훅: 루트 경로 그대로 (/finger-login, /log-fingerprint, /mark-attendance)
app.include_router(scanner.router)

# ✅ /v1 프리픽스 대시보드 라우터 등록
app.include_router(attendance.router,         prefix="/v1")
app.include_router(dashboard.router,          prefix="/v1")
app.include_router(finger_login_logs.router,  prefix="/v1")
app.include_router(students.router,           prefix="/v1")
app.include_router(users.router,              prefix="/v1")


@app.on_event("startup")
def _create_tables():
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("DB 테이블 생성 확인 완료")


# ✅ 헬스체크 엔드포인트
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}
