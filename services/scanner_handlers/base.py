from typing import Optional


class EventError(Exception):
    """
    웹훅 처리 중 2xx 가 아닌 결과
    - status_code: 응답 코드
    - payload: 응답 본문 (JSON)
    """

    def __init__(self, status_code: int, payload: dict):
        super().__init__(payload.get("error", ""))
        self.status_code = status_code
        self.payload = payload

    @classmethod
    def of(cls, status_code: int, error: str, details: Optional[str] = None) -> "EventError":
        payload = {"error": error}
        if details is not None:
            payload["details"] = details
        return cls(status_code, payload)
